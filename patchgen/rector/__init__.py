from patchgen.rector.exceptions import (
    MalformedEntryError,
    ParseError,
    PatchgenError,
    SchemaError,
)
from patchgen.rector.inputs import (
    FILE_DIFFS_KEY,
    parse_report,
    read_report,
    to_entry,
)
from patchgen.rector.models import DiffEntry, Patch
from patchgen.rector.output import write_patches
from patchgen.rector.synthesize import (
    build_patch,
    extract_package,
    patch_name,
    render_patch,
    rewrite_headers,
    synthesize,
)

__all__ = [
    "FILE_DIFFS_KEY",
    "parse_report",
    "read_report",
    "to_entry",
    "DiffEntry",
    "Patch",
    "PatchgenError",
    "ParseError",
    "SchemaError",
    "MalformedEntryError",
    "extract_package",
    "patch_name",
    "rewrite_headers",
    "render_patch",
    "build_patch",
    "synthesize",
    "write_patches",
]
