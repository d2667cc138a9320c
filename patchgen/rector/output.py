import logging
from collections.abc import Mapping
from pathlib import Path

from patchgen.util.paths import ensure_dir

logger = logging.getLogger(__name__)


def write_patches(patches: Mapping[str, str], output_dir: Path) -> list[Path]:
    """
    Write each patch to ``output_dir / name`` and return the written paths.

    Existing files are overwritten. Content is written byte-for-byte as
    UTF-8 with no newline translation.
    """
    output_dir = ensure_dir(Path(output_dir))
    written: list[Path] = []

    for name, content in patches.items():
        patch_path = output_dir / name
        patch_path.write_bytes(content.encode("utf-8"))
        logger.debug("Wrote %d bytes to %s", len(content), patch_path)
        written.append(patch_path)

    return written
