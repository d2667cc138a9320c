import logging
import re
from collections.abc import Iterable

from patchgen.rector.exceptions import MalformedEntryError
from patchgen.rector.models import DiffEntry, Patch

logger = logging.getLogger(__name__)

PACKAGE_RE = re.compile(r"vendor/([\w-]+/[\w.-]+)", re.ASCII)
ORIGINAL_HEADER_RE = re.compile(r"^--- Original", re.MULTILINE)
NEW_HEADER_RE = re.compile(r"^\+\+\+ New", re.MULTILINE)

BANNER_TEMPLATE = "@package {package}\n@ticket {ticket}\n{diff}"


def extract_package(file: str) -> str | None:
    """Return the ``<scope>/<name>`` segment following ``vendor/``, if any."""
    match = PACKAGE_RE.search(file)
    if match is None:
        return None
    return match.group(1)


def patch_name(file: str, ticket: str) -> str:
    return f"{ticket}-{file.replace('vendor/', '').replace('/', '_')}.patch"


def rewrite_headers(diff: str, name: str) -> str:
    """
    Point the ``--- Original`` / ``+++ New`` markers at ``name``.

    Only the first occurrence of each marker is replaced and the rest of the
    header line is kept. A diff without the markers is returned unchanged.
    """
    diff = ORIGINAL_HEADER_RE.sub(lambda _: f"--- {name}", diff, count=1)
    return NEW_HEADER_RE.sub(lambda _: f"+++ {name}", diff, count=1)


def render_patch(package: str | None, ticket: str, diff: str) -> str:
    return BANNER_TEMPLATE.format(
        package=package or "",
        ticket=ticket,
        diff=diff,
    )


def _require_str(entry: DiffEntry, field: str) -> str:
    value = getattr(entry, field)
    if value is None:
        raise MalformedEntryError(entry.index, field)
    if not isinstance(value, str):
        raise MalformedEntryError(
            entry.index,
            field,
            f"must be a string, got {type(value).__name__}",
        )
    return value


def build_patch(entry: DiffEntry, ticket: str) -> Patch:
    file = _require_str(entry, "file")
    diff = _require_str(entry, "diff")

    package = extract_package(file)
    if package is None:
        logger.warning(
            "No vendor/<scope>/<name> segment in %r; @package will be empty",
            file,
        )

    name = patch_name(file, ticket)
    content = render_patch(package, ticket, rewrite_headers(diff, name))
    return Patch(name=name, package=package, content=content)


def synthesize(entries: Iterable[DiffEntry], ticket: str) -> dict[str, str]:
    result: dict[str, str] = {}

    for entry in entries:
        patch = build_patch(entry, ticket)
        if patch.name in result:
            logger.debug(
                "Patch %s produced again by file_diffs[%d]; keeping the later one",
                patch.name,
                entry.index,
            )
        result[patch.name] = patch.content

    return result
