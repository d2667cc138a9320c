import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from patchgen.rector.exceptions import ParseError, SchemaError
from patchgen.rector.models import DiffEntry

logger = logging.getLogger(__name__)

FILE_DIFFS_KEY = "file_diffs"


def parse_report(raw: bytes) -> list[DiffEntry]:
    try:
        parsed = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ParseError(exc) from exc

    if not isinstance(parsed, dict):
        raise SchemaError("Invalid JSON structure.")

    if FILE_DIFFS_KEY not in parsed:
        raise SchemaError("The JSON output does not contain file_diffs")

    file_diffs = parsed[FILE_DIFFS_KEY]
    if not isinstance(file_diffs, list):
        raise SchemaError(
            f"file_diffs must be a list, got {type(file_diffs).__name__}"
        )

    return [to_entry(idx, item) for idx, item in enumerate(file_diffs)]


def to_entry(index: int, item: Any) -> DiffEntry:
    if not isinstance(item, Mapping):
        return DiffEntry(index=index)
    return DiffEntry(index=index, file=item.get("file"), diff=item.get("diff"))


def read_report(path: Path) -> list[DiffEntry]:
    path = Path(path)
    raw = path.read_bytes()
    entries = parse_report(raw)
    logger.debug("Parsed %d file diff(s) from %s", len(entries), path)
    return entries
