from typing import Any

from pydantic import BaseModel, ConfigDict


class DiffEntry(BaseModel):
    """
    One element of a report's ``file_diffs`` list.

    ``file`` and ``diff`` are kept exactly as decoded; type checks happen
    when the entry is synthesized.
    """

    model_config = ConfigDict(
        frozen=True,
    )

    index: int
    file: Any = None
    diff: Any = None


class Patch(BaseModel):
    model_config = ConfigDict(
        frozen=True,
    )

    name: str
    package: str | None
    content: str
