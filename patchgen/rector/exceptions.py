class PatchgenError(Exception):
    """Base class for errors raised while turning a report into patches."""


class ParseError(PatchgenError):
    """The report bytes are not valid JSON."""

    def __init__(self, original_error: Exception):
        self.original_error = original_error
        super().__init__(f"Cannot parse JSON output: {original_error}")


class SchemaError(PatchgenError):
    """The decoded report does not have the expected shape."""


class MalformedEntryError(PatchgenError):
    """A ``file_diffs`` entry lacks a string ``file`` or ``diff`` value."""

    def __init__(self, index: int, field: str, reason: str = "is missing"):
        self.index = index
        self.field = field
        super().__init__(f"file_diffs[{index}]: '{field}' {reason}")
