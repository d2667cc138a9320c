"""Split Rector JSON output into per-file composer patches."""

__version__ = "0.1.0"
