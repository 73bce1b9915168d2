from pathlib import Path
from typing import Any


class ADFConversionError(Exception):
    """Base exception for all conversion errors."""

    def __init__(self, message: str):
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for JSON output."""
        return {"detail": str(self)}


class UnsupportedElementError(ADFConversionError):
    """Raised when an element is handed to a converter that cannot handle it."""

    def __init__(self, tag: str | None, *, message: str | None = None):
        super().__init__(message or f"Expected a <ul> or <ol> element, got <{tag}>")
        self.tag = tag

    def to_dict(self) -> dict[str, Any]:
        return {"detail": str(self), "tag": self.tag}


class InputReadError(ADFConversionError):
    """Raised when an input file cannot be read."""

    def __init__(self, path: Path, reason: str, *, message: str | None = None):
        super().__init__(message or f"Cannot read {str(path)!r}: {reason}")
        self.path = path
        self.reason = reason

    def to_dict(self) -> dict[str, Any]:
        return {"detail": str(self), "path": str(self.path)}
