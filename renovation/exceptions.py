"""Custom exception hierarchy for the renovation package."""

from __future__ import annotations


class RenovationError(Exception):
    """Base exception for all renovation errors."""


class BuildError(RenovationError):
    """Raised when a builder is asked to build with required fields missing.

    ``missing_fields`` lists every field that was absent, so callers can
    report all problems at once instead of fixing them one build at a time.
    """

    def __init__(self, description: str, missing_fields: list[str] | None = None) -> None:
        super().__init__(description)
        self.description = description
        self.missing_fields = list(missing_fields or [])


class RecordParseError(RenovationError):
    """Raised when a room record line cannot be split into its parts."""

    def __init__(self, message: str, line_number: int | None = None, line: str = "") -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line
