"""Exceptions raised while reading track logs."""

from __future__ import annotations

from typing import Optional


class TrackLogError(Exception):
    """Base class for all track-log parsing errors."""


class HeaderError(TrackLogError):
    """The first line of the stream is not a known header."""

    def __init__(self, message: str = "no header matched", header: Optional[str] = None) -> None:
        super().__init__(message)
        self.header = header


class FormatError(TrackLogError):
    """A field does not match its expected lexical form.

    ``field`` is the column name when known and ``line_number`` is set
    (1-based, header included) when the error is raised by the stream
    parser.
    """

    def __init__(
        self,
        message: str,
        *,
        value: Optional[str] = None,
        field: Optional[str] = None,
        line_number: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.value = value
        self.field = field
        self.line_number = line_number

    def __str__(self) -> str:
        parts = []
        if self.line_number is not None:
            parts.append(f"line {self.line_number}")
        if self.field:
            parts.append(self.field)
        if parts:
            return f"{', '.join(parts)}: {self.message}"
        return self.message


class FieldCountError(FormatError):
    """A data line has the wrong number of comma-separated fields."""

    def __init__(self, expected: int, actual: int, *, line_number: Optional[int] = None) -> None:
        super().__init__(
            f"unexpected number of fields (expected {expected}, got {actual})",
            line_number=line_number,
        )
        self.expected = expected
        self.actual = actual


__all__ = ["TrackLogError", "HeaderError", "FormatError", "FieldCountError"]
