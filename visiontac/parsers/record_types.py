"""Track-log record types and column layouts."""

from __future__ import annotations

from dataclasses import asdict, dataclass
import datetime as dt
from enum import Enum
from typing import Any, Dict, Optional

from ..constants import (
    ADVANCED_FIELD_COUNT,
    ADVANCED_HEADER,
    MINIMAL_FIELD_COUNT,
    STANDARD_FIELD_COUNT,
    STANDARD_HEADER,
)


class LogLayout(Enum):
    """Column layout of a track log."""

    MINIMAL = "minimal"
    STANDARD = "standard"
    ADVANCED = "advanced"

    @property
    def field_count(self) -> int:
        return _FIELD_COUNTS[self]

    @property
    def header(self) -> Optional[str]:
        """Header line announcing this layout, None for MINIMAL."""
        return _HEADERS.get(self)

    @property
    def is_extended(self) -> bool:
        return self is LogLayout.ADVANCED

    @classmethod
    def from_header(cls, line: str) -> Optional["LogLayout"]:
        """Return the layout whose header equals ``line`` exactly."""
        for layout, header in _HEADERS.items():
            if line == header:
                return layout
        return None


_FIELD_COUNTS = {
    LogLayout.MINIMAL: MINIMAL_FIELD_COUNT,
    LogLayout.STANDARD: STANDARD_FIELD_COUNT,
    LogLayout.ADVANCED: ADVANCED_FIELD_COUNT,
}

_HEADERS = {
    LogLayout.STANDARD: STANDARD_HEADER,
    LogLayout.ADVANCED: ADVANCED_HEADER,
}


@dataclass(frozen=True, slots=True)
class Record:
    """One fix from a standard track log."""

    index: int
    tag: str
    timestamp: dt.datetime
    latitude: float
    longitude: float
    height: int
    speed: int
    heading: int
    vox: str = ""

    @property
    def is_extended(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ExtendedRecord(Record):
    """A fix from an advanced track log, with fix-quality columns."""

    fix_mode: str = ""
    valid: str = ""
    pdop: float = 0.0
    hdop: float = 0.0
    vdop: float = 0.0

    @property
    def is_extended(self) -> bool:
        return True


__all__ = ["LogLayout", "Record", "ExtendedRecord"]
