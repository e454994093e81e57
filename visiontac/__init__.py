"""Parser for Visiontac GPS track logs (standard and advanced CSV layouts)."""

from __future__ import annotations

from importlib import metadata

from .config import TrackLogConfig
from .errors import FieldCountError, FormatError, HeaderError, TrackLogError
from .parsers import (
    ExtendedRecord,
    LogLayout,
    ParserState,
    Record,
    TrackLogParser,
    open_track_log,
    parse_file,
)

try:
    __version__ = metadata.version("visiontac")
except metadata.PackageNotFoundError:  # pragma: no cover - local dev
    __version__ = "0.0.0"


__all__ = [
    "__version__",
    "ExtendedRecord",
    "FieldCountError",
    "FormatError",
    "HeaderError",
    "LogLayout",
    "ParserState",
    "Record",
    "TrackLogConfig",
    "TrackLogError",
    "TrackLogParser",
    "open_track_log",
    "parse_file",
]
