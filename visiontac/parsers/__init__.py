"""Track-log parsing components."""

from .record_types import ExtendedRecord, LogLayout, Record
from .line_parser import parse_fields, parse_line
from .stream_parser import ParserState, TrackLogParser, open_track_log, parse_file

__all__ = [
    "ExtendedRecord",
    "LogLayout",
    "ParserState",
    "Record",
    "TrackLogParser",
    "open_track_log",
    "parse_fields",
    "parse_file",
    "parse_line",
]
