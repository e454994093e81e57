"""Header-driven parsing of a whole track-log stream.

The first line selects the layout (standard or advanced); every following
line is decoded with that layout until end of input. The parser pulls one
line per call and never closes the stream it was given.
"""

from __future__ import annotations

import contextlib
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, TextIO, Union

from ..config import TrackLogConfig
from ..core.logging_utils import get_module_logger
from ..errors import FormatError, HeaderError
from .line_parser import parse_line
from .record_types import LogLayout, Record

logger = get_module_logger("TrackLogParser")


class ParserState(Enum):
    AWAITING_HEADER = "awaiting_header"
    STANDARD = "standard"
    ADVANCED = "advanced"
    DONE = "done"
    FAILED = "failed"


def _chomp(line: str) -> str:
    """Drop the line terminator (``\\n`` or ``\\r\\n``)."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


class TrackLogParser:
    """Pull parser over a text stream holding one track log.

    Construction reads the header line and raises :class:`HeaderError`
    when it is not one of the known headers. :meth:`parse` then returns one
    record per call and ``None`` once the stream is exhausted.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._state = ParserState.AWAITING_HEADER
        self._line_number = 0
        self._records_parsed = 0
        self._error: Optional[FormatError] = None

        header = self._read_line()
        layout = LogLayout.from_header(header) if header is not None else None
        if layout is None:
            self._state = ParserState.FAILED
            raise HeaderError(header=header)

        self._layout = layout
        self._state = ParserState.ADVANCED if layout.is_extended else ParserState.STANDARD
        logger.debug("Detected %s layout (%d fields)", layout.value, layout.field_count)

    @property
    def layout(self) -> LogLayout:
        return self._layout

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def line_number(self) -> int:
        """Number of lines consumed so far, header included."""
        return self._line_number

    @property
    def is_extended(self) -> bool:
        """True when records are :class:`ExtendedRecord` instances."""
        return self._layout.is_extended

    def _read_line(self) -> Optional[str]:
        line = self._stream.readline()
        if not line:
            return None
        self._line_number += 1
        return _chomp(line)

    def parse(self) -> Optional[Record]:
        """Return the next record, or None at end of input.

        Raises:
            FormatError: the line could not be decoded. The parser stays
                failed and later calls raise the same error.
            OSError: reading the stream failed.
        """
        if self._state is ParserState.DONE:
            return None
        if self._error is not None:
            raise self._error

        line = self._read_line()
        if line is None:
            self._state = ParserState.DONE
            logger.debug(
                "End of input after %d records (%d lines)",
                self._records_parsed,
                self._line_number,
            )
            return None

        try:
            record = parse_line(line, self._layout)
        except FormatError as e:
            e.line_number = self._line_number
            self._error = e
            self._state = ParserState.FAILED
            raise

        self._records_parsed += 1
        return record

    def parse_all(self) -> List[Record]:
        """Parse every remaining record.

        All-or-nothing: on the first error the exception propagates and no
        partial list is returned.
        """
        return list(self)

    def __iter__(self) -> Iterator[Record]:
        while True:
            record = self.parse()
            if record is None:
                return
            yield record


@contextlib.contextmanager
def open_track_log(
    path: Union[str, Path],
    config: Optional[TrackLogConfig] = None,
) -> Iterator[TrackLogParser]:
    """Open ``path`` and yield a :class:`TrackLogParser` over it.

    The file is closed when the context exits.
    """
    config = config or TrackLogConfig()
    with open(path, "r", encoding=config.encoding, errors=config.errors, newline="\n") as f:
        logger.debug("Opened track log %s", path)
        yield TrackLogParser(f)


def parse_file(
    path: Union[str, Path],
    config: Optional[TrackLogConfig] = None,
) -> List[Record]:
    """Parse every record of the track log at ``path``."""
    with open_track_log(path, config) as parser:
        return parser.parse_all()


__all__ = ["ParserState", "TrackLogParser", "open_track_log", "parse_file"]
