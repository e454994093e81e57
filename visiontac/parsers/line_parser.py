"""Decoding of one comma-separated track-log line into a record."""

from __future__ import annotations

from typing import Any, Callable, Dict, Sequence

from ..constants import ADVANCED_COLUMNS, FIELD_SEPARATOR, STANDARD_COLUMNS
from ..errors import FieldCountError, FormatError
from .field_decoders import (
    decode_float,
    decode_int,
    decode_latitude,
    decode_longitude,
    decode_tag,
    decode_text,
    decode_timestamp,
)
from .record_types import ExtendedRecord, LogLayout, Record

# Error labels are the header column names
(
    _INDEX, _TAG, _DATE, _TIME, _LATITUDE, _LONGITUDE, _HEIGHT, _SPEED, _HEADING,
) = STANDARD_COLUMNS[:9]
_PDOP, _HDOP, _VDOP = ADVANCED_COLUMNS[11:14]
_TIMESTAMP = f"{_DATE}/{_TIME}"


def _decode(column: str, decoder: Callable[..., Any], *tokens: str) -> Any:
    try:
        return decoder(*tokens)
    except FormatError as e:
        if e.field is None:
            e.field = column
        raise


def _decode_common(fields: Sequence[str]) -> Dict[str, Any]:
    """Decode the nine leading columns shared by every layout."""
    return {
        "index": _decode(_INDEX, decode_int, fields[0]),
        "tag": _decode(_TAG, decode_tag, fields[1]),
        "timestamp": _decode(_TIMESTAMP, decode_timestamp, fields[2], fields[3]),
        "latitude": _decode(_LATITUDE, decode_latitude, fields[4]),
        "longitude": _decode(_LONGITUDE, decode_longitude, fields[5]),
        "height": _decode(_HEIGHT, decode_int, fields[6]),
        "speed": _decode(_SPEED, decode_int, fields[7]),
        "heading": _decode(_HEADING, decode_int, fields[8]),
    }


def parse_fields(fields: Sequence[str], layout: LogLayout = LogLayout.STANDARD) -> Record:
    """Build a record from already split fields.

    Raises:
        FieldCountError: ``fields`` does not have ``layout.field_count`` items.
        FormatError: the first field that fails to decode.
    """
    expected = layout.field_count
    if len(fields) != expected:
        raise FieldCountError(expected, len(fields))

    values = _decode_common(fields)

    if layout is LogLayout.MINIMAL:
        return Record(**values)

    if layout is LogLayout.STANDARD:
        return Record(**values, vox=decode_text(fields[9]))

    return ExtendedRecord(
        **values,
        fix_mode=decode_text(fields[9]),
        valid=decode_text(fields[10]),
        pdop=_decode(_PDOP, decode_float, fields[11]),
        hdop=_decode(_HDOP, decode_float, fields[12]),
        vdop=_decode(_VDOP, decode_float, fields[13]),
        vox=decode_text(fields[14]),
    )


def parse_line(line: str, layout: LogLayout = LogLayout.STANDARD) -> Record:
    """Split ``line`` on commas and decode it with :func:`parse_fields`."""
    return parse_fields(line.split(FIELD_SEPARATOR), layout)


__all__ = ["parse_fields", "parse_line"]
