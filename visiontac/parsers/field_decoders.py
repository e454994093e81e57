"""Decoders for individual track-log fields.

Every decoder takes the raw token as it appears between commas and either
returns a typed value or raises :class:`~visiontac.errors.FormatError`.
Numeric columns are right-padded with NUL bytes by the device; padding is
removed by :func:`strip_padding` before any numeric parse.
"""

from __future__ import annotations

import datetime as dt
import re

import numpy as np

from ..constants import (
    CENTURY_PIVOT,
    DATE_TOKEN_LENGTH,
    LATITUDE_DIRECTIONS,
    LONGITUDE_DIRECTIONS,
    PAD_CHAR,
    TIME_TOKEN_LENGTH,
)
from ..errors import FormatError

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_UNSIGNED_FLOAT_RE = re.compile(r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_DATE_RE = re.compile(rf"[0-9]{{{DATE_TOKEN_LENGTH}}}")
_TIME_RE = re.compile(rf"[0-9]{{{TIME_TOKEN_LENGTH}}}")


def strip_padding(token: str) -> str:
    """Remove trailing NUL padding from a fixed-width field."""
    return token.rstrip(PAD_CHAR)


def decode_int(token: str) -> int:
    """Decode a NUL-padded decimal integer."""
    value = strip_padding(token)
    if not _INT_RE.fullmatch(value):
        raise FormatError(f"invalid integer {value!r}", value=token)
    try:
        return int(value)
    except ValueError as e:
        # Digit strings past the interpreter's int conversion limit
        raise FormatError(f"invalid integer {value[:16]!r}...: {e}", value=token) from e


def _to_float32(value: str, token: str) -> float:
    with np.errstate(over="ignore"):
        result = np.float32(float(value))
    if not np.isfinite(result):
        raise FormatError(f"float out of range {value!r}", value=token)
    return float(result)


def decode_float(token: str) -> float:
    """Decode a NUL-padded decimal number at single precision."""
    value = strip_padding(token)
    if not _FLOAT_RE.fullmatch(value):
        raise FormatError(f"invalid float {value!r}", value=token)
    return _to_float32(value, token)


def decode_tag(token: str) -> str:
    """Decode the one-character record tag."""
    if len(token) != 1:
        raise FormatError(f"expected tag of length 1, got {token!r}", value=token)
    return token


def decode_text(token: str) -> str:
    """Decode a free-text column such as VOX."""
    return strip_padding(token)


def decode_timestamp(date_token: str, time_token: str) -> dt.datetime:
    """Combine ``YYMMDD`` and ``HHMMSS`` tokens into an aware UTC datetime."""
    if not _DATE_RE.fullmatch(date_token):
        raise FormatError(f"invalid date {date_token!r}", value=date_token)
    if not _TIME_RE.fullmatch(time_token):
        raise FormatError(f"invalid time {time_token!r}", value=time_token)

    yy = int(date_token[0:2])
    year = (2000 if yy < CENTURY_PIVOT else 1900) + yy
    try:
        return dt.datetime(
            year,
            int(date_token[2:4]),
            int(date_token[4:6]),
            int(time_token[0:2]),
            int(time_token[2:4]),
            int(time_token[4:6]),
            tzinfo=dt.timezone.utc,
        )
    except ValueError as e:
        raise FormatError(
            f"invalid timestamp {date_token + time_token!r}: {e}",
            value=date_token + time_token,
        ) from e


def decode_coordinate(token: str, positive: str, negative: str) -> float:
    """Decode a coordinate whose last character is its direction letter.

    The numeric part is an unsigned magnitude; ``negative`` flips the
    sign and any letter other than ``positive``/``negative`` is rejected.
    """
    value = strip_padding(token)
    if not value:
        raise FormatError("empty coordinate", value=token)

    magnitude, direction = value[:-1], value[-1]
    if direction == positive:
        sign = 1.0
    elif direction == negative:
        sign = -1.0
    else:
        raise FormatError(f"unexpected direction {direction!r}", value=token)

    if not _UNSIGNED_FLOAT_RE.fullmatch(magnitude):
        raise FormatError(f"invalid coordinate {value!r}", value=token)
    return sign * _to_float32(magnitude, token)


def decode_latitude(token: str) -> float:
    return decode_coordinate(token, *LATITUDE_DIRECTIONS)


def decode_longitude(token: str) -> float:
    return decode_coordinate(token, *LONGITUDE_DIRECTIONS)


__all__ = [
    "strip_padding",
    "decode_int",
    "decode_float",
    "decode_tag",
    "decode_text",
    "decode_timestamp",
    "decode_coordinate",
    "decode_latitude",
    "decode_longitude",
]
