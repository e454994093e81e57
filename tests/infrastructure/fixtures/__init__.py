"""Sample track-log data captured from a Visiontac logger.

Usage:
    from tests.infrastructure.fixtures import STANDARD_LINES, build_log

    text = build_log(STANDARD_HEADER, STANDARD_LINES)
"""

from typing import Iterable

VOX_PAD = "\x00" * 9

STANDARD_LINE = (
    "23\x00\x00\x00\x00,T,090512,041041,41.302453S,174.778450E,"
    f"2\x00\x00,3\x00\x00\x00,1\x00\x00,{VOX_PAD}"
)

ADVANCED_LINE = (
    "1\x00\x00\x00\x00\x00,T,111213,185059,36.874506S,174.779188E,"
    f"152\x00\x00,79\x00\x00,120,3D,SPS ,2.1\x00\x00,1.9\x00\x00,1.0\x00\x00,{VOX_PAD}"
)

STANDARD_LINES = [
    f"1\x00\x00\x00\x00\x00,T,090512,041041,41.302453S,174.778450E,2\x00\x00,3\x00\x00\x00,1\x00\x00,{VOX_PAD}",
    f"2\x00\x00\x00\x00\x00,T,090512,041042,41.302460S,174.778461E,3\x00\x00,4\x00\x00\x00,2\x00\x00,{VOX_PAD}",
]

ADVANCED_LINES = [
    f"1\x00\x00\x00\x00\x00,T,090512,041041,41.302453S,174.778450E,2\x00\x00,3\x00\x00\x00,1\x00\x00,3D,SPS ,1.3\x00\x00,1.0\x00\x00,0.9\x00\x00,{VOX_PAD}",
    f"2\x00\x00\x00\x00\x00,T,090512,041042,41.302460S,174.778461E,2\x00\x00,3\x00\x00\x00,1\x00\x00,3D,SPS ,1.7\x00\x00,0.8\x00\x00,1.5\x00\x00,{VOX_PAD}",
]


def build_log(header: str, lines: Iterable[str], newline: str = "\n") -> str:
    """Join a header and data lines the way the device writes them."""
    return newline.join([header, *lines])
