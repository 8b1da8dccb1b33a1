"""SPFF header packing and parsing.

Header layout (little-endian):
    [width:4][height:4]
"""

from __future__ import annotations

import struct
from typing import Final

from ..exceptions import InvalidDimensionsError, TruncatedInputError

HEADER_FORMAT: Final = "<II"
HEADER_SIZE: Final = struct.calcsize(HEADER_FORMAT)  # 8 bytes
MAX_DIMENSION: Final = 0xFFFFFFFF


def _check_dimension(name: str, value: int) -> None:
    if not 0 < value <= MAX_DIMENSION:
        raise InvalidDimensionsError(
            f"{name} out of range: {value} (must be 1-{MAX_DIMENSION})"
        )


def pack_header(width: int, height: int) -> bytes:
    """Build the 8-byte header.

    Args:
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        Packed header bytes

    Raises:
        InvalidDimensionsError: If either dimension is out of range
    """
    _check_dimension("width", width)
    _check_dimension("height", height)
    return struct.pack(HEADER_FORMAT, width, height)


def unpack_header(data: bytes) -> tuple[int, int]:
    """Read (width, height) from the start of encoded data.

    Args:
        data: Encoded data, at least the header

    Returns:
        Tuple of (width, height)

    Raises:
        TruncatedInputError: If data is shorter than the header
        InvalidDimensionsError: If a declared dimension is zero
    """
    if len(data) < HEADER_SIZE:
        raise TruncatedInputError(
            f"Header too short: {len(data)} bytes (need {HEADER_SIZE})"
        )

    width, height = struct.unpack_from(HEADER_FORMAT, data, 0)
    _check_dimension("width", width)
    _check_dimension("height", height)
    return width, height
