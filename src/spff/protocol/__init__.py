"""SPFF wire format."""

from .header import HEADER_FORMAT, HEADER_SIZE, MAX_DIMENSION, pack_header, unpack_header

__all__ = [
    "HEADER_FORMAT",
    "HEADER_SIZE",
    "MAX_DIMENSION",
    "pack_header",
    "unpack_header",
]
