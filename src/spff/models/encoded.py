"""Encoded SPFF image model."""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import InvalidDimensionsError, SizeMismatchError, TruncatedInputError
from ..protocol.header import HEADER_SIZE, MAX_DIMENSION, pack_header, unpack_header


@dataclass(frozen=True, slots=True)
class EncodedImage:
    """One stored channel byte per pixel, row-major.

    The channel each byte belongs to is implied by its position and is
    never stored.
    """

    width: int
    height: int
    payload: bytes

    def __post_init__(self) -> None:
        if not 0 < self.width <= MAX_DIMENSION or not 0 < self.height <= MAX_DIMENSION:
            raise InvalidDimensionsError(
                f"Invalid dimensions: {self.width}x{self.height}"
            )
        if len(self.payload) != self.width * self.height:
            raise SizeMismatchError(
                f"Payload is {len(self.payload)} bytes, expected "
                f"{self.width * self.height} for {self.width}x{self.height}"
            )

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) in pixels."""
        return self.width, self.height

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def to_bytes(self) -> bytes:
        """Serialize to header + payload."""
        return pack_header(self.width, self.height) + self.payload

    @classmethod
    def from_bytes(cls, data: bytes) -> EncodedImage:
        """Parse encoded bytes.

        Raises:
            TruncatedInputError: If header or payload is incomplete
            InvalidDimensionsError: If the header declares a zero dimension
            SizeMismatchError: If trailing bytes follow the payload
        """
        width, height = unpack_header(data)

        expected = HEADER_SIZE + width * height
        if len(data) < expected:
            raise TruncatedInputError(
                f"Encoded data too short: {len(data)} bytes (need {expected} "
                f"for {width}x{height})"
            )
        if len(data) > expected:
            raise SizeMismatchError(
                f"Encoded data too long: {len(data)} bytes (expected {expected} "
                f"for {width}x{height})"
            )

        return cls(width=width, height=height, payload=bytes(data[HEADER_SIZE:]))
