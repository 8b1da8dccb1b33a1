"""SPFF decoder: rebuild RGB pixels from one stored channel per pixel.

Each pixel keeps its own stored channel. The two channels it did not store
are inferred from its 8-connected neighbours, each of which contributes only
the channel it stored itself. Neighbours outside the image are skipped, so
edge and corner pixels have fewer contributors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Final

import numpy as np
from PIL import Image

from ..exceptions import AllocationError
from ..models.encoded import EncodedImage
from ..models.enums import ReconstructionMode
from .channels import channel_map

_LOGGER = logging.getLogger(__name__)

# (row, col) offsets in fold order: left, top-left, bottom-left, right, top-right,
# bottom-right, top, bottom.
# LEGACY reconstruction depends on this order.
NEIGHBOUR_OFFSETS: Final = (
    (0, -1),   # left
    (-1, -1),  # top left
    (1, -1),   # bottom left
    (0, 1),    # right
    (-1, 1),   # top right
    (1, 1),    # bottom right
    (-1, 0),   # top
    (1, 0),    # bottom
)


def _neighbours(
    samples: list[list[int]],
    channels: list[list[int]],
    width: int,
    height: int,
    row: int,
    col: int,
) -> Iterator[tuple[int, int]]:
    """Yield (channel, value) for each in-bounds neighbour in fold order."""
    for d_row, d_col in NEIGHBOUR_OFFSETS:
        r = row + d_row
        c = col + d_col
        if 0 <= r < height and 0 <= c < width:
            yield channels[r][c], samples[r][c]


def _reconstruct_legacy(
    neighbours: Iterable[tuple[int, int]],
    own_channel: int,
    own_value: int,
) -> list[int]:
    """Sequential halving fold with zero meaning "no contribution"."""
    rgb = [0, 0, 0]
    for channel, value in neighbours:
        if value > 0:
            rgb[channel] = (rgb[channel] + value) // 2

    if own_value > 0:
        rgb[own_channel] = own_value
    return rgb


def _reconstruct_mean(
    neighbours: Iterable[tuple[int, int]],
    own_channel: int,
    own_value: int,
) -> list[int]:
    """Rounded mean per channel over every neighbour that stored it."""
    totals = [0, 0, 0]
    counts = [0, 0, 0]
    for channel, value in neighbours:
        totals[channel] += value
        counts[channel] += 1

    rgb = [
        (total + count // 2) // count if count else 0
        for total, count in zip(totals, counts)
    ]
    rgb[own_channel] = own_value
    return rgb


_RECONSTRUCTORS = {
    ReconstructionMode.LEGACY: _reconstruct_legacy,
    ReconstructionMode.MEAN: _reconstruct_mean,
}


def decode_pixels(
    encoded: EncodedImage,
    mode: ReconstructionMode = ReconstructionMode.MEAN,
) -> np.ndarray:
    """Reconstruct an RGB pixel array.

    Args:
        encoded: Parsed SPFF image
        mode: Reconstruction strategy (default: MEAN)

    Returns:
        Array of shape (height, width, 3), dtype uint8

    Raises:
        AllocationError: If the output array cannot be allocated
    """
    mode = ReconstructionMode(mode)
    reconstruct = _RECONSTRUCTORS[mode]
    width, height = encoded.width, encoded.height

    try:
        output = np.zeros((height, width, 3), dtype=np.uint8)
        samples = (
            np.frombuffer(encoded.payload, dtype=np.uint8).reshape(height, width).tolist()
        )
        channels = channel_map(height, width).tolist()
    except MemoryError as err:
        raise AllocationError(
            f"Cannot allocate output for {width}x{height} image"
        ) from err

    for row in range(height):
        for col in range(width):
            output[row, col] = reconstruct(
                _neighbours(samples, channels, width, height, row, col),
                channels[row][col],
                samples[row][col],
            )

    _LOGGER.debug("Decoded %dx%d image (%s)", width, height, mode.name)
    return output


def decode_image(
    data: bytes,
    mode: ReconstructionMode = ReconstructionMode.MEAN,
) -> Image.Image:
    """Decode SPFF bytes to an RGB PIL image.

    Args:
        data: Header followed by one byte per pixel
        mode: Reconstruction strategy (default: MEAN)

    Returns:
        Reconstructed RGB image

    Raises:
        TruncatedInputError: If the data ends early
        SizeMismatchError: If the payload length doesn't match the header
        InvalidDimensionsError: If the header declares a zero dimension
    """
    encoded = EncodedImage.from_bytes(data)
    return Image.fromarray(decode_pixels(encoded, mode))
