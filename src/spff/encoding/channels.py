"""Channel selection pattern shared by the encoder and decoder.

Each pixel stores one channel, cycling red, green, blue along a row. Odd
rows are shifted two places so that, read row by row, the pattern is:

    row 0:  R G B R G B ...
    row 1:  B R G B R G ...
    row 2:  R G B R G B ...
"""

from __future__ import annotations

import numpy as np

from ..models.enums import Channel

_CHANNELS = (Channel.RED, Channel.GREEN, Channel.BLUE)

# The pattern repeats every 2 rows and 3 columns
_PERIOD_ROWS = 2
_PERIOD_COLS = 3


def select_channel(row: int, col: int) -> Channel:
    """Return the channel stored for the pixel at (row, col).

    Args:
        row: Zero-based vertical position
        col: Zero-based horizontal position

    Returns:
        Channel stored at that position
    """
    if row < 0 or col < 0:
        raise ValueError(f"Pixel position must be non-negative, got ({row}, {col})")
    return _CHANNELS[(col + (row % 2) * 2) % 3]


def channel_map(height: int, width: int) -> np.ndarray:
    """Build an (height, width) array of channel indices.

    The array is tiled from select_channel() so both halves of the codec
    use the same pattern.
    """
    tile = np.array(
        [[select_channel(r, c) for c in range(_PERIOD_COLS)] for r in range(_PERIOD_ROWS)],
        dtype=np.uint8,
    )
    reps = (-(-height // _PERIOD_ROWS), -(-width // _PERIOD_COLS))
    return np.tile(tile, reps)[:height, :width]
