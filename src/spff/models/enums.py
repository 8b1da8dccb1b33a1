from __future__ import annotations

from enum import IntEnum


class Channel(IntEnum):
    """Colour channel stored for a pixel.

    The value is the channel's index in an RGB triple.
    """
    RED = 0
    GREEN = 1
    BLUE = 2


class ReconstructionMode(IntEnum):
    """How the decoder infers the two channels a pixel did not store.

    LEGACY matches the reference decoder bit for bit: a zero byte counts as
    "no contribution" and neighbours are folded in one at a time, each one
    halving the distance to its value.

    MEAN treats every stored byte as present (zero included) and takes the
    rounded mean of all neighbours that stored the channel.
    """
    LEGACY = 0
    MEAN = 1
