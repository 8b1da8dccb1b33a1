"""Data models for SPFF images."""

from .encoded import EncodedImage
from .enums import Channel, ReconstructionMode

__all__ = [
    "Channel",
    "EncodedImage",
    "ReconstructionMode",
]
