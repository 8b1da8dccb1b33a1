"""SPFF image codec.

Stores one colour channel per pixel and reconstructs the other two from
neighbouring pixels.
"""

from .encoding import (
    channel_map,
    decode_image,
    decode_pixels,
    encode_image,
    encode_pixels,
    prepare_image,
    select_channel,
)
from .exceptions import (
    AllocationError,
    InvalidDimensionsError,
    SizeMismatchError,
    SpffError,
    TruncatedInputError,
)
from .files import SPFF_EXTENSION, load_spff, read_info, save_spff
from .models import Channel, EncodedImage, ReconstructionMode
from .protocol import HEADER_SIZE

__version__ = "0.1.0"

__all__ = [
    # Main API
    "encode_image",
    "decode_image",
    "encode_pixels",
    "decode_pixels",
    "save_spff",
    "load_spff",
    "read_info",
    # Exceptions
    "SpffError",
    "InvalidDimensionsError",
    "SizeMismatchError",
    "TruncatedInputError",
    "AllocationError",
    # Models
    "EncodedImage",
    # Enums
    "Channel",
    "ReconstructionMode",
    # Utilities
    "select_channel",
    "channel_map",
    "prepare_image",
    # Constants
    "HEADER_SIZE",
    "SPFF_EXTENSION",
]
