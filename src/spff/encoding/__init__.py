"""SPFF encoding, decoding and image preparation."""

from .channels import channel_map, select_channel
from .decoder import decode_image, decode_pixels
from .encoder import encode_image, encode_pixels
from .images import prepare_image, to_rgb_array

__all__ = [
    "select_channel",
    "channel_map",
    "encode_pixels",
    "encode_image",
    "decode_pixels",
    "decode_image",
    "prepare_image",
    "to_rgb_array",
]
