"""SPFF encoder: keep one channel per pixel."""

from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from ..exceptions import AllocationError, InvalidDimensionsError
from ..models.encoded import EncodedImage
from ..protocol.header import HEADER_SIZE
from .channels import channel_map
from .images import to_rgb_array

_LOGGER = logging.getLogger(__name__)


def encode_pixels(pixels: np.ndarray) -> EncodedImage:
    """Encode an RGB pixel array.

    For every pixel only the channel picked by select_channel() is kept;
    the other two are discarded.

    Args:
        pixels: Array of shape (height, width, 3), dtype uint8

    Returns:
        EncodedImage with one byte per pixel

    Raises:
        ValueError: If the array is not an RGB8 raster
        InvalidDimensionsError: If width or height is zero
        AllocationError: If the output buffer cannot be allocated
    """
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected (height, width, 3) array, got shape {pixels.shape}")
    if pixels.dtype != np.uint8:
        raise ValueError(f"Expected uint8 pixels, got {pixels.dtype}")

    height, width = pixels.shape[:2]
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(f"Invalid dimensions: {width}x{height}")

    try:
        channels = channel_map(height, width)
        selected = np.take_along_axis(pixels, channels[:, :, np.newaxis], axis=2)
        payload = selected.tobytes()
    except MemoryError as err:
        raise AllocationError(
            f"Cannot allocate {width * height} bytes for {width}x{height} image"
        ) from err

    _LOGGER.debug("Encoded %dx%d image: %d payload bytes", width, height, len(payload))
    return EncodedImage(width=width, height=height, payload=payload)


def encode_image(image: Image.Image | np.ndarray) -> bytes:
    """Encode an image to SPFF bytes.

    PIL images in any mode are converted to RGB first.

    Args:
        image: PIL Image or (height, width, 3) uint8 array

    Returns:
        Header followed by one byte per pixel
    """
    encoded = encode_pixels(to_rgb_array(image))
    try:
        return encoded.to_bytes()
    except MemoryError as err:
        raise AllocationError(
            f"Cannot allocate {HEADER_SIZE + encoded.pixel_count} bytes for encoded image"
        ) from err
