"""Image preprocessing before SPFF encoding."""

from __future__ import annotations

import logging

import numpy as np
from PIL import Image

_LOGGER = logging.getLogger(__name__)


def to_rgb_array(image: Image.Image | np.ndarray) -> np.ndarray:
    """Return image pixels as a (height, width, 3) uint8 array.

    Args:
        image: PIL Image in any mode, or an RGB8 array

    Returns:
        RGB8 pixel array
    """
    if isinstance(image, np.ndarray):
        return image
    return np.asarray(prepare_image(image), dtype=np.uint8)


def prepare_image(image: Image.Image) -> Image.Image:
    """Convert an image to RGB at its own size.

    Palette, grayscale and alpha images are expanded or flattened to RGB8;
    alpha is dropped.
    """
    if image.mode != "RGB":
        _LOGGER.debug("Converting image from %s to RGB", image.mode)
        image = image.convert("RGB")
    return image
