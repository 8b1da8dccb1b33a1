"""Reading and writing .spff files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

import numpy as np
from PIL import Image

from .encoding import decode_pixels, encode_image
from .models.encoded import EncodedImage
from .models.enums import ReconstructionMode

_LOGGER = logging.getLogger(__name__)

SPFF_EXTENSION: Final = ".spff"


def save_spff(image: Image.Image | np.ndarray, path: str | Path) -> int:
    """Encode an image and write it to a file.

    Args:
        image: Source PIL Image (any mode) or RGB8 array
        path: Destination file path

    Returns:
        Number of bytes written
    """
    data = encode_image(image)
    Path(path).write_bytes(data)

    _LOGGER.info("Wrote %s (%d bytes)", path, len(data))
    return len(data)


def read_info(path: str | Path) -> EncodedImage:
    """Read and validate an .spff file without reconstructing it."""
    return EncodedImage.from_bytes(Path(path).read_bytes())


def load_spff(
    path: str | Path,
    mode: ReconstructionMode = ReconstructionMode.MEAN,
) -> Image.Image:
    """Read an .spff file and reconstruct it.

    Args:
        path: Source file path
        mode: Reconstruction strategy (default: MEAN)

    Returns:
        Reconstructed RGB image
    """
    encoded = read_info(path)
    _LOGGER.info("Loaded %s (%dx%d)", path, encoded.width, encoded.height)
    return Image.fromarray(decode_pixels(encoded, mode))
