"""Test the SPFF decoder and neighbour reconstruction."""

import numpy as np
import pytest
from PIL import Image

from spff.encoding.decoder import NEIGHBOUR_OFFSETS, decode_image, decode_pixels
from spff.encoding.encoder import encode_image, encode_pixels
from spff.exceptions import (
    AllocationError,
    InvalidDimensionsError,
    SizeMismatchError,
    TruncatedInputError,
)
from spff.models.encoded import EncodedImage
from spff.models.enums import ReconstructionMode


def _two_by_two() -> np.ndarray:
    return np.array([
        [(255, 0, 0), (0, 255, 0)],
        [(0, 0, 255), (10, 20, 30)],
    ], dtype=np.uint8)


def _pixels(decoded: np.ndarray) -> list[list[tuple[int, int, int]]]:
    return [[tuple(int(v) for v in px) for px in row] for row in decoded]


def test_neighbour_fold_order() -> None:
    """Left column, then right column, then top and bottom."""
    assert NEIGHBOUR_OFFSETS == (
        (0, -1), (-1, -1), (1, -1),
        (0, 1), (-1, 1), (1, 1),
        (-1, 0), (1, 0),
    )


class TestLegacyReconstruction:
    """Bit-compatible reconstruction (zero sentinel, halving fold)."""

    def test_two_by_two_scenario(self):
        """Own channel is kept; others follow the fold order.

        (0,1): left R=255 -> 127, bottom R=10 -> (127+10)//2 = 68.
        (1,0): right R=10 -> 5, top R=255 -> (5+255)//2 = 130.
        """
        decoded = decode_pixels(encode_pixels(_two_by_two()), ReconstructionMode.LEGACY)

        assert _pixels(decoded) == [
            [(255, 127, 127), (68, 255, 127)],
            [(130, 127, 255), (10, 127, 127)],
        ]

    def test_first_contribution_is_halved(self):
        pixels = np.array([[(100, 100, 100), (100, 100, 100)]], dtype=np.uint8)
        decoded = decode_pixels(encode_pixels(pixels), ReconstructionMode.LEGACY)

        assert _pixels(decoded) == [[(100, 50, 0), (50, 100, 0)]]

    def test_stored_zero_is_indistinguishable_from_missing_neighbour(self):
        """A column storing legitimate zeros decodes like no column at all."""
        with_zero_column = np.array([
            [(80, 80, 80), (80, 0, 80)],   # (0,1) stores green = 0
            [(80, 80, 80), (0, 80, 80)],   # (1,1) stores red = 0
        ], dtype=np.uint8)
        without_column = with_zero_column[:, :1].copy()

        wide = decode_pixels(encode_pixels(with_zero_column), ReconstructionMode.LEGACY)
        narrow = decode_pixels(encode_pixels(without_column), ReconstructionMode.LEGACY)

        assert np.array_equal(wide[:, :1], narrow)
        assert _pixels(narrow) == [[(80, 0, 40)], [(40, 0, 80)]]

    def test_own_zero_is_replaced_by_neighbours(self):
        pixels = np.full((2, 2, 3), 200, dtype=np.uint8)
        pixels[0, 0] = (0, 0, 0)

        decoded = decode_pixels(encode_pixels(pixels), ReconstructionMode.LEGACY)

        assert tuple(decoded[0, 0]) == (100, 100, 100)


class TestMeanReconstruction:
    """Default reconstruction (explicit presence, true mean)."""

    def test_two_by_two_scenario(self):
        decoded = decode_pixels(encode_pixels(_two_by_two()))

        assert _pixels(decoded) == [
            [(255, 255, 255), (133, 255, 255)],
            [(133, 255, 255), (10, 255, 255)],
        ]

    @pytest.mark.parametrize("color", [(40, 120, 200), (1, 255, 7), (0, 80, 160)])
    @pytest.mark.parametrize("height,width", [(2, 2), (4, 5), (7, 3)])
    def test_uniform_image_roundtrip(self, color, height, width):
        """Solid colours are reproduced exactly, zero channels included."""
        pixels = np.full((height, width, 3), color, dtype=np.uint8)

        decoded = decode_pixels(encode_pixels(pixels))

        assert np.array_equal(decoded, pixels)

    def test_own_zero_is_kept(self):
        pixels = np.full((2, 2, 3), 200, dtype=np.uint8)
        pixels[0, 0] = (0, 0, 0)

        decoded = decode_pixels(encode_pixels(pixels))

        assert tuple(decoded[0, 0]) == (0, 200, 200)

    def test_mean_rounds_half_up(self):
        # (0,1) stores G; its red comes from left (0,0)=3 and bottom (1,1)=4
        pixels = np.array([
            [(3, 0, 0), (0, 9, 0)],
            [(0, 0, 6), (4, 0, 0)],
        ], dtype=np.uint8)

        decoded = decode_pixels(encode_pixels(pixels))

        assert decoded[0, 1, 0] == 4

    def test_single_pixel_has_only_own_channel(self):
        pixels = np.array([[(9, 8, 7)]], dtype=np.uint8)
        decoded = decode_pixels(encode_pixels(pixels))
        assert _pixels(decoded) == [[(9, 0, 0)]]


class TestBoundary:
    """Neighbours outside the image are never read."""

    @pytest.mark.parametrize("mode", list(ReconstructionMode))
    def test_last_column_does_not_wrap_to_next_row(self, mode):
        encoded = EncodedImage(width=3, height=2, payload=bytes([0, 100, 50, 200, 40, 60]))

        decoded = decode_pixels(encoded, mode)

        if mode == ReconstructionMode.LEGACY:
            # left G=100 -> 50, bottom-left R=40 -> 20, bottom G=60 -> 55
            assert tuple(decoded[0, 2]) == (20, 55, 50)
        else:
            assert tuple(decoded[0, 2]) == (40, 80, 50)

    @pytest.mark.parametrize("mode", list(ReconstructionMode))
    def test_last_row_has_no_bottom_neighbours(self, mode):
        encoded = EncodedImage(width=1, height=2, payload=bytes([10, 30]))

        decoded = decode_pixels(encoded, mode)

        assert decoded.shape == (2, 1, 3)
        # (1,0) stores blue; only its top neighbour (red) contributes
        expected_red = 5 if mode == ReconstructionMode.LEGACY else 10
        assert tuple(decoded[1, 0]) == (expected_red, 0, 30)


class TestDecodeImage:
    """Test decode_image() on raw bytes."""

    def test_decode_image_returns_rgb(self):
        image = decode_image(encode_image(_two_by_two()))

        assert isinstance(image, Image.Image)
        assert image.mode == "RGB"
        assert image.size == (2, 2)
        assert image.getpixel((1, 0)) == (133, 255, 255)

    def test_decode_image_legacy_mode(self):
        image = decode_image(encode_image(_two_by_two()), mode=ReconstructionMode.LEGACY)
        assert image.getpixel((0, 1)) == (130, 127, 255)

    def test_decode_image_rejects_length_mismatch(self):
        data = encode_image(_two_by_two())
        with pytest.raises(SizeMismatchError):
            decode_image(data + b'\x00')
        with pytest.raises(TruncatedInputError):
            decode_image(data[:-1])

    def test_decode_image_rejects_zero_dimensions(self):
        with pytest.raises(InvalidDimensionsError):
            decode_image(b'\x00\x00\x00\x00\x00\x00\x00\x00')

    def test_decode_image_rejects_short_header(self):
        with pytest.raises(TruncatedInputError):
            decode_image(b'\x02\x00')

    def test_decode_unknown_mode(self):
        encoded = encode_pixels(_two_by_two())
        with pytest.raises(ValueError):
            decode_pixels(encoded, 7)  # type: ignore[arg-type]

    def test_decode_allocation_failure(self, monkeypatch: pytest.MonkeyPatch):
        def fail(height, width):
            raise MemoryError

        monkeypatch.setattr("spff.encoding.decoder.channel_map", fail)

        with pytest.raises(AllocationError, match="Cannot allocate"):
            decode_pixels(encode_pixels(_two_by_two()))
