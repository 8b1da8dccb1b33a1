"""Command line interface for encoding and decoding .spff files.

Usage:
    spff encode photo.png photo.spff
    spff decode photo.spff restored.png --mode legacy
    spff info photo.spff
"""

from __future__ import annotations

import argparse
import logging
import sys

from PIL import Image

from .exceptions import SpffError
from .files import load_spff, read_info, save_spff
from .models.enums import ReconstructionMode
from .protocol.header import HEADER_SIZE

_LOGGER = logging.getLogger(__name__)


def _cmd_encode(args: argparse.Namespace) -> None:
    with Image.open(args.input) as image:
        written = save_spff(image, args.output)
    print(f"{args.input} -> {args.output} ({written} bytes)")


def _cmd_decode(args: argparse.Namespace) -> None:
    image = load_spff(args.input, mode=ReconstructionMode[args.mode.upper()])
    try:
        image.save(args.output)
    except ValueError as err:
        # Pillow cannot pick a format for the extension
        raise SpffError(f"Cannot write {args.output}: {err}") from err
    print(f"{args.input} -> {args.output} ({image.width}x{image.height})")


def _cmd_info(args: argparse.Namespace) -> None:
    encoded = read_info(args.input)
    total = HEADER_SIZE + encoded.pixel_count
    print(f"width={encoded.width}")
    print(f"height={encoded.height}")
    print(f"payload_bytes={encoded.pixel_count}")
    print(f"ratio_vs_rgb24={total / (encoded.pixel_count * 3):.3f}")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="spff",
        description="Encode images to one byte per pixel and reconstruct them.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("encode", help="Encode an image file to .spff.")
    encode.add_argument("input", help="Source image (any format Pillow can read)")
    encode.add_argument("output", help="Destination .spff file")
    encode.set_defaults(handler=_cmd_encode)

    decode = subparsers.add_parser("decode", help="Decode a .spff file to an image.")
    decode.add_argument("input", help="Source .spff file")
    decode.add_argument("output", help="Destination image; format from extension")
    decode.add_argument(
        "--mode",
        choices=[m.name.lower() for m in ReconstructionMode],
        default="mean",
        help="Reconstruction strategy. Default: mean",
    )
    decode.set_defaults(handler=_cmd_decode)

    info = subparsers.add_parser("info", help="Show .spff header information.")
    info.add_argument("input", help="Source .spff file")
    info.set_defaults(handler=_cmd_info)

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        args.handler(args)
    except (SpffError, OSError) as err:
        _LOGGER.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
