#!/usr/bin/env python3
"""
Command-line front end for applying looks to photos.

Usage:
    photolooks INPUT --look NAME -o OUTPUT [--radius N]
    photolooks INPUT --look Sepia --contrast 10 -o OUTPUT
    photolooks INPUT --warmth 40 --vignette 60 --sharpness 25 -o OUTPUT
    photolooks --list

Decoding and encoding are done with OpenCV; the filters themselves only
ever see RasterImage instances.
"""
import argparse
import os
import sys
from typing import List, Optional

import cv2

from photolooks.core.errors import AllocationFailureError, InvalidInputError, UnknownLookError
from photolooks.core.raster import RasterImage
from photolooks.filters.adjustments import AdjustmentPipeline
from photolooks.filters.engine import apply_filter, apply_look, available_looks


# Adjustment flags, grouped by slider range
LINEAR_SLIDERS = ["brightness", "contrast", "saturation", "exposure"]
TONE_SLIDERS = ["highlights", "shadows", "vibrance", "warmth", "tint", "hue"]
EFFECT_SLIDERS = ["sharpness", "definition", "vignette", "glow"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="photolooks",
        description="Apply a named look to a photo."
    )
    parser.add_argument("input", nargs="?", help="Input image path")
    parser.add_argument("-o", "--output", help="Output image path")
    parser.add_argument("-l", "--look", help="Look name (see --list)")
    parser.add_argument("-r", "--radius", type=int, default=None,
                        help="Blur radius, clamped to 1-10 (Blur only)")
    parser.add_argument("--list", action="store_true", help="List available looks and exit")
    for slider in LINEAR_SLIDERS + TONE_SLIDERS:
        parser.add_argument(f"--{slider}", type=float, default=0.0, help=f"{slider.capitalize()} -100..100")
    for slider in EFFECT_SLIDERS:
        parser.add_argument(f"--{slider}", type=float, default=0.0, help=f"{slider.capitalize()} 0..100")
    return parser


def load_image(path: str) -> RasterImage:
    """
    Decode an image file into a RasterImage.

    Raises:
        InvalidInputError: If the file is missing or cannot be decoded
    """
    if not os.path.exists(path):
        raise InvalidInputError(f"Input file not found: {path}")
    array = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if array is None:
        raise InvalidInputError(f"Could not decode image: {path}")
    if array.dtype == "uint16":
        # 16-bit PNG/TIFF: keep the high byte
        array = (array >> 8).astype("uint8")
    return RasterImage.from_bgr(array)


def save_image(image: RasterImage, path: str) -> None:
    """Encode a RasterImage to ``path``; the format follows the extension."""
    if not cv2.imwrite(path, image.to_bgra()):
        raise InvalidInputError(f"Could not write image: {path}")


def run(args: argparse.Namespace) -> RasterImage:
    """
    Apply the requested look and adjustments to the input file.

    Returns:
        The final image (also written to args.output)
    """
    image = load_image(args.input)
    print(f" [OK] Loaded {args.input} ({image.width}x{image.height})")

    if args.look:
        image = apply_look(image, args.look, radius=args.radius)
        print(f" [LOOK] {args.look}")
    elif args.radius is not None:
        raise InvalidInputError("--radius requires --look Blur")

    adjustments = AdjustmentPipeline(
        **{slider: getattr(args, slider) for slider in LINEAR_SLIDERS + TONE_SLIDERS + EFFECT_SLIDERS}
    )
    if not adjustments.is_neutral:
        image = apply_filter(image, adjustments)
        print(f" [LOOK] Adjustments ({adjustments.description})")

    save_image(image, args.output)
    print(f" [OK] Saved {args.output}")
    return image


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the photolooks command.

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for name in available_looks():
            print(name)
        return 0

    if not args.input or not args.output:
        parser.error("INPUT and --output are required unless --list is given")

    print("--- Photo Looks ---")
    try:
        run(args)
    except (UnknownLookError, InvalidInputError, AllocationFailureError) as e:
        print(f" [ERROR] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
