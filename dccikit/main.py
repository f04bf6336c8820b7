"""Command-line entry point for DcciScale.

This tool loads an image, scales it to twice its size minus one with
Directional Cubic Convolution Interpolation (optionally several times),
optionally blows the result up with nearest-neighbor, and saves it.

All processing occurs on NumPy arrays; Pillow is used only for
loading and saving.

Usage example:
    python -m dccikit.main -i input.png -o output.png --times 2 --margin replicate
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from .utils.loader import load_image, save_image
from .utils.resize import enlarge_nearest
from .dcci import MARGIN_MODES, scale_dcci


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="dcciscale",
        description=(
            "Upscale images to (2W-1)x(2H-1) with Directional Cubic Convolution "
            "Interpolation, which interpolates along edges instead of across them."
        ),
    )

    parser.add_argument("-i", "--input", required=True, help="Path to input image file")
    parser.add_argument("-o", "--output", required=True, help="Path to output image file")

    parser.add_argument(
        "--times",
        type=int,
        default=1,
        help="Number of successive DCCI passes (>=1). Each pass maps n pixels to 2n-1.",
    )
    parser.add_argument(
        "--channels",
        type=int,
        default=4,
        choices=[3, 4],
        help=(
            "4 interpolates alpha with the colour channels; 3 interpolates RGB "
            "only, drops transparency and writes an RGB image."
        ),
    )
    parser.add_argument(
        "--margin",
        type=str,
        default="skip",
        choices=list(MARGIN_MODES),
        help=(
            "Border handling: skip (keep nearest values within 3 pixels of the "
            "border) | replicate | mirror (pad the source so the whole frame is "
            "interpolated)."
        ),
    )
    parser.add_argument(
        "--scale",
        type=int,
        default=1,
        help="Optional extra nearest-neighbor upscale factor (>=1) applied last.",
    )

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs.

    Parameters
    ----------
    ns : argparse.Namespace
        Parsed CLI arguments.
    """
    if ns.times < 1:
        raise ValueError("--times must be an integer >= 1")
    if ns.scale < 1:
        raise ValueError("--scale must be an integer >= 1")
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing.

    Returns
    -------
    int
        Exit status code (0 for success, non-zero for failure).
    """
    args = parse_args(argv)
    try:
        validate_args(args)
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    # 1) Load (Pillow -> NumPy, RGBA keeps transparency for 4-channel runs)
    img = load_image(args.input, mode="RGBA" if args.channels == 4 else "RGB")
    h, w = img.shape[:2]

    # 2) DCCI passes
    work = scale_dcci(img, channels=args.channels, margin=args.margin, times=args.times)

    # 3) Optional nearest blow-up for viewing
    if args.scale > 1:
        work = enlarge_nearest(work, args.scale)

    # 4) Save (NumPy -> Pillow)
    save_image(work, args.output)
    print(f"Wrote {work.shape[1]}x{work.shape[0]} image (from {w}x{h}): {args.output}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
