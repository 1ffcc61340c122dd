"""Command-line entry point for PlanarQ.

This tool loads a planar 512x512 RGB file, rescales it with a 3x3 box
filter, quantizes each channel to Q bits, and shows the result.

All processing occurs on NumPy arrays; Pillow is used only for saving
and display.

Usage example:
    python -m planarq.main image.rgb 0.5 4 -1
    python -m planarq.main image.rgb 0.75 3 --no-show -o out.png
"""
from __future__ import annotations

import argparse
import math
from pathlib import Path
from typing import NoReturn, Optional

from .errors import FormatError, UsageError
from .pipeline import run
from .quantizers import MAX_BITS, UNIFORM
from .utils.loader import SOURCE_HEIGHT, SOURCE_WIDTH, save_image, save_planar_rgb
from .utils.resample import output_size

USAGE_NOTE = (
    "If mode is omitted, logarithmic quantization with an automatically "
    "computed pivot is used."
)


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="planarq",
        description=(
            "Rescale a planar RGB image with a 3x3 box filter and quantize it "
            "to Q bits per channel. " + USAGE_NOTE
        ),
    )

    parser.add_argument("source", help="Path to planar .rgb file (R plane, G plane, B plane)")
    parser.add_argument("scale", type=float, help="Scale factor, 0 < scale <= 1")
    parser.add_argument("bits", metavar="Q", type=int, help="Bits per channel, 1..8")
    parser.add_argument(
        "mode",
        nargs="?",
        type=int,
        default=None,
        help=(
            "-1 for uniform quantization, 0 for logarithmic, 1..255 for "
            "logarithmic with this pivot. Omit for an automatic pivot."
        ),
    )

    parser.add_argument("-o", "--output", default=None, help="Save the result; .rgb writes planar bytes")
    parser.add_argument("--no-show", action="store_true", help="Do not open a window")
    parser.add_argument("--width", type=int, default=SOURCE_WIDTH, help="Source width in pixels")
    parser.add_argument("--height", type=int, default=SOURCE_HEIGHT, help="Source height in pixels")
    return parser


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

    Raises
    ------
    UsageError
        On missing, extra, or ill-typed arguments.
    """
    return build_parser().parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise UsageError for invalid inputs."""
    if not math.isfinite(ns.scale) or ns.scale <= 0:
        raise UsageError("scale must be a finite number > 0")
    if not 1 <= ns.bits <= MAX_BITS:
        raise UsageError(f"Q must be between 1 and {MAX_BITS}")
    if ns.mode is not None and not UNIFORM <= ns.mode <= 255:
        raise UsageError("mode must be -1, 0, or a pivot between 1 and 255")
    if ns.width < 1 or ns.height < 1:
        raise UsageError("--width and --height must be >= 1")
    try:
        output_size(ns.height, ns.width, ns.scale)
    except ValueError as e:
        raise UsageError(str(e)) from e


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing.

    Returns
    -------
    int
        Exit status code: 0 on success or usage error, 1 when the source
        cannot be read.
    """
    try:
        args = parse_args(argv)
        validate_args(args)
    except UsageError as e:
        print(f"Argument error: {e}")
        print(build_parser().format_usage().rstrip())
        print(USAGE_NOTE)
        return 0

    try:
        result = run(
            args.source,
            args.scale,
            args.bits,
            args.mode,
            width=args.width,
            height=args.height,
        )
    except FormatError as e:
        print(f"Error reading image file: {e}")
        return 1
    except OSError as e:
        print(f"Error reading image file: {e}")
        return 1

    if args.output:
        out = Path(args.output)
        if out.suffix.lower() == ".rgb":
            save_planar_rgb(result.image, out)
        else:
            save_image(result.image, out)
        print(f"Wrote {out}")

    if not args.no_show:
        from .viewer import show_image

        show_image(result.image)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
