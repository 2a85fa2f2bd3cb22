"""Command-line entry point: load an image, composite it, save and/or show it."""

import argparse
import logging
import sys
from typing import List, Optional

from .compositor import Compositor
from .config import MAX_OFFSETS, FractalConfig
from .errors import FractalError
from .image_io import load_image, save_image
from .terminal_display_target import TerminalDisplayTarget, fit_to_terminal

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_WIDTH = 80
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fractal-composer",
        description="Create a fractal image by pasting shrunk copies of an image onto itself.",
        epilog=(
            "examples:\n"
            "  fractal-composer redBox.png\n"
            "  fractal-composer redBox.png 2 2 0 0 550 340\n"
            "  fractal-composer snowflake.png 4 2 40 100 230 20 430 100 40 300 430 300 230 380"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("image", help="Image file to load")
    parser.add_argument(
        "params",
        nargs="*",
        metavar="N",
        help=(
            "REDUCTION ITERATIONS [X Y ...]: reduction factor (default 2), iterations "
            f"(default 2) and up to {MAX_OFFSETS} x/y offsets (default: image centre)"
        ),
    )
    parser.add_argument("-o", "--output", help="Write the result to this file")
    parser.add_argument("--show", action="store_true", help="Preview the result in the terminal")
    parser.add_argument(
        "--preview-width",
        type=positive_int,
        default=DEFAULT_PREVIEW_WIDTH,
        help=f"Maximum preview width in terminal cells (default {DEFAULT_PREVIEW_WIDTH})",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default WARNING)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Shortcut for --log-level DEBUG")
    return parser


def setup_logging(level: str):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s.%(msecs)03d - %(name)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else args.log_level)

    try:
        # Arguments and the source image are checked before any compositing
        config = FractalConfig.from_args(args.params)
        image = load_image(args.image)
        offsets = config.resolve_offsets(image.width, image.height)

        logger.info(
            f"Compositing {image.width}x{image.height}: reduction={config.reduction_factor} "
            f"iterations={config.iterations} offsets={offsets}"
        )
        result = Compositor().compute_fractal(image, config.iterations, offsets, config.reduction_factor)

        if args.output:
            save_image(result, args.output)
    except FractalError as exc:
        logger.error(str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.show or not args.output:
        preview = fit_to_terminal(result, args.preview_width)
        with TerminalDisplayTarget(preview.width, preview.height) as display:
            display.display(preview)
    return 0


if __name__ == "__main__":
    sys.exit(main())
