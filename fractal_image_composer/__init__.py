"""fractal_image_composer - Self-similar composites built by pasting shrunk copies of an image onto itself."""

from .compositor import DEFAULT_MAX_DEPTH, Compositor, compute_fractal, paste_at
from .config import (DEFAULT_ITERATIONS, DEFAULT_REDUCTION_FACTOR, MAX_OFFSETS,
                     FractalConfig, parse_offset_values)
from .errors import (DecodeFailureError, DegenerateReductionError,
                     EncodeFailureError, FractalError, InvalidArgumentError)
from .geometry import ClipRegion, Point, clip_paste_region, rescale_offsets
from .image_io import load_image, save_image
from .pixel_buffer import PixelBuffer
from .scaler import Scaler, reduce_image
from .terminal_display_target import TerminalDisplayTarget, fit_to_terminal

__all__ = [
    "PixelBuffer",
    "Point",
    "ClipRegion",
    "clip_paste_region",
    "rescale_offsets",
    "Scaler",
    "reduce_image",
    "Compositor",
    "compute_fractal",
    "paste_at",
    "DEFAULT_MAX_DEPTH",
    "FractalConfig",
    "parse_offset_values",
    "DEFAULT_REDUCTION_FACTOR",
    "DEFAULT_ITERATIONS",
    "MAX_OFFSETS",
    "FractalError",
    "InvalidArgumentError",
    "DecodeFailureError",
    "EncodeFailureError",
    "DegenerateReductionError",
    "load_image",
    "save_image",
    "TerminalDisplayTarget",
    "fit_to_terminal",
]
