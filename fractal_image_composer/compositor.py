"""Compositor - Recursive self-pasting of reduced copies of an image."""

import logging
from typing import Optional, Sequence

from .errors import InvalidArgumentError
from .geometry import ClipRegion, Point, clip_paste_region, rescale_offsets
from .pixel_buffer import PixelBuffer
from .scaler import Scaler

logger = logging.getLogger(__name__)

# Recursion guard for compute_fractal(); iteration counts are expected to stay small
DEFAULT_MAX_DEPTH = 64


class Compositor:
    """
    Builds fractal composites.

    compute_fractal() recurses once per iteration: the innermost call works on
    the smallest reduction, and each level on the way out pastes the composite
    it got back onto a copy of its own input.
    """

    def __init__(self, scaler: Optional[Scaler] = None, max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize compositor.

        Args:
            scaler: Scaler used for every reduction (a fresh one if omitted)
            max_depth: Largest accepted iteration count + 1
        """
        self.scaler = scaler if scaler is not None else Scaler()
        self.max_depth = max_depth

    def compute_fractal(
        self,
        buffer: PixelBuffer,
        iterations: int,
        offsets: Sequence[Point],
        reduction_factor: int,
    ) -> PixelBuffer:
        """
        Composite reduced copies of buffer onto itself at offsets.

        Args:
            buffer: Source image, never modified
            iterations: Recursion depth below this level (0 = reduce once, paste once)
            offsets: Paste positions in buffer coordinates, pasted in order
            reduction_factor: Integer divisor applied at every level

        Returns:
            New buffer the size of buffer
        """
        if iterations + 1 > self.max_depth:
            raise InvalidArgumentError(
                f"Iteration count {iterations} exceeds maximum depth {self.max_depth}"
            )
        offsets = [Point(*p) for p in offsets]

        reduced = self.scaler.reduce(buffer, reduction_factor)
        child_offsets = rescale_offsets(offsets, reduction_factor)
        logger.debug(
            f"compute_fractal: iterations={iterations} size={buffer.width}x{buffer.height} "
            f"reduced={reduced.width}x{reduced.height} offsets={offsets}"
        )

        if iterations > 0:
            fill = self.compute_fractal(reduced, iterations - 1, child_offsets, reduction_factor)
        else:
            fill = reduced

        result = buffer.copy()
        for point in offsets:
            self.paste_at(point, result, fill)
        return result

    def paste_at(self, point: Point, target: PixelBuffer, source: PixelBuffer) -> Optional[ClipRegion]:
        """
        Copy source into target at point, clipped to target bounds.

        Writes target in place. Offsets that leave nothing on-screen are
        skipped silently.

        Returns:
            The ClipRegion that was written, or None if nothing was copied
        """
        clip = clip_paste_region(point, target.size, source.size)
        if clip is None:
            logger.debug(f"paste_at: skipped {source.width}x{source.height} at {tuple(point)}")
            return None

        if (clip.src_x, clip.src_y, clip.width, clip.height) == (0, 0, source.width, source.height):
            cropped = source
        else:
            cropped = source.region(clip.src_x, clip.src_y, clip.width, clip.height)
        target.write_region(cropped, clip.dst_x, clip.dst_y)
        return clip


def compute_fractal(
    buffer: PixelBuffer,
    iterations: int,
    offsets: Sequence[Point],
    reduction_factor: int,
) -> PixelBuffer:
    """compute_fractal() with a default Compositor."""
    return Compositor().compute_fractal(buffer, iterations, offsets, reduction_factor)


def paste_at(point: Point, target: PixelBuffer, source: PixelBuffer) -> Optional[ClipRegion]:
    """paste_at() with a default Compositor."""
    return Compositor().paste_at(point, target, source)
