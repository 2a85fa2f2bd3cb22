"""Scaler - Smoothed integer-factor downscaling of pixel buffers."""

import logging

import numpy as np
from PIL import Image

from .errors import DegenerateReductionError
from .pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


class Scaler:
    """
    Produces smaller copies of a buffer.

    Each reduction runs a 3x3 Gaussian blur first (kernel [1, 2, 1] / 4 on
    both axes, edges reflected without repeating the border pixel), then
    bilinear resampling to floor(width / r) x floor(height / r).
    """

    def __init__(self):
        self.reduce_calls = 0  # Number of reduce() calls, for depth checks

    def smooth(self, buffer: PixelBuffer) -> PixelBuffer:
        """Return a blurred copy of buffer. Same size and channel count."""
        padded = np.pad(buffer.data.astype(np.float32), ((1, 1), (1, 1), (0, 0)), mode="reflect")

        # Separable convolution via shifted slices: vertical pass, then horizontal
        vertical = (padded[0:-2, :] + 2 * padded[1:-1, :] + padded[2:, :]) / 4.0
        blurred = (vertical[:, 0:-2] + 2 * vertical[:, 1:-1] + vertical[:, 2:]) / 4.0

        result = PixelBuffer(buffer.width, buffer.height, buffer.channels)
        result.data[:] = np.clip(np.rint(blurred), 0, 255).astype(np.uint8)
        return result

    def reduce(self, buffer: PixelBuffer, reduction_factor: int) -> PixelBuffer:
        """
        Smooth then downscale buffer by reduction_factor on both axes.

        Args:
            buffer: Source buffer, left untouched
            reduction_factor: Integer divisor >= 1

        Returns:
            New buffer of size (width // reduction_factor, height // reduction_factor)

        Raises:
            DegenerateReductionError: if either resulting dimension would be 0
        """
        self.reduce_calls += 1

        new_width = buffer.width // reduction_factor
        new_height = buffer.height // reduction_factor
        if new_width == 0 or new_height == 0:
            raise DegenerateReductionError(buffer.size, reduction_factor)

        smoothed = self.smooth(buffer)
        if (new_width, new_height) == smoothed.size:
            return smoothed

        resized = smoothed.to_image().resize((new_width, new_height), Image.Resampling.BILINEAR)
        reduced = PixelBuffer.from_image(resized)
        logger.debug(f"reduce: {buffer.width}x{buffer.height} -> {new_width}x{new_height} (1/{reduction_factor})")
        return reduced


def reduce_image(buffer: PixelBuffer, reduction_factor: int) -> PixelBuffer:
    """Reduce buffer with a throwaway Scaler."""
    return Scaler().reduce(buffer, reduction_factor)
