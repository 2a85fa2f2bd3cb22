"""PixelBuffer - Fixed-size pixel grid backed by numpy."""

import numpy as np
from PIL import Image
from typing import Tuple

# Pillow mode for each supported channel depth
MODES = {1: 'L', 3: 'RGB', 4: 'RGBA'}


class PixelBuffer:
    """Fixed-size uint8 pixel buffer using numpy."""

    def __init__(self, width: int, height: int, channels: int = 3):
        if channels not in MODES:
            raise ValueError(f"Unsupported channel count: {channels}. Use one of {sorted(MODES)}")
        self.width = width
        self.height = height
        self.channels = channels
        # Shape: (height, width, channels), uint8
        self.data = np.zeros((height, width, channels), dtype=np.uint8)

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'PixelBuffer':
        """Wrap a copy of a (height, width) or (height, width, channels) array."""
        array = np.asarray(array)
        if array.ndim == 2:
            array = array[:, :, np.newaxis]
        if array.ndim != 3:
            raise ValueError(f"Expected a 2D or 3D array, got shape {array.shape}")
        height, width, channels = array.shape
        buffer = cls(width, height, channels)
        buffer.data[:] = np.clip(array, 0, 255).astype(np.uint8)
        return buffer

    @classmethod
    def from_image(cls, image: Image.Image) -> 'PixelBuffer':
        """Create a buffer from a PIL image in L, RGB or RGBA mode."""
        if image.mode not in MODES.values():
            image = image.convert('RGB')
        return cls.from_array(np.array(image, dtype=np.uint8))

    def to_image(self) -> Image.Image:
        """Convert to a PIL image (L, RGB or RGBA depending on channels)."""
        if self.channels == 1:
            return Image.fromarray(self.data[:, :, 0])
        return Image.fromarray(self.data)

    @property
    def size(self) -> Tuple[int, int]:
        """Return (width, height) tuple."""
        return (self.width, self.height)

    def set_pixel(self, x: int, y: int, color: Tuple[int, ...]):
        """Set pixel at (x, y). Out of range coordinates are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.data[y, x] = color

    def get_pixel(self, x: int, y: int) -> Tuple[int, ...]:
        """Get pixel at (x, y) as a tuple with one entry per channel."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return tuple(int(v) for v in self.data[y, x])
        return (0,) * self.channels

    def fill(self, color: Tuple[int, ...]):
        """Set every pixel to color."""
        self.data[:, :] = color

    def region(self, x: int, y: int, width: int, height: int) -> 'PixelBuffer':
        """Return an independent copy of the width x height block at (x, y)."""
        if x < 0 or y < 0 or x + width > self.width or y + height > self.height:
            raise ValueError(
                f"Region {width}x{height} at ({x}, {y}) outside {self.width}x{self.height} buffer"
            )
        new_buffer = PixelBuffer(width, height, self.channels)
        new_buffer.data[:] = self.data[y:y + height, x:x + width]
        return new_buffer

    def write_region(self, source: 'PixelBuffer', x: int, y: int):
        """
        Overwrite the block at (x, y) with the whole of source.
        No clipping; the source must fit and match the channel count.
        """
        if source.channels != self.channels:
            raise ValueError(f"Channel mismatch: {source.channels} into {self.channels}")
        self.data[y:y + source.height, x:x + source.width] = source.data

    def same_pixels(self, other: 'PixelBuffer') -> bool:
        """Byte-for-byte comparison of size, depth and content."""
        return (
            self.data.shape == other.data.shape
            and self.data.tobytes() == other.data.tobytes()
        )

    def copy(self) -> 'PixelBuffer':
        """Create a copy of this buffer."""
        new_buffer = PixelBuffer(self.width, self.height, self.channels)
        new_buffer.data = self.data.copy()
        return new_buffer

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height}x{self.channels})"
