"""Terminal preview of pixel buffers using ANSI true-colour blocks."""

import logging
import sys
from collections import deque
from typing import TextIO

from .pixel_buffer import PixelBuffer
from .scaler import Scaler


class LogCapture(logging.Handler):
    """Logging handler that captures the last N log messages."""

    def __init__(self, maxlen=10):
        super().__init__()
        self.log_lines = deque(maxlen=maxlen)
        self.formatter = logging.Formatter('%(asctime)s.%(msecs)03d - %(name)s - %(message)s', datefmt='%H:%M:%S')

    def emit(self, record):
        try:
            msg = self.format(record)
            self.log_lines.append(msg)
        except Exception:
            self.handleError(record)


def fit_to_terminal(buffer: PixelBuffer, max_width: int) -> PixelBuffer:
    """
    Shrink buffer by the smallest integer factor that makes it at most
    max_width pixels wide. Buffers that already fit are returned as is.
    """
    if max_width < 1:
        raise ValueError(f"max_width must be at least 1, got {max_width}")
    if buffer.width <= max_width:
        return buffer
    factor = -(-buffer.width // max_width)  # ceil
    factor = min(factor, buffer.width, buffer.height)
    return Scaler().reduce(buffer, factor)


class TerminalDisplayTarget:
    """
    Terminal-based display target.

    Each frame is assembled into a single string and written in one call.
    Buffers larger than the target are cropped to its top-left corner.
    """

    def __init__(self, width: int, height: int, use_half_blocks: bool = True, square_pixels: bool = False,
                 show_logs: bool = False, log_lines: int = 10, stream: TextIO = None):
        """
        Initialize terminal display target.

        Args:
            width: Display width in pixels
            height: Display height in pixels
            use_half_blocks: If True, use Unicode half-blocks (▀) to double
                           vertical resolution. If False, use full cells
            square_pixels: If True, render each pixel as 2 horizontal characters
                         (only applies to full cells)
            show_logs: If True, show captured log lines below the image
            log_lines: Number of recent log lines to show
            stream: Output stream (default sys.stdout)
        """
        self.width = width
        self.height = height
        self.use_half_blocks = use_half_blocks
        self.square_pixels = square_pixels
        self.show_logs = show_logs
        self.stream = stream if stream is not None else sys.stdout
        self._initialized = False

        self.log_capture = None
        if self.show_logs:
            self.log_capture = LogCapture(maxlen=log_lines)

    @property
    def size(self):
        """Return (width, height) tuple."""
        return (self.width, self.height)

    def initialize(self):
        """Start capturing logs if requested."""
        if self._initialized:
            return
        if self.log_capture:
            logging.getLogger().addHandler(self.log_capture)
        self._initialized = True

    def display(self, buffer: PixelBuffer):
        """
        Write buffer to the output stream.

        Args:
            buffer: PixelBuffer to display
        """
        if not self._initialized:
            self.initialize()

        frame = []
        if self.use_half_blocks:
            self._render_half_blocks(buffer, frame)
        else:
            self._render_full_blocks(buffer, frame)

        if self.show_logs and self.log_capture:
            self._render_log_section(frame)

        self.stream.write(''.join(frame))
        self.stream.flush()

    @staticmethod
    def _rgb(buffer: PixelBuffer, x: int, y: int):
        pixel = buffer.get_pixel(x, y)
        if buffer.channels == 1:
            return pixel[0], pixel[0], pixel[0]
        return pixel[0], pixel[1], pixel[2]

    def _render_full_blocks(self, buffer: PixelBuffer, frame: list):
        """One background-coloured cell (or two, for square pixels) per pixel."""
        chars_per_pixel = 2 if self.square_pixels else 1
        width = min(self.width, buffer.width)

        for y in range(min(self.height, buffer.height)):
            for x in range(width):
                r, g, b = self._rgb(buffer, x, y)
                frame.append(f'\x1b[48;2;{r};{g};{b}m')
                frame.append(' ' * chars_per_pixel)
            frame.append('\x1b[0m\n')

    def _render_half_blocks(self, buffer: PixelBuffer, frame: list):
        """
        Two vertically stacked pixels per character: foreground is the top
        pixel, background the bottom one.
        """
        width = min(self.width, buffer.width)
        height = min(self.height, buffer.height)

        for y in range(0, height, 2):
            for x in range(width):
                r1, g1, b1 = self._rgb(buffer, x, y)
                if y + 1 < height:
                    r2, g2, b2 = self._rgb(buffer, x, y + 1)
                    frame.append(f'\x1b[38;2;{r1};{g1};{b1}m\x1b[48;2;{r2};{g2};{b2}m▀')
                else:
                    # Last row (odd height) - just show top pixel
                    frame.append(f'\x1b[38;2;{r1};{g1};{b1}m▀')
            frame.append('\x1b[0m\n')

    def _render_log_section(self, frame: list):
        """Render captured log lines below the image."""
        frame.append('\x1b[0m\n')
        for log_line in self.log_capture.log_lines:
            frame.append(log_line)
            frame.append('\n')

    def shutdown(self):
        """Stop capturing logs and reset terminal colours."""
        if not self._initialized:
            return
        if self.log_capture:
            logging.getLogger().removeHandler(self.log_capture)
        self.stream.write('\x1b[0m')
        self.stream.flush()
        self._initialized = False

    def __enter__(self):
        """Context manager entry."""
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.shutdown()
