"""Demo: grow a fractal from a generated image and preview each depth in the terminal."""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from fractal_image_composer import (Compositor, PixelBuffer, Point,
                                    TerminalDisplayTarget)


def make_source(width: int, height: int) -> PixelBuffer:
    """Dark background with a diagonal gradient band and a bright frame."""
    buffer = PixelBuffer(width, height)
    buffer.fill((10, 10, 30))
    for y in range(height):
        for x in range(width):
            if abs(x - y) < 4:
                buffer.set_pixel(x, y, (255, 100 + (155 * x) // width, 0))
            if x in (0, width - 1) or y in (0, height - 1):
                buffer.set_pixel(x, y, (0, 200, 255))
    return buffer


def main():
    WIDTH = 64
    HEIGHT = 64

    logging.basicConfig(level=logging.INFO, format="%(asctime)s.%(msecs)03d - %(message)s", datefmt="%H:%M:%S")

    source = make_source(WIDTH, HEIGHT)
    offsets = [Point(0, 32), Point(32, 0), Point(40, 40)]
    compositor = Compositor()

    with TerminalDisplayTarget(width=WIDTH, height=HEIGHT, show_logs=True) as display:
        for iterations in range(4):
            result = compositor.compute_fractal(source, iterations, offsets, 2)
            logging.info(f"iterations={iterations}, reductions so far={compositor.scaler.reduce_calls}")
            display.display(result)
            print()


if __name__ == "__main__":
    main()
