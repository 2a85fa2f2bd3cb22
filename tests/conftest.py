import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fractal_image_composer import PixelBuffer


def make_pattern(width, height, channels=3, seed=0):
    """Deterministic noisy buffer so every pixel is distinguishable."""
    rng = np.random.default_rng(seed)
    return PixelBuffer.from_array(rng.integers(0, 256, size=(height, width, channels), dtype=np.uint8))


@pytest.fixture
def pattern():
    return make_pattern(16, 12)
