"""
Shared fixtures: small RGBA textures written to disk with Pillow.
"""

import numpy as np
import pytest
from PIL import Image


def make_pixels(width: int, height: int) -> np.ndarray:
    """RGBA grid where every pixel is distinct: R encodes x, G encodes y."""
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            pixels[y, x] = [x * 60, y * 100, 10 + x + y, 255 - x]
    return pixels


@pytest.fixture
def texture_pixels():
    """4 wide, 2 tall texture."""
    return make_pixels(4, 2)


@pytest.fixture
def write_texture():
    """Write an (H, W, 4) uint8 array as a PNG and return its path."""
    def _write(path, pixels):
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.fromarray(pixels).save(path)
        return path
    return _write
