"""Shared fixtures for halftone tests."""

import numpy as np
import pytest
from PIL import Image


def solid(color, size=(1, 1)) -> Image.Image:
    """Solid RGBA image of the given size."""
    rgba = tuple(color) + (255,) * (4 - len(color))
    return Image.new("RGBA", size, rgba)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def black_white() -> Image.Image:
    """2x1 image: black pixel on the left, white on the right."""
    image = Image.new("RGBA", (2, 1), (255, 255, 255, 255))
    image.putpixel((0, 0), (0, 0, 0, 255))
    return image
