# renderer/gradient.py
from typing import List

import numpy as np

from core.vector import Color

IMAGE_WIDTH = 256
IMAGE_HEIGHT = 256


def _check_dimensions(width: int, height: int) -> None:
    if width < 2 or height < 2:
        raise ValueError(f"Gradient needs at least 2x2 pixels, got {width}x{height}")


def gradient_color(i: int, j: int, width: int, height: int) -> Color:
    """
    Red ramps left to right, green ramps top to bottom, blue stays 0.
    """
    return Color(i / (width - 1), j / (height - 1), 0.0)


def render_gradient(width: int = IMAGE_WIDTH, height: int = IMAGE_HEIGHT) -> List[List[Color]]:
    """
    Build the gradient test pattern as row-major rows of colors.
    """
    _check_dimensions(width, height)
    return [[gradient_color(i, j, width, height) for i in range(width)]
            for j in range(height)]


def gradient_image(width: int = IMAGE_WIDTH, height: int = IMAGE_HEIGHT) -> np.ndarray:
    """
    Same pattern as render_gradient, as a (height x width x 3) float64 array.
    """
    _check_dimensions(width, height)
    image = np.zeros((height, width, 3), dtype=np.float64)
    image[:, :, 0] = (np.arange(width, dtype=np.float64) / (width - 1))[np.newaxis, :]
    image[:, :, 1] = (np.arange(height, dtype=np.float64) / (height - 1))[:, np.newaxis]
    return image
