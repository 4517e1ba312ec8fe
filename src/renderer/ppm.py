# renderer/ppm.py
from typing import Callable, Optional, Sequence, TextIO

import numpy as np
from numba import njit
from PIL import Image

from core.color import COLOR_SCALE, MAX_COLOR, write_color
from core.vector import Color


def write_header(out: TextIO, width: int, height: int) -> None:
    """
    Write the plain-text PPM (P3) header.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
    out.write(f"P3\n{width} {height}\n{MAX_COLOR}\n")


def write_ppm(out: TextIO, pixels: Sequence[Sequence[Color]],
              progress: Optional[Callable[[int], None]] = None) -> None:
    """
    Write a complete P3 image: header followed by one line per pixel,
    top row first, left to right.

    Args:
        out: Text sink; opening, flushing and closing it is up to the caller.
        pixels: Row-major rows of colors, all of the same width.
        progress: Optional callback receiving the number of rows still to write.
    """
    height = len(pixels)
    width = len(pixels[0]) if height else 0
    if any(len(row) != width for row in pixels):
        raise ValueError("All rows must have the same number of pixels")
    write_header(out, width, height)

    for j, row in enumerate(pixels):
        if progress is not None:
            progress(height - j)
        for pixel_color in row:
            write_color(out, pixel_color)


@njit
def _quantize_kernel(image, output):
    h, w, _ = image.shape
    for y in range(h):
        for x in range(w):
            for c in range(3):
                # int() truncates toward zero, same as core.color
                output[y, x, c] = int(COLOR_SCALE * image[y, x, c])


def quantize_image(image: np.ndarray) -> np.ndarray:
    """
    Batch version of core.color.color_to_pixel for a (H, W, 3) float image.

    Returns:
        np.ndarray: int64 array of the same shape. No clamping is applied.
    """
    image = np.ascontiguousarray(image, dtype=np.float64)
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) image, got shape {image.shape}")
    output = np.empty(image.shape, dtype=np.int64)
    _quantize_kernel(image, output)
    return output


def write_ppm_array(out: TextIO, image: np.ndarray) -> None:
    """
    Write a (H, W, 3) float image as P3. Same bytes as write_ppm for
    colors in [0, 1].
    """
    pixels = quantize_image(image)
    height, width, _ = pixels.shape
    write_header(out, width, height)
    for row in pixels:
        out.write("".join(f"{r} {g} {b}\n" for r, g, b in row))


def save_png(path: str, image: np.ndarray) -> None:
    """
    Save a (H, W, 3) float image as a PNG preview.
    Values are clipped to 0..255 since PNG stores bytes.
    """
    pixels = quantize_image(image).clip(0, MAX_COLOR).astype("uint8")
    Image.fromarray(pixels).save(path)
