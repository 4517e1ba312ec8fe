# core/color.py
from typing import TextIO, Tuple

from core.vector import Color

# 255.999 so that 1.0 maps to 255 rather than 256.
COLOR_SCALE = 255.999
MAX_COLOR = 255


def color_to_pixel(pixel_color: Color) -> Tuple[int, int, int]:
    """
    Map a color with components in [0, 1] to integer byte values.

    Components are not clamped: values outside [0, 1] produce integers
    outside 0..255.
    """
    return (
        int(COLOR_SCALE * pixel_color.x),
        int(COLOR_SCALE * pixel_color.y),
        int(COLOR_SCALE * pixel_color.z)
    )


def write_color(out: TextIO, pixel_color: Color) -> None:
    """
    Write one PPM pixel line "R G B\\n" to out.

    Exactly one write() call is made; any error raised by the sink
    propagates to the caller.
    """
    r, g, b = color_to_pixel(pixel_color)
    out.write(f"{r} {g} {b}\n")
