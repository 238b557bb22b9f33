"""
Display Color Helpers

Users get a random hex color at registration; the UI derives an accent
shade and a text contrast hint from it.
"""

import colorsys
import secrets
from typing import Tuple

HEX_DIGITS = "0123456789ABCDEF"
SHIFT_MAGNITUDE = 0.2


def generate_color() -> str:
    """Random "#RRGGBB" color, six independent uniform hex digits."""
    return "#" + "".join(secrets.choice(HEX_DIGITS) for _ in range(6))


def _hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    value = hex_color.replace("#", "")
    if len(value) == 3:
        value = "".join(c + c for c in value)
    if len(value) != 6:
        raise ValueError("Invalid hex color")
    try:
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
    except ValueError:
        raise ValueError("Invalid hex color") from None


def shift_color(hex_color: str) -> str:
    """
    Move the lightness of a color 0.2 towards the middle.

    Dark colors get lighter, light colors get darker, so the result is always
    distinguishable from the input when drawn next to it.

    Args:
        hex_color: "#RGB" or "#RRGGBB", the leading "#" is optional

    Returns:
        Lowercase "#rrggbb" string

    Raises:
        ValueError: if the input is not a hex color
    """
    r, g, b = _hex_to_rgb(hex_color)
    # colorsys works in HLS order
    h, lightness, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)

    if lightness < 0.5:
        lightness += SHIFT_MAGNITUDE
    else:
        lightness -= SHIFT_MAGNITUDE
    lightness = max(0.0, min(1.0, lightness))

    r2, g2, b2 = colorsys.hls_to_rgb(h, lightness, s)
    return "#" + "".join(f"{round(v * 255):02x}" for v in (r2, g2, b2))


def is_color_dark(hex_color: str) -> bool:
    r, g, b = _hex_to_rgb(hex_color)
    return r * 0.299 + g * 0.587 + b * 0.114 < 128
