from __future__ import annotations

"""Color conversion between hex, sRGB and HSL.

This module is the color space converter of the library: pure functions
converting hex strings to 8-bit RGB and RGB to/from HSL. Hex strings are
the canonical wire representation; everything else is derived from them.
"""

import colorsys
import math
import re
from typing import NamedTuple

from .errors import InvalidColor


class RGB(NamedTuple):
    """8-bit sRGB channels (0-255)."""

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in [0, 100]."""

    h: float
    s: float
    l: float  # noqa: E741


_HEX_RE = re.compile(r"#?(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")


def is_hex_color(value: object) -> bool:
    """Return True for 3, 4, 6 or 8 digit hex strings (``#`` optional)."""
    if not isinstance(value, str):
        return False
    return _HEX_RE.fullmatch(value.strip()) is not None


def normalize_hex(value: object) -> str:
    """Return the canonical ``#rrggbb`` form of a hex color.

    Short forms are expanded digit by digit (``#abc`` -> ``#aabbcc``) and an
    alpha channel, if present, is dropped.

    Raises
    ------
    InvalidColor
        If ``value`` is not a 3, 4, 6 or 8 digit hex string.
    """
    if not is_hex_color(value):
        raise InvalidColor(value)
    s = str(value).strip().lstrip("#").lower()
    if len(s) in (3, 4):
        s = "".join(ch * 2 for ch in s[:3])
    return "#" + s[:6]


def hex_to_rgb(value: str) -> RGB:
    """Convert a hex color to 8-bit RGB."""
    s = normalize_hex(value)
    return RGB(int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))


def rgb_to_hex(rgb: tuple[float, float, float]) -> str:
    """Convert RGB channels (0-255) to ``#rrggbb``; channels are rounded and clamped."""
    r, g, b = (_to_u8(c) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_hsl(rgb: tuple[float, float, float]) -> HSL:
    """Convert RGB channels (0-255) to HSL."""
    r, g, b = (_clamp(c, 0.0, 255.0) / 255.0 for c in rgb)
    h, l, s = colorsys.rgb_to_hls(r, g, b)  # noqa: E741
    return HSL(
        normalize_hue(h * 360.0),
        _clamp(s * 100.0, 0.0, 100.0),
        _clamp(l * 100.0, 0.0, 100.0),
    )


def hsl_to_rgb(hsl: tuple[float, float, float]) -> RGB:
    """Convert HSL to 8-bit RGB.

    Hue wraps into [0, 360); saturation and lightness are clamped to
    [0, 100] before conversion.
    """
    h, s, l = hsl  # noqa: E741
    r, g, b = colorsys.hls_to_rgb(
        normalize_hue(h) / 360.0,
        _clamp(l, 0.0, 100.0) / 100.0,
        _clamp(s, 0.0, 100.0) / 100.0,
    )
    return RGB(_to_u8(r * 255.0), _to_u8(g * 255.0), _to_u8(b * 255.0))


def hex_to_hsl(value: str) -> HSL:
    """Convert a hex color to HSL."""
    return rgb_to_hsl(hex_to_rgb(value))


def hsl_to_hex(hsl: tuple[float, float, float]) -> str:
    """Convert HSL to a ``#rrggbb`` hex color."""
    return rgb_to_hex(hsl_to_rgb(hsl))


def normalize_hue(h: float) -> float:
    """Normalize hue angle into [0, 360)."""
    h = (h % 360.0 + 360.0) % 360.0
    # -1e-15 % 360.0 rounds to 360.0
    return 0.0 if h >= 360.0 else h


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, float(x)))


def _to_u8(x: float) -> int:
    # Half-up rounding; int(round()) rounds half to even.
    return int(math.floor(_clamp(x, 0.0, 255.0) + 0.5))


__all__ = [
    "RGB",
    "HSL",
    "is_hex_color",
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "normalize_hue",
]
