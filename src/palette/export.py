from __future__ import annotations

"""Helpers for handing palettes to external consumers.

This module exposes :class:`ExportFormat` and :func:`export_palette` to
convert a :class:`Palette` into plain per-index color values, and
:func:`palette_to_dict` which builds the JSON document served by the HTTP
API (camelCase keys, one section per color representation).
"""

from enum import Enum
from typing import Any, Dict

from .color_types import Color
from .convert import hex_to_hsl
from .palette import Palette, PaletteStop


class ExportFormat(Enum):
    """Supported output formats for exported palettes."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


def export_palette(palette: Palette, fmt: ExportFormat | str) -> Dict[int, object]:
    """Convert a Palette to ``{index: value}`` in the desired format.

    HSL values are rounded to integers.
    """
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.HEX:
        return {stop.index: stop.color.hex for stop in palette}
    if export_fmt == ExportFormat.RGB:
        return {stop.index: tuple(stop.color.rgb) for stop in palette}
    if export_fmt == ExportFormat.HSL:
        return {stop.index: _rounded_hsl(stop.color) for stop in palette}
    raise ValueError(f"Unsupported export format: {fmt}")


def parsed_hsl(hex_color: str) -> Dict[str, int]:
    """Rounded HSL of a hex color as ``{hue, saturation, lightness}``."""
    h, s, l = hex_to_hsl(hex_color)  # noqa: E741
    return {"hue": _round(h) % 360, "saturation": _round(s), "lightness": _round(l)}


def palette_to_dict(palette: Palette) -> Dict[str, Any]:
    """Serialize a palette to the JSON shape used by the HTTP API.

    Tone indices become string keys so the result survives a JSON round trip
    unchanged.
    """
    hex_section: Dict[str, Any] = {}
    rgb_section: Dict[str, Any] = {}
    hsl_section: Dict[str, Any] = {}
    for stop in palette:
        key = str(stop.index)
        hex_section[key] = _hex_entry(stop)
        rgb_section[key] = _rgb_entry(stop)
        hsl_section[key] = _hsl_entry(stop)

    main = palette.main
    main_hex = _hex_entry(main)
    main_hex["value"] = main_hex.pop("hex")
    return {
        "colors": {"hex": hex_section, "rgb": rgb_section, "hsl": hsl_section},
        "mainColor": {
            "hex": main_hex,
            "index": palette.main_index,
            "rgb": _rgb_entry(main),
            "hsl": _hsl_entry(main),
        },
    }


def _hex_entry(stop: PaletteStop) -> Dict[str, Any]:
    return {
        "hex": stop.color.hex,
        "textLuminance": stop.text_luminance,
        "textColor": stop.text_color,
        "textColorWCAG": stop.text_color_wcag,
    }


def _rgb_entry(stop: PaletteStop) -> Dict[str, Any]:
    r, g, b = stop.color.rgb
    return {"r": r, "g": g, "b": b, "textLuminance": stop.text_luminance}


def _hsl_entry(stop: PaletteStop) -> Dict[str, Any]:
    h, s, l = _rounded_hsl(stop.color)  # noqa: E741
    return {"h": h, "s": s, "l": l, "textLuminance": stop.text_luminance}


def _rounded_hsl(color: Color) -> tuple[int, int, int]:
    h, s, l = color.hsl  # noqa: E741
    return (_round(h) % 360, _round(s), _round(l))


def _round(x: float) -> int:
    # Half-up, matching the 8-bit channel rounding in convert.
    return int(x + 0.5) if x >= 0 else -int(-x + 0.5)


__all__ = [
    "ExportFormat",
    "export_palette",
    "parsed_hsl",
    "palette_to_dict",
]
