"""Public entrypoint for the tonal palette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``palette`` instead of individual
submodules.
"""

from .color_types import Color
from .contrast import (
    ContrastAnalysis,
    WCAGLevel,
    analyze_contrast,
    contrast_ratio,
    is_accessible_combination,
    optimal_text_color,
    optimal_text_color_wcag,
    relative_luminance,
)
from .convert import (
    HSL,
    RGB,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_hex_color,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from .engine import generate_palette
from .errors import InvalidColor, InvalidStep, PaletteError
from .export import ExportFormat, export_palette, palette_to_dict, parsed_hsl
from .palette import Palette, PaletteStop

__all__ = [
    "Color",
    "RGB",
    "HSL",
    "Palette",
    "PaletteStop",
    "generate_palette",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "is_hex_color",
    "normalize_hex",
    "relative_luminance",
    "contrast_ratio",
    "optimal_text_color",
    "optimal_text_color_wcag",
    "analyze_contrast",
    "is_accessible_combination",
    "ContrastAnalysis",
    "WCAGLevel",
    "ExportFormat",
    "export_palette",
    "palette_to_dict",
    "parsed_hsl",
    "PaletteError",
    "InvalidColor",
    "InvalidStep",
]
