from __future__ import annotations

"""Tonal palette generation.

This module provides :func:`generate_palette`, which keeps the hue and
saturation of a base color, varies lightness along a tone index grid in
(0, 1000) and annotates every swatch with text color recommendations.
"""

import logging

import numpy as np

from .color_types import Color
from .contrast import (
    relative_luminance_array,
    text_color_for_luminance,
    text_color_wcag_for_luminance,
    text_luminance,
)
from .convert import hsl_to_hex
from .errors import InvalidStep
from .palette import Palette, PaletteStop

logger = logging.getLogger(__name__)

MAX_INDEX = 1000


def main_index_for_lightness(lightness: float) -> int:
    """Tone index of the swatch that reproduces a color of this lightness.

    Lightness is truncated to its tens bucket before scaling, so 53.1 and
    59.9 both map to 500. Lightness below 10 maps to 1000 and pure white
    maps to 0, both outside the ramp.
    """
    return MAX_INDEX - int(lightness / 10) * 100


def generate_palette(hex_color: str, step: int = 50) -> Palette:
    """Generate a tonal ramp around a base color.

    Parameters
    ----------
    hex_color:
        Base color as a 3, 4, 6 or 8 digit hex string (``#`` optional).
    step:
        Spacing of the tone index grid; stops are generated at
        ``step, 2*step, ...`` below 1000.

    Returns
    -------
    Palette
        Stops ordered by index. Stop ``i`` has the base hue/saturation and
        lightness ``100 - i/10``, except the main stop, which carries the
        input color unchanged.

    Raises
    ------
    InvalidColor
        If ``hex_color`` is malformed.
    InvalidStep
        If ``step`` is not a positive integer.
    """
    if isinstance(step, bool) or not isinstance(step, (int, np.integer)) or step <= 0:
        raise InvalidStep(step)
    step = int(step)

    base = Color.from_hex(hex_color)
    h, s, l = base.hsl  # noqa: E741
    main_index = main_index_for_lightness(l)

    indices = list(range(step, MAX_INDEX, step))
    if 0 < main_index < MAX_INDEX and main_index not in indices:
        indices.append(main_index)
        indices.sort()

    colors = [
        base if index == main_index else Color(hsl_to_hex((h, s, 100.0 - index / 10.0)))
        for index in indices
    ]
    stops = _annotate(indices, colors)

    main = next((stop for stop in stops if stop.index == main_index), None)
    if main is None:
        (main,) = _annotate([main_index], [base])

    logger.debug(
        "palette %s step=%d: %d stops, main index %d", base.hex, step, len(stops), main_index
    )
    return Palette(base=base, step=step, main_index=main_index, stops=tuple(stops), main=main)


def _annotate(indices: list[int], colors: list[Color]) -> list[PaletteStop]:
    if not colors:
        return []
    lums = relative_luminance_array(np.array([c.rgb for c in colors], dtype=np.float64))
    stops: list[PaletteStop] = []
    for index, color, lum in zip(indices, colors, lums):
        lum = float(lum)
        stops.append(
            PaletteStop(
                index=index,
                color=color,
                text_luminance=text_luminance(lum),
                text_color=text_color_for_luminance(lum),
                text_color_wcag=text_color_wcag_for_luminance(lum),
            )
        )
    return stops


__all__ = ["generate_palette", "main_index_for_lightness", "MAX_INDEX"]
