from __future__ import annotations

"""Container types for generated tonal palettes.

This module defines :class:`PaletteStop`, one swatch of the tonal ramp with
its text color annotations, and :class:`Palette`, the ordered ramp plus the
designated main stop.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

from .color_types import Color
from .contrast import TextColor, TextLuminance


@dataclass(frozen=True)
class PaletteStop:
    """One swatch of a tonal ramp.

    Attributes
    ----------
    index:
        Tone index. Higher indices are darker.
    color:
        Swatch color.
    text_luminance:
        ``"dark"`` if dark text should be used on the swatch, else ``"light"``.
    text_color:
        Fast threshold pick (luminance < 0.5 gives white).
    text_color_wcag:
        White or black, whichever has the higher WCAG contrast ratio.
    """

    index: int
    color: Color
    text_luminance: TextLuminance
    text_color: TextColor
    text_color_wcag: TextColor

    @property
    def hex(self) -> str:
        return self.color.hex


@dataclass(frozen=True)
class Palette:
    """Tonal palette generated from a base color.

    Attributes
    ----------
    base:
        Input color, in canonical form.
    step:
        Spacing of the tone index grid.
    main_index:
        Tone index whose swatch reproduces ``base`` exactly.
    stops:
        Stops in ascending index order. Includes the main stop when
        ``0 < main_index < 1000``.
    main:
        The main stop. Always present, even when ``main_index`` falls on 0
        or 1000 and the stop is therefore not part of ``stops``.
    """

    base: Color
    step: int
    main_index: int
    stops: Tuple[PaletteStop, ...]
    main: PaletteStop

    def __len__(self) -> int:
        return len(self.stops)

    def __iter__(self) -> Iterator[PaletteStop]:
        return iter(self.stops)

    def __contains__(self, index: object) -> bool:
        return any(stop.index == index for stop in self.stops)

    def __getitem__(self, index: int) -> PaletteStop:
        for stop in self.stops:
            if stop.index == index:
                return stop
        raise KeyError(index)

    def indices(self) -> list[int]:
        """Tone indices of all stops in ascending order."""
        return [stop.index for stop in self.stops]

    @property
    def colors(self) -> list[Color]:
        return [stop.color for stop in self.stops]


__all__ = ["PaletteStop", "Palette"]
