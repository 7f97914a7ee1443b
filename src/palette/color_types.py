from __future__ import annotations

"""Core color value type used by the palette library.

A :class:`Color` holds exactly one piece of state, its canonical hex
string. RGB and HSL are derived on access and never stored, so they cannot
drift from the hex value.
"""

from dataclasses import dataclass

from .convert import HSL, RGB, hex_to_rgb, hsl_to_hex, normalize_hex, rgb_to_hsl


@dataclass(frozen=True)
class Color:
    """Immutable color identified by its canonical ``#rrggbb`` hex string.

    Use :meth:`from_hex` or :meth:`from_hsl` instead of the constructor
    unless ``hex`` is already canonical.
    """

    hex: str

    def __post_init__(self) -> None:
        canonical = normalize_hex(self.hex)
        if canonical != self.hex:
            object.__setattr__(self, "hex", canonical)

    @property
    def rgb(self) -> RGB:
        """8-bit RGB channels derived from ``hex``."""
        return hex_to_rgb(self.hex)

    @property
    def hsl(self) -> HSL:
        """Unrounded HSL derived from ``hex``."""
        return rgb_to_hsl(self.rgb)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Create a Color from a 3, 4, 6 or 8 digit hex string."""
        return cls(normalize_hex(value))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> "Color":  # noqa: E741
        """Create a Color from HSL; the result is quantized to 8-bit RGB."""
        return cls(hsl_to_hex((h, s, l)))

    def __str__(self) -> str:
        return self.hex


__all__ = ["Color"]
