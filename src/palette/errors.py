from __future__ import annotations

"""Exceptions raised by the palette library.

Both exceptions derive from :class:`ValueError` so callers that only care
about "bad input" can keep catching the builtin.
"""


class PaletteError(ValueError):
    """Base class for input errors raised by the palette library."""


class InvalidColor(PaletteError):
    """A color string is not a valid 3, 4, 6 or 8 digit hex color."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}")


class InvalidStep(PaletteError):
    """A palette step is not a positive integer."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"step must be a positive integer, got {value!r}")


__all__ = ["PaletteError", "InvalidColor", "InvalidStep"]
