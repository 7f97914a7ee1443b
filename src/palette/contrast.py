from __future__ import annotations

"""WCAG relative luminance, contrast ratio and text color selection.

Two text color policies are provided:

* :func:`optimal_text_color_wcag` compares the contrast ratio of the
  background against pure white and pure black and keeps the larger one.
  This is the canonical policy.
* :func:`optimal_text_color` is a cheaper luminance threshold (0.5). It
  favours black text on mid tones and can disagree with the WCAG pick for
  luminances between 0.179 and 0.5.

:func:`text_luminance` labels a background ``"dark"`` (needs dark text) or
``"light"`` (needs light text) using 0.179, the luminance at which white and
black reach the same contrast ratio (0.1791 rounded), so it matches the
WCAG pick everywhere outside that rounding gap.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

import numpy as np

from .convert import hex_to_rgb

TextColor = Literal["#ffffff", "#000000"]
TextLuminance = Literal["light", "dark"]

WHITE: TextColor = "#ffffff"
BLACK: TextColor = "#000000"

GAMMA_THRESHOLD = 0.03928
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])
LUMINANCE_OFFSET = 0.05

# Luminance where contrast against white equals contrast against black.
TEXT_LUMINANCE_THRESHOLD = 0.179
FAST_LUMINANCE_THRESHOLD = 0.5


class WCAGLevel(Enum):
    """WCAG 2.1 conformance level of a contrast ratio (normal text)."""

    AAA = "AAA"
    AA = "AA"
    FAIL = "FAIL"

    @property
    def min_ratio(self) -> float:
        return _LEVEL_RATIOS[self]

    @classmethod
    def from_value(cls, value: "WCAGLevel | str") -> "WCAGLevel":
        if isinstance(value, WCAGLevel):
            return value
        for level in cls:
            if level.value == str(value).upper():
                return level
        raise ValueError(f"Unknown WCAG level: {value}")


_LEVEL_RATIOS = {WCAGLevel.AAA: 7.0, WCAGLevel.AA: 4.5, WCAGLevel.FAIL: 1.0}


@dataclass(frozen=True)
class ContrastAnalysis:
    """Best text color for a background and how well it performs."""

    text_color: TextColor
    contrast_ratio: float
    is_accessible: bool
    wcag_level: WCAGLevel


def relative_luminance_array(rgb: np.ndarray) -> np.ndarray:
    """Vectorized relative luminance of 8-bit RGB values.

    Parameters
    ----------
    rgb:
        Array of shape ``(..., 3)`` with channels in 0-255.

    Returns
    -------
    np.ndarray
        Luminances in [0, 1] with shape ``rgb.shape[:-1]``.
    """
    c = np.clip(np.asarray(rgb, dtype=np.float64), 0.0, 255.0) / 255.0
    linear = np.where(c <= GAMMA_THRESHOLD, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)
    return linear @ LUMINANCE_WEIGHTS


def relative_luminance(rgb: tuple[float, float, float]) -> float:
    """Relative luminance (WCAG 2.1) of an 8-bit RGB color, in [0, 1]."""
    return float(relative_luminance_array(np.asarray(rgb, dtype=np.float64)))


def contrast_ratio(lum1: float, lum2: float) -> float:
    """WCAG contrast ratio between two luminances, in [1, 21]."""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + LUMINANCE_OFFSET) / (darker + LUMINANCE_OFFSET)


def text_luminance(lum: float) -> TextLuminance:
    """Return ``"dark"`` when dark text should be used on this luminance."""
    return "dark" if lum > TEXT_LUMINANCE_THRESHOLD else "light"


def text_color_for_luminance(lum: float) -> TextColor:
    """Fast threshold policy on a precomputed luminance."""
    return WHITE if lum < FAST_LUMINANCE_THRESHOLD else BLACK


def text_color_wcag_for_luminance(lum: float) -> TextColor:
    """WCAG ratio policy on a precomputed luminance; ties go to black."""
    with_white = contrast_ratio(lum, 1.0)
    with_black = contrast_ratio(lum, 0.0)
    return WHITE if with_white > with_black else BLACK


def optimal_text_color(background: str) -> TextColor:
    """Pick white or black text with the fast luminance threshold.

    Raises
    ------
    InvalidColor
        If ``background`` is not a valid hex color.
    """
    return text_color_for_luminance(relative_luminance(hex_to_rgb(background)))


def optimal_text_color_wcag(background: str) -> TextColor:
    """Pick whichever of white or black has the higher contrast ratio.

    Raises
    ------
    InvalidColor
        If ``background`` is not a valid hex color.
    """
    return text_color_wcag_for_luminance(relative_luminance(hex_to_rgb(background)))


def wcag_level(ratio: float) -> WCAGLevel:
    """Classify a contrast ratio against the AA (4.5) and AAA (7.0) thresholds."""
    if ratio >= WCAGLevel.AAA.min_ratio:
        return WCAGLevel.AAA
    if ratio >= WCAGLevel.AA.min_ratio:
        return WCAGLevel.AA
    return WCAGLevel.FAIL


def analyze_contrast(background: str) -> ContrastAnalysis:
    """Full contrast analysis of the best text color for ``background``."""
    lum = relative_luminance(hex_to_rgb(background))
    with_white = contrast_ratio(lum, 1.0)
    with_black = contrast_ratio(lum, 0.0)
    best = max(with_white, with_black)
    return ContrastAnalysis(
        text_color=WHITE if with_white > with_black else BLACK,
        contrast_ratio=round(best, 2),
        is_accessible=best >= WCAGLevel.AA.min_ratio,
        wcag_level=wcag_level(best),
    )


def is_accessible_combination(
    background: str, text: str, level: WCAGLevel | str = WCAGLevel.AA
) -> bool:
    """Return True if ``text`` on ``background`` meets the given WCAG level."""
    required = WCAGLevel.from_value(level)
    if required is WCAGLevel.FAIL:
        raise ValueError("level must be AA or AAA")
    bg_lum = relative_luminance(hex_to_rgb(background))
    text_lum = relative_luminance(hex_to_rgb(text))
    return contrast_ratio(bg_lum, text_lum) >= required.min_ratio


__all__ = [
    "TextColor",
    "TextLuminance",
    "WHITE",
    "BLACK",
    "WCAGLevel",
    "ContrastAnalysis",
    "relative_luminance",
    "relative_luminance_array",
    "contrast_ratio",
    "text_luminance",
    "text_color_for_luminance",
    "text_color_wcag_for_luminance",
    "optimal_text_color",
    "optimal_text_color_wcag",
    "wcag_level",
    "analyze_contrast",
    "is_accessible_combination",
]
