from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from palette import (
    Color,
    InvalidColor,
    InvalidStep,
    Palette,
    generate_palette,
    hex_to_hsl,
    hsl_to_hex,
    optimal_text_color,
    optimal_text_color_wcag,
)
from palette.contrast import relative_luminance, text_luminance
from palette.engine import main_index_for_lightness


def test_example_palette_step_100() -> None:
    pal = generate_palette("#3498db", 100)
    assert isinstance(pal, Palette)
    assert len(pal) == 9
    assert pal.indices() == [100, 200, 300, 400, 500, 600, 700, 800, 900]
    assert pal.main_index == 500
    assert pal[500].hex == "#3498db"
    assert pal.main is pal[500]
    assert pal.main.color == Color("#3498db")


def test_non_main_stops_keep_hue_and_saturation() -> None:
    h, s, _ = hex_to_hsl("#3498db")
    pal = generate_palette("#3498db", 100)
    for stop in pal:
        if stop.index == pal.main_index:
            continue
        assert stop.hex == hsl_to_hex((h, s, 100 - stop.index / 10))


def test_default_step_is_50() -> None:
    pal = generate_palette("#3498db")
    assert pal.step == 50
    assert len(pal) == 19
    assert all(i % 50 == 0 for i in pal.indices())


def test_main_stop_inserted_off_grid() -> None:
    pal = generate_palette("#3498db", 300)
    assert pal.indices() == [300, 500, 600, 900]
    assert pal[500].hex == "#3498db"


def test_step_beyond_range_keeps_only_main() -> None:
    pal = generate_palette("#3498db", 1000)
    assert pal.indices() == [500]


@pytest.mark.parametrize(
    "lightness, expected",
    [(53.14, 500), (59.99, 500), (60.0, 400), (9.99, 1000), (0.0, 1000), (100.0, 0), (10.0, 900)],
)
def test_main_index_uses_truncated_bucket(lightness: float, expected: int) -> None:
    assert main_index_for_lightness(lightness) == expected


def test_white_and_black_main_outside_ramp() -> None:
    white = generate_palette("#ffffff", 100)
    assert white.main_index == 0
    assert 0 not in white
    assert white.main.hex == "#ffffff"
    assert white.main.index == 0
    assert white.main.text_color_wcag == "#000000"
    assert len(white) == 9

    black = generate_palette("#000", 100)
    assert black.main_index == 1000
    assert 1000 not in black
    assert black.main.hex == "#000000"
    assert black.main.text_color_wcag == "#ffffff"
    assert black.main.text_luminance == "light"


def test_short_and_alpha_inputs_are_canonicalized() -> None:
    assert generate_palette("#abc", 100).main.hex == "#aabbcc"
    assert generate_palette("3498DB80", 100).main.hex == "#3498db"


def test_stop_annotations_match_contrast_policies() -> None:
    pal = generate_palette("#e67e22", 50)
    for stop in pal:
        assert stop.text_color == optimal_text_color(stop.hex)
        assert stop.text_color_wcag == optimal_text_color_wcag(stop.hex)
        assert stop.text_luminance == text_luminance(relative_luminance(stop.color.rgb))


def test_light_end_gets_dark_text_and_dark_end_light_text() -> None:
    pal = generate_palette("#3498db", 100)
    assert pal[100].text_color_wcag == "#000000"
    assert pal[100].text_luminance == "dark"
    assert pal[900].text_color_wcag == "#ffffff"
    assert pal[900].text_luminance == "light"


def test_palette_is_immutable() -> None:
    pal = generate_palette("#3498db", 100)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pal.step = 10  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        pal.main.index = 1  # type: ignore[misc]
    with pytest.raises(KeyError):
        _ = pal[150]


@pytest.mark.parametrize("value", ["not-a-color", "#zzz", "", "#12345"])
def test_invalid_color(value: str) -> None:
    with pytest.raises(InvalidColor):
        generate_palette(value, 50)


@pytest.mark.parametrize("step", [0, -50, 2.5, True, "50", None])
def test_invalid_step(step) -> None:
    with pytest.raises(InvalidStep):
        generate_palette("#3498db", step)


def test_numpy_integer_step_is_accepted() -> None:
    pal = generate_palette("#3498db", np.int64(100))
    assert pal.step == 100
    assert type(pal.step) is int
