from __future__ import annotations

import pytest

from branding.src.palette_engine.accessibility import relative_luminance
from branding.src.palette_engine.colors import (
    InvalidColorError,
    brighten,
    darken,
    hue_degrees,
    parse_color,
    rotate_hue,
)
from branding.src.palette_engine.models import BrandColor


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("#0F0", (0, 255, 0)),
        ("#2563EB", (37, 99, 235)),
        ("ff8800", (255, 136, 0)),
        ("rgb(255, 0, 0)", (255, 0, 0)),
        ("navy", (0, 0, 128)),
        ("  #ffffff  ", (255, 255, 255)),
    ],
)
def test_parse_color_accepts_common_formats(raw, expected):
    assert parse_color(raw).rgb == expected


@pytest.mark.parametrize("raw", ["not-a-color", "#12345", "", None, 42])
def test_parse_color_rejects_malformed_input(raw):
    with pytest.raises(InvalidColorError):
        parse_color(raw)


def test_brand_color_hex_is_lowercase_and_round_trips():
    color = BrandColor.from_hex("#2563EB")

    assert color.hex == "#2563eb"
    assert str(color) == "#2563eb"
    assert BrandColor.from_hex(color.hex) == color


def test_hue_degrees():
    assert hue_degrees(BrandColor((255, 0, 0))) == pytest.approx(0.0)
    assert hue_degrees(BrandColor((0, 255, 0))) == pytest.approx(120.0)
    assert hue_degrees(BrandColor((0, 0, 255))) == pytest.approx(240.0)
    assert hue_degrees(BrandColor((128, 128, 128))) is None
    assert hue_degrees(BrandColor((0, 0, 0))) is None


def test_darken_and_brighten_move_luminance():
    base = BrandColor((37, 99, 235))

    assert relative_luminance(darken(base)) < relative_luminance(base)
    assert relative_luminance(brighten(base)) > relative_luminance(base)
    assert darken(BrandColor((0, 0, 0))) == BrandColor((0, 0, 0))
    assert brighten(BrandColor((255, 255, 255))) == BrandColor((255, 255, 255))


def test_rotate_hue_by_120_degrees():
    assert rotate_hue(BrandColor((255, 0, 0)), 120) == BrandColor((0, 255, 0))
    assert rotate_hue(BrandColor((0, 0, 255)), 120) == BrandColor((255, 0, 0))
    assert rotate_hue(BrandColor((90, 90, 90)), 120) == BrandColor((90, 90, 90))


def test_parse_color_drops_alpha():
    assert parse_color("rgba(255, 0, 0, 128)").rgb == (255, 0, 0)
    assert parse_color("#00ff0080").rgb == (0, 255, 0)


@pytest.mark.parametrize("raw", ["#abc", "zz", "#12345g", "1234567", None])
def test_from_hex_rejects_malformed_input(raw):
    with pytest.raises(InvalidColorError):
        BrandColor.from_hex(raw)


@pytest.mark.parametrize("rgb", [(256, 0, 0), (-1, 0, 0), (1, 2)])
def test_brand_color_rejects_out_of_range_channels(rgb):
    with pytest.raises(InvalidColorError):
        BrandColor(rgb)
