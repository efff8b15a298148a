from __future__ import annotations

import numpy as np
from PIL import ImageColor
from skimage import color as skcolor

from .models import RGB, BrandColor, InvalidColorError, PaletteEngineError

# Lab lightness units per darken/brighten step.
LAB_STEP = 18.0


def parse_color(value: object) -> BrandColor:
    """Parse a user supplied color into a ``BrandColor``.

    Accepts anything Pillow's ``ImageColor`` understands: ``#rgb``,
    ``#rrggbb``, ``rgb()``, ``hsl()`` and CSS color names. Bare six digit hex
    without the leading ``#`` is accepted as well. Alpha given through
    ``rgba()``, ``hsla()`` or ``#rrggbbaa`` is dropped; palettes are opaque.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidColorError(f"invalid color {value!r}: expected a color string")

    text = value.strip()
    if len(text) in (3, 6) and all(ch in "0123456789abcdefABCDEF" for ch in text):
        text = f"#{text}"

    try:
        channels = ImageColor.getrgb(text)
    except ValueError as exc:
        raise InvalidColorError(
            f"invalid color '{value}'. Use hex, rgb(), hsl() or a named color"
        ) from exc
    return BrandColor((int(channels[0]), int(channels[1]), int(channels[2])))


def hue_degrees(color: BrandColor) -> float | None:
    # HSV and HSL share the same hue angle. Greys have no hue.
    if max(color.rgb) == min(color.rgb):
        return None
    rgb = np.asarray(color.rgb, dtype=np.float64).reshape(1, 1, 3) / 255.0
    hsv = skcolor.rgb2hsv(rgb).reshape(3)
    return float(hsv[0]) * 360.0


def darken(color: BrandColor, amount: float = 1.0) -> BrandColor:
    return _shift_lightness(color, -LAB_STEP * amount)


def brighten(color: BrandColor, amount: float = 1.0) -> BrandColor:
    return _shift_lightness(color, LAB_STEP * amount)


def rotate_hue(color: BrandColor, degrees: float) -> BrandColor:
    rgb = np.asarray(color.rgb, dtype=np.float64).reshape(1, 1, 3) / 255.0
    hsv = skcolor.rgb2hsv(rgb)
    hsv[..., 0] = ((hsv[..., 0] * 360.0 + degrees) % 360.0) / 360.0
    rotated = skcolor.hsv2rgb(hsv).reshape(3)
    return BrandColor(_to_uint8(rotated))


def _shift_lightness(color: BrandColor, delta: float) -> BrandColor:
    rgb = np.asarray(color.rgb, dtype=np.float64).reshape(1, 1, 3) / 255.0
    lab = skcolor.rgb2lab(rgb)
    lab[..., 0] = np.clip(lab[..., 0] + delta, 0.0, 100.0)
    shifted = skcolor.lab2rgb(lab).reshape(3)
    return BrandColor(_to_uint8(shifted))


def _to_uint8(rgb: np.ndarray) -> RGB:
    clipped = np.clip(np.round(rgb * 255.0), 0, 255).astype(np.uint8)
    return int(clipped[0]), int(clipped[1]), int(clipped[2])
