from __future__ import annotations

import logging

from .colors import hue_degrees
from .models import BrandColor
from .quantize import FALLBACK_COLORS

logger = logging.getLogger(__name__)

SECONDARY_MIN_HUE_GAP = 30.0
SECONDARY_MAX_HUE_GAP = 330.0
# Near-complementary and near-triadic hue gaps, exclusive bounds.
ACCENT_HUE_WINDOWS = ((160.0, 200.0), (100.0, 140.0))


def select_color_scheme(
    colors: list[BrandColor],
) -> tuple[BrandColor, BrandColor, BrandColor]:
    """Pick ``(primary, secondary, accent)`` from frequency ordered colors."""
    if not colors:
        primary, secondary, accent = (BrandColor(rgb) for rgb in FALLBACK_COLORS)
        return primary, secondary, accent

    primary = colors[0]
    primary_hue = hue_degrees(primary)

    # Greys never match by hue; an achromatic primary keeps the fallbacks.
    gaps: list[float | None] = [None] * len(colors)
    if primary_hue is not None:
        for idx, candidate in enumerate(colors):
            hue = hue_degrees(candidate)
            if hue is not None:
                gaps[idx] = abs(hue - primary_hue)

    secondary = colors[1] if len(colors) > 1 else primary
    for idx in range(1, len(colors)):
        gap = gaps[idx]
        if gap is not None and SECONDARY_MIN_HUE_GAP < gap < SECONDARY_MAX_HUE_GAP:
            secondary = colors[idx]
            break

    accent = secondary
    for idx in range(2, len(colors)):
        gap = gaps[idx]
        if gap is not None and any(low < gap < high for low, high in ACCENT_HUE_WINDOWS):
            accent = colors[idx]
            break

    logger.debug(
        "selected primary=%s secondary=%s accent=%s", primary, secondary, accent
    )
    return primary, secondary, accent
