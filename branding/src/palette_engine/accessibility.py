from __future__ import annotations

import logging

from .colors import brighten, darken
from .models import (
    BLACK,
    WCAG_THRESHOLDS,
    WHITE,
    AdjustedColor,
    BrandColor,
    ColorPalette,
)

logger = logging.getLogger(__name__)

AA_CONTRAST = WCAG_THRESHOLDS["AA"]
ADJUSTMENT_STEP = 1.5


def relative_luminance(color: BrandColor) -> float:
    def _linear(channel: int) -> float:
        c = channel / 255.0
        if c <= 0.03928:
            return c / 12.92
        return ((c + 0.055) / 1.055) ** 2.4

    r, g, b = (_linear(channel) for channel in color.rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(first: BrandColor, second: BrandColor) -> float:
    lighter, darker = sorted(
        (relative_luminance(first), relative_luminance(second)), reverse=True
    )
    return (lighter + 0.05) / (darker + 0.05)


def best_text_color(background: BrandColor) -> tuple[BrandColor, float]:
    on_white = contrast_ratio(background, WHITE)
    on_black = contrast_ratio(background, BLACK)
    if on_white > on_black:
        return WHITE, on_white
    return BLACK, on_black


def is_wcag_compliant(first: BrandColor, second: BrandColor, level: str = "AA") -> bool:
    if level not in WCAG_THRESHOLDS:
        raise ValueError(f"unsupported WCAG level '{level}'. Use AA or AAA")
    return contrast_ratio(first, second) >= WCAG_THRESHOLDS[level]


def adjust_for_contrast(
    background: BrandColor, min_contrast: float = AA_CONTRAST
) -> AdjustedColor:
    """Pair ``background`` with black or white text.

    When neither reaches ``min_contrast`` a single corrective step is tried:
    light backgrounds are darkened for white text, dark ones brightened for
    black text. The step is kept only if it meets ``min_contrast``.
    """
    text_color, achieved = best_text_color(background)
    if achieved >= min_contrast:
        return AdjustedColor(background, text_color, achieved)

    if relative_luminance(background) > 0.5:
        candidate, candidate_text = darken(background, ADJUSTMENT_STEP), WHITE
    else:
        candidate, candidate_text = brighten(background, ADJUSTMENT_STEP), BLACK

    candidate_contrast = contrast_ratio(candidate, candidate_text)
    if candidate_contrast >= min_contrast:
        logger.debug(
            "adjusted %s to %s for %.2f:1 contrast",
            background,
            candidate,
            candidate_contrast,
        )
        return AdjustedColor(candidate, candidate_text, candidate_contrast, adjusted=True)

    logger.debug(
        "%s stays at %.2f:1, below the %.1f:1 target", background, achieved, min_contrast
    )
    return AdjustedColor(background, text_color, achieved)


def ensure_wcag_compliance(
    primary: BrandColor,
    secondary: BrandColor,
    accent: BrandColor,
    min_contrast: float = AA_CONTRAST,
) -> tuple[AdjustedColor, AdjustedColor, AdjustedColor]:
    return (
        adjust_for_contrast(primary, min_contrast),
        adjust_for_contrast(secondary, min_contrast),
        adjust_for_contrast(accent, min_contrast),
    )


def palette_from_adjusted(
    primary: AdjustedColor, secondary: AdjustedColor, accent: AdjustedColor
) -> ColorPalette:
    return ColorPalette(
        primary=primary.background,
        secondary=secondary.background,
        accent=accent.background,
        text_on_primary=primary.text_color,
        text_on_secondary=secondary.text_color,
        text_on_accent=accent.text_color,
    )
