from __future__ import annotations

import logging
from pathlib import Path

from .accessibility import ensure_wcag_compliance, palette_from_adjusted
from .colors import darken, parse_color, rotate_hue
from .io import decode_image, read_image_bytes
from .models import (
    WCAG_THRESHOLDS,
    AdjustedColor,
    ColorPalette,
    ExtractionOptions,
    ExtractionResult,
)
from .quantize import quantize_colors
from .report import build_result
from .sampling import sample_pixels
from .selection import select_color_scheme

logger = logging.getLogger(__name__)

SECONDARY_DARKEN_AMOUNT = 0.5
ACCENT_HUE_ROTATION = 120.0


class PaletteExtractionPipeline:
    def __init__(self, options: ExtractionOptions | None = None) -> None:
        self.options = options or ExtractionOptions()

    def run(self, data: bytes) -> ExtractionResult:
        options = self.options
        image_rgb = decode_image(data, max_dimension=options.max_dimension)

        population = sample_pixels(
            image_rgb,
            stride=options.sample_stride,
            min_brightness=options.min_brightness,
            max_brightness=options.max_brightness,
            min_saturation=options.min_saturation,
        )

        quantized = quantize_colors(
            population, k=options.cluster_count, max_iterations=options.max_iterations
        )
        warnings: list[str] = []
        if quantized.fallback:
            warnings.append("empty_population_fallback")
        elif not quantized.converged:
            warnings.append("kmeans_iteration_cap_reached")

        dominant_colors = quantized.dominant_colors
        primary, secondary, accent = select_color_scheme(dominant_colors)
        adjusted = ensure_wcag_compliance(
            primary, secondary, accent, min_contrast=options.min_contrast
        )
        if any(item.contrast_ratio < options.min_contrast for item in adjusted):
            warnings.append("wcag_not_met")

        return build_result(
            *adjusted,
            dominant_colors=dominant_colors,
            min_contrast=options.min_contrast,
            auto_extracted=True,
            warnings=warnings,
        )

    def run_path(self, image_path: str | Path) -> ExtractionResult:
        return self.run(read_image_bytes(image_path))


def extract(data: bytes, options: ExtractionOptions | None = None) -> ExtractionResult:
    return PaletteExtractionPipeline(options).run(data)


def build_palette(
    primary: str,
    secondary: str | None = None,
    accent: str | None = None,
    wcag_level: str = "AA",
) -> ColorPalette:
    """Build an accessible palette from caller supplied colors.

    A missing secondary is the primary slightly darkened and a missing
    accent is the primary rotated 120 degrees around the hue wheel.
    """
    return palette_from_adjusted(*_adjust_manual(primary, secondary, accent, wcag_level))


def build_palette_result(
    primary: str,
    secondary: str | None = None,
    accent: str | None = None,
    wcag_level: str = "AA",
) -> ExtractionResult:
    adjusted = _adjust_manual(primary, secondary, accent, wcag_level)
    min_contrast = WCAG_THRESHOLDS[wcag_level]
    warnings = (
        ["wcag_not_met"]
        if any(item.contrast_ratio < min_contrast for item in adjusted)
        else []
    )
    return build_result(
        *adjusted,
        dominant_colors=[item.background for item in adjusted],
        min_contrast=min_contrast,
        auto_extracted=False,
        warnings=warnings,
    )


def _adjust_manual(
    primary: str,
    secondary: str | None,
    accent: str | None,
    wcag_level: str,
) -> tuple[AdjustedColor, AdjustedColor, AdjustedColor]:
    if wcag_level not in WCAG_THRESHOLDS:
        raise ValueError(f"unsupported wcag_level '{wcag_level}'. Use AA or AAA")

    primary_color = parse_color(primary)
    secondary_color = (
        parse_color(secondary)
        if secondary
        else darken(primary_color, SECONDARY_DARKEN_AMOUNT)
    )
    accent_color = (
        parse_color(accent) if accent else rotate_hue(primary_color, ACCENT_HUE_ROTATION)
    )
    logger.debug(
        "manual palette primary=%s secondary=%s accent=%s",
        primary_color,
        secondary_color,
        accent_color,
    )
    return ensure_wcag_compliance(
        primary_color,
        secondary_color,
        accent_color,
        min_contrast=WCAG_THRESHOLDS[wcag_level],
    )
