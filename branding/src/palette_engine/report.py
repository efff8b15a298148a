from __future__ import annotations

from .accessibility import AA_CONTRAST, palette_from_adjusted
from .colors import brighten, darken
from .models import (
    AdjustedColor,
    BrandColor,
    ColorPalette,
    ContrastRatios,
    ExtractionResult,
)


def build_result(
    primary: AdjustedColor,
    secondary: AdjustedColor,
    accent: AdjustedColor,
    dominant_colors: list[BrandColor],
    min_contrast: float = AA_CONTRAST,
    auto_extracted: bool = True,
    warnings: list[str] | None = None,
) -> ExtractionResult:
    ratios = ContrastRatios(
        primary=primary.contrast_ratio,
        secondary=secondary.contrast_ratio,
        accent=accent.contrast_ratio,
    )
    return ExtractionResult(
        palette=palette_from_adjusted(primary, secondary, accent),
        dominant_colors=list(dominant_colors),
        contrast_ratios=ratios,
        wcag_compliant=all(value >= min_contrast for value in ratios.values()),
        auto_extracted=auto_extracted,
        warnings=list(warnings or []),
    )


def css_variables(palette: ColorPalette) -> str:
    lines = [
        ":root {",
        f"  --primary-color: {palette.primary};",
        f"  --secondary-color: {palette.secondary};",
        f"  --accent-color: {palette.accent};",
        f"  --text-on-primary: {palette.text_on_primary};",
        f"  --text-on-secondary: {palette.text_on_secondary};",
        f"  --text-on-accent: {palette.text_on_accent};",
        "",
        "  /* Shades */",
    ]
    for name, color in (
        ("primary", palette.primary),
        ("secondary", palette.secondary),
        ("accent", palette.accent),
    ):
        lines.append(f"  --{name}-light: {brighten(color)};")
        lines.append(f"  --{name}-dark: {darken(color)};")
    lines.append("}")
    return "\n".join(lines)


def format_report(result: ExtractionResult, min_contrast: float = AA_CONTRAST) -> str:
    palette = result.palette
    ratios = result.contrast_ratios

    def _ratio_line(label: str, value: float) -> str:
        mark = "PASS" if value >= min_contrast else "FAIL"
        return f"- {label}: {value:.2f}:1 {mark}"

    lines = [
        "Brand Palette Analysis Report",
        "=============================",
        "",
        f"Primary Color: {palette.primary}",
        f"Secondary Color: {palette.secondary}",
        f"Accent Color: {palette.accent}",
        "",
        "Text Colors:",
        f"- On Primary: {palette.text_on_primary}",
        f"- On Secondary: {palette.text_on_secondary}",
        f"- On Accent: {palette.text_on_accent}",
        "",
        f"Contrast Ratios (target {min_contrast:g}:1):",
        _ratio_line("Primary", ratios.primary),
        _ratio_line("Secondary", ratios.secondary),
        _ratio_line("Accent", ratios.accent),
        "",
        f"WCAG Compliance: {'PASS' if result.wcag_compliant else 'FAIL'}",
        "",
        "Dominant Colors Extracted:",
    ]
    lines.extend(
        f"{idx}. {color}" for idx, color in enumerate(result.dominant_colors, start=1)
    )
    lines.append("")
    lines.append(
        f"Auto-Extracted: {'Yes' if result.auto_extracted else 'No (Manual Override)'}"
    )
    if result.warnings:
        lines.append(f"Warnings: {', '.join(result.warnings)}")
    return "\n".join(lines)
