from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Any

RGB = tuple[int, int, int]

WCAG_THRESHOLDS: dict[str, float] = {"AA": 4.5, "AAA": 7.0}

_HEX_PATTERN = re.compile(r"^#?[0-9A-Fa-f]{6}$")


class PaletteEngineError(Exception):
    pass


class InvalidColorError(PaletteEngineError, ValueError):
    pass


@dataclass(frozen=True)
class BrandColor:
    rgb: RGB

    def __post_init__(self) -> None:
        if len(self.rgb) != 3 or any(not 0 <= channel <= 255 for channel in self.rgb):
            raise InvalidColorError(f"invalid RGB triple {self.rgb!r}")

    @classmethod
    def from_hex(cls, value: str) -> "BrandColor":
        if not isinstance(value, str) or not _HEX_PATTERN.match(value):
            raise InvalidColorError(f"invalid hex color {value!r}")
        normalized = value[1:] if value.startswith("#") else value
        return cls(
            (
                int(normalized[0:2], 16),
                int(normalized[2:4], 16),
                int(normalized[4:6], 16),
            )
        )

    @property
    def hex(self) -> str:
        return f"#{self.rgb[0]:02x}{self.rgb[1]:02x}{self.rgb[2]:02x}"

    def __str__(self) -> str:
        return self.hex


WHITE = BrandColor((255, 255, 255))
BLACK = BrandColor((0, 0, 0))


@dataclass(frozen=True)
class PixelSample:
    rgb: RGB
    weight: int


@dataclass(frozen=True)
class ColorCluster:
    rgb: RGB
    weight: int

    @property
    def color(self) -> BrandColor:
        return BrandColor(self.rgb)


@dataclass(frozen=True)
class AdjustedColor:
    background: BrandColor
    text_color: BrandColor
    contrast_ratio: float
    adjusted: bool = False


@dataclass(frozen=True)
class ColorPalette:
    primary: BrandColor
    secondary: BrandColor
    accent: BrandColor
    text_on_primary: BrandColor
    text_on_secondary: BrandColor
    text_on_accent: BrandColor

    def to_dict(self) -> dict[str, Any]:
        return {
            "primary": self.primary.hex,
            "secondary": self.secondary.hex,
            "accent": self.accent.hex,
            "text_on_primary": self.text_on_primary.hex,
            "text_on_secondary": self.text_on_secondary.hex,
            "text_on_accent": self.text_on_accent.hex,
        }


@dataclass(frozen=True)
class ContrastRatios:
    primary: float
    secondary: float
    accent: float

    def values(self) -> tuple[float, float, float]:
        return self.primary, self.secondary, self.accent

    def to_dict(self) -> dict[str, float]:
        return {
            "primary": float(self.primary),
            "secondary": float(self.secondary),
            "accent": float(self.accent),
        }


@dataclass(frozen=True)
class ExtractionResult:
    palette: ColorPalette
    dominant_colors: list[BrandColor]
    contrast_ratios: ContrastRatios
    wcag_compliant: bool
    auto_extracted: bool = True
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "palette": self.palette.to_dict(),
            "dominant_colors": [color.hex for color in self.dominant_colors],
            "contrast_ratios": self.contrast_ratios.to_dict(),
            "wcag_compliant": bool(self.wcag_compliant),
            "auto_extracted": bool(self.auto_extracted),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class ExtractionOptions:
    """Tunables for a single extraction call.

    Defaults reproduce the production behaviour: a 200px working box, every
    4th pixel sampled, brightness kept within [0.2, 0.95], near-greys below
    10% saturation dropped, ten clusters and at most twenty K-means passes.
    """

    max_dimension: int = 200
    cluster_count: int = 10
    min_brightness: float = 0.2
    max_brightness: float = 0.95
    min_saturation: float = 0.1
    sample_stride: int = 4
    max_iterations: int = 20
    wcag_level: str = "AA"

    def __post_init__(self) -> None:
        for name in ("max_dimension", "cluster_count", "sample_stride", "max_iterations"):
            if int(getattr(self, name)) < 1:
                raise ValueError(f"{name} must be a positive integer")
        for name in ("min_brightness", "max_brightness", "min_saturation"):
            value = float(getattr(self, name))
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if self.min_brightness > self.max_brightness:
            raise ValueError("min_brightness must not exceed max_brightness")
        if self.wcag_level not in WCAG_THRESHOLDS:
            raise ValueError(
                f"unsupported wcag_level '{self.wcag_level}'. Use AA or AAA"
            )

    @property
    def min_contrast(self) -> float:
        return WCAG_THRESHOLDS[self.wcag_level]

    def with_overrides(self, **overrides: Any) -> "ExtractionOptions":
        return replace(
            self, **{key: value for key, value in overrides.items() if value is not None}
        )
