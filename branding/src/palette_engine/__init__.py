from .colors import InvalidColorError, PaletteEngineError
from .io import DecodeError
from .models import BrandColor, ColorPalette, ExtractionOptions, ExtractionResult
from .pipeline import (
    PaletteExtractionPipeline,
    build_palette,
    build_palette_result,
    extract,
)

__all__ = [
    "BrandColor",
    "ColorPalette",
    "DecodeError",
    "ExtractionOptions",
    "ExtractionResult",
    "InvalidColorError",
    "PaletteEngineError",
    "PaletteExtractionPipeline",
    "build_palette",
    "build_palette_result",
    "extract",
]
