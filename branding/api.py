from __future__ import annotations

from typing import Literal

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from starlette.concurrency import run_in_threadpool

from branding.src.palette_engine.colors import InvalidColorError
from branding.src.palette_engine.models import ExtractionOptions, ExtractionResult
from branding.src.palette_engine.pipeline import (
    PaletteExtractionPipeline,
    build_palette_result,
)
from branding.src.palette_engine.report import css_variables


class ExtractRequest(BaseModel):
    image_url: str = Field(..., description="HTTP(S) URL of the logo image")
    max_dimension: int | None = Field(
        default=None, ge=1, le=2000, description="Working resolution bounding box"
    )
    cluster_count: int | None = Field(
        default=None, ge=1, le=32, description="Number of K-means clusters"
    )
    min_brightness: float | None = Field(default=None, ge=0.0, le=1.0)
    max_brightness: float | None = Field(default=None, ge=0.0, le=1.0)
    min_saturation: float | None = Field(default=None, ge=0.0, le=1.0)
    wcag_level: Literal["AA", "AAA"] | None = Field(
        default=None, description="Contrast level the palette must meet"
    )


class PaletteRequest(BaseModel):
    primary: str = Field(..., description="Primary brand color (hex, rgb() or name)")
    secondary: str | None = Field(default=None, description="Optional secondary color")
    accent: str | None = Field(default=None, description="Optional accent color")
    wcag_level: Literal["AA", "AAA"] = Field(default="AA")


class PaletteItem(BaseModel):
    primary: str
    secondary: str
    accent: str
    text_on_primary: str
    text_on_secondary: str
    text_on_accent: str


class ContrastItem(BaseModel):
    primary: float
    secondary: float
    accent: float


class PaletteResponse(BaseModel):
    palette: PaletteItem
    dominant_colors: list[str]
    contrast_ratios: ContrastItem
    wcag_compliant: bool
    auto_extracted: bool
    warnings: list[str]
    css: str


app = FastAPI(
    title="Brand Palette API",
    version="1.0.0",
    description="Derive accessible brand palettes from logos or manual colors.",
)


def _build_pipeline(options: ExtractionOptions) -> PaletteExtractionPipeline:
    return PaletteExtractionPipeline(options)


def _to_response(result: ExtractionResult) -> PaletteResponse:
    payload = result.to_dict()
    return PaletteResponse(
        palette=PaletteItem(**payload["palette"]),
        dominant_colors=payload["dominant_colors"],
        contrast_ratios=ContrastItem(**payload["contrast_ratios"]),
        wcag_compliant=payload["wcag_compliant"],
        auto_extracted=payload["auto_extracted"],
        warnings=payload["warnings"],
        css=css_variables(result.palette),
    )


@app.post("/extract", response_model=PaletteResponse)
async def extract_palette(payload: ExtractRequest) -> PaletteResponse:
    if not payload.image_url.startswith(("http://", "https://")):
        raise HTTPException(
            status_code=400, detail="invalid_image_url: expected an HTTP(S) URL"
        )
    try:
        options = ExtractionOptions().with_overrides(
            max_dimension=payload.max_dimension,
            cluster_count=payload.cluster_count,
            min_brightness=payload.min_brightness,
            max_brightness=payload.max_brightness,
            min_saturation=payload.min_saturation,
            wcag_level=payload.wcag_level,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"invalid_options: {exc}") from exc

    pipeline = _build_pipeline(options)
    try:
        result = await run_in_threadpool(pipeline.run_path, payload.image_url)
    except Exception as exc:
        raise HTTPException(
            status_code=400, detail=f"failed_to_extract_colors: {exc}"
        ) from exc

    return _to_response(result)


@app.post("/palette", response_model=PaletteResponse)
async def manual_palette(payload: PaletteRequest) -> PaletteResponse:
    try:
        result = build_palette_result(
            payload.primary,
            secondary=payload.secondary,
            accent=payload.accent,
            wcag_level=payload.wcag_level,
        )
    except InvalidColorError as exc:
        raise HTTPException(status_code=400, detail=f"invalid_color: {exc}") from exc

    return _to_response(result)
