from __future__ import annotations

import io
import json
import logging
from pathlib import Path

import numpy as np
import requests
from PIL import Image, UnidentifiedImageError

from .colors import PaletteEngineError
from .models import ExtractionResult

logger = logging.getLogger(__name__)


class DecodeError(PaletteEngineError, ValueError):
    pass


def read_image_bytes(image_path: str | Path) -> bytes:
    path_str = str(image_path)
    if path_str.startswith(("http://", "https://")):
        response = requests.get(path_str, timeout=10)
        response.raise_for_status()
        return response.content

    return Path(image_path).read_bytes()


def decode_image(data: bytes, max_dimension: int = 200) -> np.ndarray:
    """Decode raw image bytes into an ``(H, W, 3)`` uint8 RGB array.

    The image is scaled (up or down) so that it fits inside a
    ``max_dimension`` square while keeping its aspect ratio, and any alpha
    channel is dropped.
    """
    if not data:
        raise DecodeError("image data is empty")
    if max_dimension < 1:
        raise ValueError("max_dimension must be a positive integer")

    try:
        with Image.open(io.BytesIO(data)) as image:
            image.load()
            rgb = image.convert("RGB")
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ) as exc:
        raise DecodeError(f"unable to decode image: {exc}") from exc

    width, height = rgb.size
    scale = min(max_dimension / width, max_dimension / height)
    target = (max(1, round(width * scale)), max(1, round(height * scale)))
    if target != rgb.size:
        rgb = rgb.resize(target, resample=Image.Resampling.LANCZOS)

    logger.debug(
        "decoded %dx%d image, working size %dx%d", width, height, *target
    )
    return np.asarray(rgb, dtype=np.uint8)


def write_result_json(result: ExtractionResult, output_path: str | Path) -> None:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(result.to_dict(), indent=2)
    path.write_text(payload + "\n", encoding="utf-8")


def write_text(content: str, output_path: str | Path) -> None:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content + "\n", encoding="utf-8")
