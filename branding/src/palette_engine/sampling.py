from __future__ import annotations

import logging

import numpy as np

from .models import RGB

logger = logging.getLogger(__name__)


def brightness(rgb: RGB) -> float:
    r, g, b = rgb
    return (r * 299 + g * 587 + b * 114) / 255000


def saturation(rgb: RGB) -> float:
    high = max(rgb)
    if high == 0:
        return 0.0
    return (high - min(rgb)) / high


def sample_pixels(
    image_rgb: np.ndarray,
    stride: int = 4,
    min_brightness: float = 0.2,
    max_brightness: float = 0.95,
    min_saturation: float = 0.1,
) -> dict[RGB, int]:
    """Count the colors of every ``stride``-th pixel that pass the filters.

    Pixels are visited in row-major order. The returned mapping preserves the
    order in which each color was first seen.
    """
    if image_rgb.ndim != 3 or image_rgb.shape[2] != 3:
        raise ValueError("image_rgb must have shape (H, W, 3)")
    if stride < 1:
        raise ValueError("stride must be a positive integer")

    pixels = image_rgb.reshape(-1, 3)[::stride].astype(np.int64)
    if pixels.shape[0] == 0:
        return {}

    luma = (pixels[:, 0] * 299 + pixels[:, 1] * 587 + pixels[:, 2] * 114) / 255000
    high = pixels.max(axis=1)
    low = pixels.min(axis=1)
    sat = np.divide(
        (high - low).astype(np.float64),
        high.astype(np.float64),
        out=np.zeros(high.shape, dtype=np.float64),
        where=high > 0,
    )

    keep = (luma >= min_brightness) & (luma <= max_brightness) & (sat >= min_saturation)
    kept = pixels[keep]
    if kept.shape[0] == 0:
        logger.debug("no pixels passed the brightness/saturation filters")
        return {}

    unique, first_index, counts = np.unique(
        kept, axis=0, return_index=True, return_counts=True
    )
    order = np.argsort(first_index, kind="stable")

    population: dict[RGB, int] = {}
    for idx in order:
        rgb = (int(unique[idx][0]), int(unique[idx][1]), int(unique[idx][2]))
        population[rgb] = int(counts[idx])

    logger.debug(
        "sampled %d of %d pixels into %d distinct colors",
        kept.shape[0],
        pixels.shape[0],
        len(population),
    )
    return population
