from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from sklearn.metrics import pairwise_distances_argmin

from .models import RGB, BrandColor, ColorCluster, PixelSample

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 20
NEUTRAL_GRAY: RGB = (128, 128, 128)
FALLBACK_COLORS: tuple[RGB, ...] = (
    (37, 99, 235),
    (16, 185, 129),
    (245, 158, 11),
)


@dataclass(frozen=True)
class QuantizationResult:
    clusters: list[ColorCluster]
    iterations: int
    converged: bool
    fallback: bool = False

    @property
    def dominant_colors(self) -> list[BrandColor]:
        return [cluster.color for cluster in self.clusters]


def quantize_colors(
    population: dict[RGB, int],
    k: int = 10,
    max_iterations: int = MAX_ITERATIONS,
) -> QuantizationResult:
    """Cluster a weighted color population into ``k`` representative colors.

    Centroids are seeded with the ``k`` most frequent colors (padded with
    neutral gray), so the result is fully deterministic. The loop runs at
    most ``max_iterations`` passes and stops early once no rounded centroid
    moves. Clusters are returned heaviest first.
    """
    if k < 1:
        raise ValueError("k must be a positive integer")
    if max_iterations < 1:
        raise ValueError("max_iterations must be a positive integer")

    if not population:
        logger.warning("empty color population, using fallback palette")
        return QuantizationResult(
            clusters=[ColorCluster(rgb=rgb, weight=1) for rgb in FALLBACK_COLORS],
            iterations=0,
            converged=True,
            fallback=True,
        )

    samples = sorted(
        (PixelSample(rgb=rgb, weight=count) for rgb, count in population.items()),
        key=lambda sample: sample.weight,
        reverse=True,
    )
    colors = np.asarray([sample.rgb for sample in samples], dtype=np.float64)
    weights = np.asarray([sample.weight for sample in samples], dtype=np.float64)

    seeds = samples[:k]
    centroids = np.asarray(
        [sample.rgb for sample in seeds] + [NEUTRAL_GRAY] * (k - len(seeds)),
        dtype=np.float64,
    )
    cluster_weights = np.asarray(
        [sample.weight for sample in seeds] + [1] * (k - len(seeds)),
        dtype=np.float64,
    )

    converged = False
    iterations = 0
    for iteration in range(max_iterations):
        iterations = iteration + 1
        labels = pairwise_distances_argmin(colors, centroids)

        totals = np.bincount(labels, weights=weights, minlength=k)
        sums = np.stack(
            [
                np.bincount(labels, weights=weights * colors[:, channel], minlength=k)
                for channel in range(3)
            ],
            axis=1,
        )
        occupied = totals > 0

        updated = centroids.copy()
        # Round half up so centroids stay on the integer RGB grid.
        updated[occupied] = np.floor(sums[occupied] / totals[occupied, None] + 0.5)
        cluster_weights = np.where(occupied, totals, cluster_weights)

        changed = bool(np.any(updated != centroids))
        centroids = updated
        if not changed:
            converged = True
            break

    if converged:
        logger.debug("k-means converged after %d iterations", iterations)
    else:
        logger.warning(
            "k-means stopped at the %d iteration cap without converging",
            max_iterations,
        )

    order = sorted(range(k), key=lambda idx: cluster_weights[idx], reverse=True)
    clusters = [
        ColorCluster(
            rgb=(
                int(centroids[idx][0]),
                int(centroids[idx][1]),
                int(centroids[idx][2]),
            ),
            weight=int(cluster_weights[idx]),
        )
        for idx in order
    ]
    return QuantizationResult(
        clusters=clusters, iterations=iterations, converged=converged
    )
