from __future__ import annotations

import numpy as np
from loguru import logger

from .colorspace import PixelSet, as_pixel_array
from .models import EMPTY_COLOR, ColorCluster, Palette, check_palette_size
from .sampling import MAX_SAMPLES, sample

RandomState = int | np.random.Generator | None

DEFAULT_ITERATIONS = 10


def cluster_populations(
    pixels: PixelSet,
    k: int,
    random_state: RandomState = None,
    max_samples: int = MAX_SAMPLES,
    iterations: int = DEFAULT_ITERATIONS,
) -> list[ColorCluster]:
    """Run a fixed number of Lloyd iterations in RGB space.

    A center that loses all of its points keeps its previous value.
    """
    k = check_palette_size(k)
    px = as_pixel_array(pixels)
    if px.shape[0] == 0:
        return []

    working = sample(px, min(max_samples, px.shape[0]))
    rng = np.random.default_rng(random_state)
    n_centers = min(k, working.shape[0])
    seeds = rng.choice(working.shape[0], size=n_centers, replace=False)
    centers = working[seeds].copy()
    logger.debug(
        "clustering {} of {} pixels into {} centers", working.shape[0], px.shape[0], n_centers
    )

    for _ in range(iterations):
        labels = _assign(working, centers)
        counts = np.bincount(labels, minlength=n_centers)
        totals = np.zeros_like(centers)
        np.add.at(totals, labels, working)

        filled = counts > 0
        centers[filled] = (2 * totals[filled] + counts[filled, None]) // (
            2 * counts[filled, None]
        )

    populations = np.bincount(_assign(working, centers), minlength=n_centers)
    ranked = np.argsort(-populations, kind="stable")[:k]

    return [
        ColorCluster(
            color=(int(centers[idx, 0]), int(centers[idx, 1]), int(centers[idx, 2])),
            population=int(populations[idx]),
        )
        for idx in ranked
    ]


def cluster(
    pixels: PixelSet,
    k: int,
    random_state: RandomState = None,
    max_samples: int = MAX_SAMPLES,
    iterations: int = DEFAULT_ITERATIONS,
) -> Palette:
    k = check_palette_size(k)
    clusters = cluster_populations(
        pixels,
        k,
        random_state=random_state,
        max_samples=max_samples,
        iterations=iterations,
    )
    if not clusters:
        return [EMPTY_COLOR] * k
    return [item.color for item in clusters]


def _assign(points: np.ndarray, centers: np.ndarray) -> np.ndarray:
    # Squared distances stay exact in int64; argmin picks the lowest index on ties.
    diff = points[:, None, :] - centers[None, :, :]
    distances = np.einsum("ijk,ijk->ij", diff, diff)
    return np.argmin(distances, axis=1)
