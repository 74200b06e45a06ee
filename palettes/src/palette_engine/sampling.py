from __future__ import annotations

import numpy as np

from .colorspace import PixelSet

MAX_SAMPLES = 40000


def sample(pixels: PixelSet, max_count: int) -> PixelSet:
    if max_count < 1:
        raise ValueError(f"max_count must be >= 1, got {max_count}")

    n = len(pixels)
    if n <= max_count:
        return pixels

    # Source index floor(i * n / max_count), kept in raster order.
    indices = np.arange(max_count, dtype=np.int64) * n // max_count
    return np.asarray(pixels)[indices]
