from __future__ import annotations

import math

import numpy as np

from .buckets import average
from .colorspace import PixelSet, as_pixel_array, hsl_array
from .models import Palette, check_palette_size

HUE_BINS = 72


def hue_bin(hue_degrees: float, bins: int = HUE_BINS) -> int:
    if bins < 1:
        raise ValueError(f"bins must be >= 1, got {bins}")
    wrapped = ((hue_degrees % 360.0) + 360.0) % 360.0
    return min(bins - 1, int(math.floor(wrapped / (360.0 / bins))))


def hue_palette(pixels: PixelSet, k: int, bins: int = HUE_BINS) -> Palette:
    """Average the ``k`` most populated hue bins, in ascending hue order.

    Bins with equal populations are ranked by lowest index first.
    """
    k = check_palette_size(k)
    if bins < 1:
        raise ValueError(f"bins must be >= 1, got {bins}")

    px = as_pixel_array(pixels)
    hues = hsl_array(px)[:, 0]
    wrapped = np.mod(np.mod(hues, 360.0) + 360.0, 360.0)
    indices = np.minimum(bins - 1, np.floor(wrapped / (360.0 / bins)).astype(np.int64))

    counts = np.bincount(indices, minlength=bins)
    selected = np.sort(np.argsort(-counts, kind="stable")[:k])

    return [average(px[indices == idx]) for idx in selected]
