from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

import numpy as np

from .colorspace import PixelSet, as_pixel_array, hsl_array, luminance_array
from .models import EMPTY_COLOR, RGB, Palette, check_palette_size

T = TypeVar("T", Sequence, np.ndarray)


def partition(ordered_items: T, k: int) -> list[T]:
    k = check_palette_size(k)
    n = len(ordered_items)
    base, extra = divmod(n, k)

    # With fewer items than groups the trailing groups come back empty.
    groups: list[T] = []
    start = 0
    for idx in range(k):
        size = max(1, base + (1 if idx < extra else 0))
        groups.append(ordered_items[start : start + size])
        start += size
    return groups


def average(group: PixelSet) -> RGB:
    px = as_pixel_array(group)
    count = px.shape[0]
    if count == 0:
        return EMPTY_COLOR

    # Round half up.
    totals = px.sum(axis=0)
    rounded = (2 * totals + count) // (2 * count)
    return int(rounded[0]), int(rounded[1]), int(rounded[2])


def brightness_palette(pixels: PixelSet, k: int) -> Palette:
    k = check_palette_size(k)
    px = as_pixel_array(pixels)
    if px.shape[0] == 0:
        return [EMPTY_COLOR] * k

    order = np.argsort(luminance_array(px), kind="stable")
    return [average(group) for group in partition(px[order], k)]


def chroma_palette(pixels: PixelSet, k: int) -> Palette:
    k = check_palette_size(k)
    px = as_pixel_array(pixels)
    if px.shape[0] == 0:
        return [EMPTY_COLOR] * k

    saturation = hsl_array(px)[:, 1]
    order = np.argsort(-saturation, kind="stable")
    return [average(group) for group in partition(px[order], k)]
