from __future__ import annotations

import numpy as np
import pytest

from palettes.src.palette_engine.buckets import (
    average,
    brightness_palette,
    chroma_palette,
    partition,
)
from palettes.src.palette_engine.colorspace import luminance
from palettes.src.palette_engine.models import PaletteSizeError


@pytest.mark.parametrize("n, k", [(10, 3), (16, 16), (100, 7), (5, 2), (17, 16)])
def test_partition_sizes_are_balanced(n, k):
    groups = partition(list(range(n)), k)

    sizes = [len(group) for group in groups]
    assert len(groups) == k
    assert sum(sizes) == n
    assert max(sizes) - min(sizes) <= 1
    assert sizes == sorted(sizes, reverse=True)
    assert [item for group in groups for item in group] == list(range(n))


def test_partition_leaves_trailing_groups_empty_when_short():
    groups = partition([1, 2], 4)

    assert groups == [[1], [2], [], []]


def test_partition_rejects_zero_groups():
    with pytest.raises(PaletteSizeError):
        partition([1, 2, 3], 0)


def test_average_rounds_half_up():
    assert average([(0, 0, 0), (1, 1, 1)]) == (1, 1, 1)
    assert average([(0, 10, 3), (0, 11, 4), (0, 11, 4)]) == (0, 11, 4)
    assert average([]) == (0, 0, 0)


def test_brightness_palette_is_dark_to_light():
    rng = np.random.default_rng(5)
    pixels = rng.integers(0, 256, size=(500, 3))

    palette = brightness_palette(pixels, 6)

    assert len(palette) == 6
    lum = [luminance(color) for color in palette]
    assert lum == sorted(lum)


def test_brightness_palette_groups_contiguous_luminance_ranges():
    pixels = [(200, 200, 200)] * 3 + [(10, 10, 10)] * 3

    assert brightness_palette(pixels, 2) == [(10, 10, 10), (200, 200, 200)]


def test_chroma_palette_is_most_saturated_first():
    pixels = [(128, 128, 128)] * 4 + [(255, 0, 0)] * 4 + [(180, 120, 120)] * 4

    palette = chroma_palette(pixels, 3)

    assert palette == [(255, 0, 0), (180, 120, 120), (128, 128, 128)]


@pytest.mark.parametrize("builder", [brightness_palette, chroma_palette])
def test_bucket_palettes_degrade_on_empty_input(builder):
    assert builder([], 6) == [(0, 0, 0)] * 6


def test_bucket_palettes_pad_with_black_when_fewer_pixels_than_k():
    palette = brightness_palette([(40, 50, 60), (250, 250, 250)], 4)

    assert palette == [(40, 50, 60), (250, 250, 250), (0, 0, 0), (0, 0, 0)]
