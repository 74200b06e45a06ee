from __future__ import annotations

import numpy as np
import pytest

from palettes.src.palette_engine.sampling import sample


def test_sample_returns_input_when_small_enough():
    pixels = np.arange(30).reshape(10, 3)

    assert sample(pixels, 10) is pixels
    assert sample(pixels, 50) is pixels


def test_sample_uses_fixed_stride_indices():
    pixels = np.arange(10)

    picked = sample(pixels, 4)

    # floor(i * 10 / 4) for i in 0..3
    assert picked.tolist() == [0, 2, 5, 7]


def test_sample_is_order_preserving_and_exact_length():
    pixels = np.arange(40001 * 3).reshape(-1, 3)

    picked = sample(pixels, 40000)

    assert picked.shape == (40000, 3)
    first_channel = picked[:, 0]
    assert np.all(np.diff(first_channel) > 0)


def test_sample_rejects_non_positive_count():
    with pytest.raises(ValueError):
        sample(np.zeros((3, 3)), 0)


def test_sample_accepts_plain_sequences():
    pixels = [(i, i, i) for i in range(10)]

    picked = sample(pixels, 4)

    assert np.asarray(picked).tolist() == [[0, 0, 0], [2, 2, 2], [5, 5, 5], [7, 7, 7]]
    assert sample(pixels, 10) is pixels
