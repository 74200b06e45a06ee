from __future__ import annotations

import pytest

from palettes.src.palette_engine.diagnostics import diagnose, should_extract


def test_empty_input_is_reported_as_unusable():
    diagnostics = diagnose([])

    assert diagnostics.count == 0
    assert diagnostics.average_luminance == 0.0
    assert diagnostics.near_black_fraction == 1.0
    assert not should_extract(diagnostics)


def test_single_near_black_pixel():
    diagnostics = diagnose([(10, 10, 10)])

    assert diagnostics.count == 1
    assert diagnostics.average_luminance == pytest.approx(10.0)
    assert diagnostics.near_black_fraction == 1.0
    assert not should_extract(diagnostics)


def test_average_and_black_fraction():
    pixels = [(0, 0, 0), (255, 255, 255), (11, 11, 11), (5, 5, 5)]

    diagnostics = diagnose(pixels)

    assert diagnostics.count == 4
    assert diagnostics.average_luminance == pytest.approx((0 + 255 + 11 + 5) / 4)
    assert diagnostics.near_black_fraction == pytest.approx(0.5)


def test_gate_policy_is_explicit():
    diagnostics = diagnose([(0, 0, 0)] * 9 + [(200, 200, 200)] * 3)

    assert should_extract(diagnostics)
    assert not should_extract(diagnostics, min_pixels=20)
    assert not should_extract(diagnostics, max_near_black_fraction=0.5)
    assert diagnostics.to_dict()["near_black_percentage"] == pytest.approx(75.0)
