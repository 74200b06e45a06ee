from __future__ import annotations

from .colorspace import PixelSet, as_pixel_array, luminance_array
from .models import Diagnostics

NEAR_BLACK_LUMINANCE = 10.0
MIN_PIXELS = 10


def diagnose(
    pixels: PixelSet, black_threshold: float = NEAR_BLACK_LUMINANCE
) -> Diagnostics:
    # An empty set reports a near-black fraction of 1.0.
    px = as_pixel_array(pixels)
    count = int(px.shape[0])
    if count == 0:
        return Diagnostics(count=0, average_luminance=0.0, near_black_fraction=1.0)

    lum = luminance_array(px)
    return Diagnostics(
        count=count,
        average_luminance=float(lum.mean()),
        near_black_fraction=float((lum <= black_threshold).sum() / count),
    )


def should_extract(
    diagnostics: Diagnostics,
    min_pixels: int = MIN_PIXELS,
    max_near_black_fraction: float = 1.0,
) -> bool:
    if diagnostics.count < min_pixels:
        return False
    return diagnostics.near_black_fraction <= max_near_black_fraction
