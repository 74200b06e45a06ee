from __future__ import annotations

from collections.abc import Sequence

import numpy as np

# BT.709 luma weights, scaled by 10000 so greys map exactly to their channel value.
_LUMA_WEIGHTS = (2126, 7152, 722)
_LUMA_SCALE = 10000.0

PixelSet = Sequence[Sequence[int]] | np.ndarray


def as_pixel_array(pixels: PixelSet) -> np.ndarray:
    arr = np.asarray(pixels, dtype=np.int64)
    if arr.size == 0:
        return np.zeros((0, 3), dtype=np.int64)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"pixels must have shape (N, 3), got {arr.shape}")
    return np.clip(arr, 0, 255)


def filter_opaque(
    rgba: Sequence[int] | np.ndarray, alpha_min: int = 1
) -> np.ndarray:
    # Flat RGBA bytes as read back from a canvas, or an (N, 4) array.
    arr = np.asarray(rgba, dtype=np.int64)
    if arr.size == 0:
        return np.zeros((0, 3), dtype=np.int64)
    if arr.ndim == 1:
        if arr.shape[0] % 4:
            raise ValueError("flat rgba data length must be a multiple of 4")
        arr = arr.reshape(-1, 4)
    if arr.ndim != 2 or arr.shape[1] != 4:
        raise ValueError(f"rgba pixels must have shape (N, 4), got {arr.shape}")

    keep = arr[:, 3] >= alpha_min
    return np.clip(arr[keep, :3], 0, 255)


def luminance_array(pixels: PixelSet) -> np.ndarray:
    px = as_pixel_array(pixels)
    weighted = (
        _LUMA_WEIGHTS[0] * px[:, 0]
        + _LUMA_WEIGHTS[1] * px[:, 1]
        + _LUMA_WEIGHTS[2] * px[:, 2]
    )
    return weighted / _LUMA_SCALE


def hsl_array(pixels: PixelSet) -> np.ndarray:
    # Columns: hue in degrees, saturation, lightness.
    px = as_pixel_array(pixels).astype(np.float64) / 255.0
    r, g, b = px[:, 0], px[:, 1], px[:, 2]

    c_max = px.max(axis=1)
    c_min = px.min(axis=1)
    delta = c_max - c_min
    lightness = (c_max + c_min) / 2.0
    chromatic = delta > 0

    saturation = np.zeros_like(lightness)
    denom = np.where(lightness > 0.5, 2.0 - c_max - c_min, c_max + c_min)
    np.divide(delta, denom, out=saturation, where=chromatic)

    safe_delta = np.where(chromatic, delta, 1.0)
    hue = np.select(
        [c_max == r, c_max == g],
        [
            (g - b) / safe_delta + np.where(g < b, 6.0, 0.0),
            (b - r) / safe_delta + 2.0,
        ],
        default=(r - g) / safe_delta + 4.0,
    )
    hue = np.where(chromatic, hue / 6.0 * 360.0, 0.0)

    return np.stack([hue, saturation, lightness], axis=1)


def rgb_to_hsl(color: tuple[int, int, int]) -> tuple[float, float, float]:
    hue, saturation, lightness = hsl_array(np.asarray([color]))[0]
    return float(hue), float(saturation), float(lightness)


def luminance(color: tuple[int, int, int]) -> float:
    return float(luminance_array(np.asarray([color]))[0])


def to_hex(color: Sequence[float]) -> str:
    r, g, b = (max(0, min(255, int(channel))) for channel in color[:3])
    return f"#{r:02X}{g:02X}{b:02X}"
