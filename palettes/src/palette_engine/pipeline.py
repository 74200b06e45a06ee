from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

import numpy as np
from loguru import logger

from .buckets import brightness_palette, chroma_palette
from .colorspace import PixelSet, as_pixel_array, filter_opaque
from .diagnostics import MIN_PIXELS, diagnose, should_extract
from .hue import HUE_BINS, hue_palette
from .kmeans import DEFAULT_ITERATIONS, RandomState, cluster
from .models import ExtractionResult, Palette
from .sampling import MAX_SAMPLES

MIN_PALETTE_SIZE = 2
MAX_PALETTE_SIZE = 16


def clamp_palette_size(
    requested: int,
    pixel_count: int,
    lower: int = MIN_PALETTE_SIZE,
    upper: int = MAX_PALETTE_SIZE,
) -> int:
    return max(lower, min(upper, int(requested), pixel_count or lower))


class PaletteExtractionPipeline:
    def __init__(
        self,
        min_pixels: int = MIN_PIXELS,
        max_near_black_fraction: float = 1.0,
        max_samples: int = MAX_SAMPLES,
        iterations: int = DEFAULT_ITERATIONS,
        hue_bins: int = HUE_BINS,
        random_state: RandomState = None,
        max_workers: int | None = None,
    ) -> None:
        self.min_pixels = min_pixels
        self.max_near_black_fraction = max_near_black_fraction
        self.max_samples = max_samples
        self.iterations = iterations
        self.hue_bins = hue_bins
        self.random_state = random_state
        self.max_workers = max_workers

    def run(self, pixels: PixelSet, k: int = 6) -> ExtractionResult:
        px = as_pixel_array(pixels)
        diagnostics = diagnose(px)
        logger.debug(
            "diagnostics: count={} avg_luminance={:.1f} near_black={:.3f}",
            diagnostics.count,
            diagnostics.average_luminance,
            diagnostics.near_black_fraction,
        )

        if not should_extract(
            diagnostics,
            min_pixels=self.min_pixels,
            max_near_black_fraction=self.max_near_black_fraction,
        ):
            warning = (
                "too_few_pixels"
                if diagnostics.count < self.min_pixels
                else "mostly_black"
            )
            logger.warning(
                "skipping palette extraction ({}): {} usable pixels",
                warning,
                diagnostics.count,
            )
            return ExtractionResult(
                k=0, diagnostics=diagnostics, warnings=[warning], skipped=True
            )

        palette_size = clamp_palette_size(k, diagnostics.count)
        if palette_size != k:
            logger.debug("palette size clamped from {} to {}", k, palette_size)

        palettes = self._build_palettes(px, palette_size)
        return ExtractionResult(
            k=palette_size,
            diagnostics=diagnostics,
            frequency=palettes["freq"],
            brightness=palettes["bright"],
            chroma=palettes["chroma"],
            hue=palettes["hue"],
            warnings=[],
        )

    def run_rgba(
        self, rgba: Sequence[int] | np.ndarray, k: int = 6, alpha_min: int = 1
    ) -> ExtractionResult:
        return self.run(filter_opaque(rgba, alpha_min=alpha_min), k=k)

    def _build_palettes(self, px: np.ndarray, k: int) -> dict[str, Palette]:
        builders = {
            "freq": lambda: cluster(
                px,
                k,
                random_state=self.random_state,
                max_samples=self.max_samples,
                iterations=self.iterations,
            ),
            "bright": lambda: brightness_palette(px, k),
            "chroma": lambda: chroma_palette(px, k),
            "hue": lambda: hue_palette(px, k, bins=self.hue_bins),
        }

        if not self.max_workers:
            return {key: build() for key, build in builders.items()}

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {key: executor.submit(build) for key, build in builders.items()}
            return {key: future.result() for key, future in futures.items()}


def extract_palettes(
    pixels: PixelSet, k: int = 6, random_state: RandomState = None
) -> ExtractionResult:
    pipeline = PaletteExtractionPipeline(random_state=random_state)
    return pipeline.run(pixels, k=k)
