from .buckets import average, brightness_palette, chroma_palette, partition
from .colorspace import filter_opaque, luminance, rgb_to_hsl, to_hex
from .diagnostics import diagnose, should_extract
from .hue import hue_palette
from .kmeans import cluster, cluster_populations
from .models import (
    ColorCluster,
    Diagnostics,
    ExtractionResult,
    PaletteSizeError,
)
from .pipeline import PaletteExtractionPipeline, clamp_palette_size, extract_palettes
from .sampling import sample

__all__ = [
    "ColorCluster",
    "Diagnostics",
    "ExtractionResult",
    "PaletteExtractionPipeline",
    "PaletteSizeError",
    "average",
    "brightness_palette",
    "chroma_palette",
    "clamp_palette_size",
    "cluster",
    "cluster_populations",
    "diagnose",
    "extract_palettes",
    "filter_opaque",
    "hue_palette",
    "luminance",
    "partition",
    "rgb_to_hsl",
    "sample",
    "should_extract",
    "to_hex",
]
