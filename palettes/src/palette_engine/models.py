from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .colorspace import to_hex

RGB = tuple[int, int, int]
Palette = list[RGB]

EMPTY_COLOR: RGB = (0, 0, 0)


class PaletteSizeError(ValueError):
    pass


def check_palette_size(k: int) -> int:
    if int(k) < 1:
        raise PaletteSizeError(f"palette size must be >= 1, got {k}")
    return int(k)


def _color_record(color: RGB) -> dict[str, Any]:
    return {"rgb": list(color), "hex": to_hex(color)}


@dataclass(frozen=True)
class ColorCluster:
    color: RGB
    population: int

    def to_dict(self) -> dict[str, Any]:
        return {**_color_record(self.color), "population": int(self.population)}


@dataclass(frozen=True)
class Diagnostics:
    count: int
    average_luminance: float
    near_black_fraction: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": int(self.count),
            "average_luminance": float(self.average_luminance),
            "near_black_fraction": float(self.near_black_fraction),
            "near_black_percentage": float(self.near_black_fraction * 100.0),
        }


@dataclass(frozen=True)
class ExtractionResult:
    k: int
    diagnostics: Diagnostics
    frequency: Palette = field(default_factory=list)
    brightness: Palette = field(default_factory=list)
    chroma: Palette = field(default_factory=list)
    hue: Palette = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    skipped: bool = False

    def palettes(self) -> dict[str, Palette]:
        return {
            "freq": list(self.frequency),
            "bright": list(self.brightness),
            "chroma": list(self.chroma),
            "hue": list(self.hue),
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "k": int(self.k),
            "skipped": bool(self.skipped),
            "diagnostics": self.diagnostics.to_dict(),
            "palettes": {
                key: [_color_record(color) for color in colors]
                for key, colors in self.palettes().items()
            },
            "warnings": list(self.warnings),
        }
