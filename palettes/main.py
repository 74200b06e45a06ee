from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import numpy as np
from loguru import logger

from palettes.src.palette_engine.colorspace import as_pixel_array, filter_opaque
from palettes.src.palette_engine.pipeline import PaletteExtractionPipeline


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palettes",
        description="Extract frequency, brightness, chroma and hue palettes from pixel data.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    extract = subparsers.add_parser(
        "extract",
        help="Build all four palettes from a JSON list of RGB or RGBA pixels.",
    )
    extract.add_argument(
        "--pixels",
        required=True,
        help="JSON file holding a list of [r, g, b] / [r, g, b, a] entries or {\"pixels\": [...]}.",
    )
    extract.add_argument(
        "--k", type=int, default=6, help="Palette size, clamped to [2, 16]."
    )
    extract.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for clustering initialization. Random when omitted.",
    )
    extract.add_argument(
        "--alpha-min",
        type=int,
        default=1,
        help="RGBA input only: drop pixels whose alpha is below this value.",
    )
    extract.add_argument(
        "--min-pixels",
        type=int,
        default=10,
        help="Skip extraction when fewer usable pixels remain.",
    )
    extract.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Build the palettes concurrently on this many threads.",
    )
    extract.add_argument(
        "--out",
        default=None,
        help="Optional JSON output path. If omitted, prints JSON to stdout.",
    )
    extract.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
        help="Log level for messages written to stderr.",
    )

    return parser


def _load_pixels(path: Path, alpha_min: int) -> np.ndarray:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("pixels")
    if not isinstance(payload, list):
        raise ValueError("pixel file must hold a list or an object with a 'pixels' list")
    if not payload:
        return as_pixel_array([])

    channels = {len(entry) for entry in payload}
    if channels == {4}:
        return filter_opaque(payload, alpha_min=alpha_min)
    if channels == {3}:
        return as_pixel_array(payload)
    raise ValueError("pixels must all be [r, g, b] or all be [r, g, b, a]")


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level=args.log_level)

    if args.command == "extract":
        try:
            pixels = _load_pixels(Path(args.pixels), alpha_min=args.alpha_min)
        except (OSError, TypeError, ValueError) as exc:
            parser.error(f"cannot read pixels from {args.pixels}: {exc}")

        pipeline = PaletteExtractionPipeline(
            min_pixels=args.min_pixels,
            random_state=args.seed,
            max_workers=args.workers,
        )
        result = pipeline.run(pixels, k=args.k)

        payload = json.dumps(result.to_dict(), indent=2)

        if args.out:
            output_path = Path(args.out)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(payload + "\n", encoding="utf-8")
        else:
            print(payload)
        return

    parser.error("unknown command")


if __name__ == "__main__":
    main()
