"""
Scrollwork command line renderer.

Usage:
  scrollwork                                      # default outline, SVG to stdout
  scrollwork --outline shape.svg -o out.svg       # confine ornament to shape.svg
  scrollwork --style Victorian --intricacy 90 --seed 7 --thickness 1.5 --invert -o out.svg
  scrollwork --list-styles
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from scrollwork.config import settings
from scrollwork.engine.config import GenerationConfig
from scrollwork.engine.generator import ScrollworkGenerator
from scrollwork.engine.styles import STYLES
from scrollwork.errors import ScrollworkError
from scrollwork.svg.parser import load_outline

logger = logging.getLogger("scrollwork.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scrollwork", description="Scrollwork ornament generator")
    parser.add_argument("--outline", help="SVG file whose first <path> is the outline")
    parser.add_argument("--style", default=settings.default_style, help="Style preset name")
    parser.add_argument("--intricacy", type=int, default=settings.default_intricacy, help="Density, 10-120")
    parser.add_argument("--seed", type=int, default=settings.default_seed, help="32-bit integer seed")
    parser.add_argument("--thickness", type=float, default=settings.default_thickness, help="Stroke multiplier, 0.5-2.0")
    parser.add_argument("--invert", action="store_true", help="Black fill, white outline stroke")
    parser.add_argument("-o", "--output", help="Output file or folder (default: stdout)")
    parser.add_argument("--list-styles", action="store_true", help="Print the style presets and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.list_styles:
        for name, profile in STYLES.items():
            lo, hi = profile.spiral_turns_range
            print(f"{name:<12} stroke {profile.stroke_width}  turns {lo}-{hi}  leaves x{profile.leaf_frequency}")
        return 0

    try:
        config = GenerationConfig(
            style_name=args.style,
            intricacy=args.intricacy,
            seed=args.seed,
            thickness=args.thickness,
            invert=args.invert,
        )
        generator = ScrollworkGenerator()
        if args.outline:
            generator.set_outline(load_outline(Path(args.outline).read_text(encoding="utf-8")))
        filename, svg = generator.export(config, height=settings.export_height)
    except (ScrollworkError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if not args.output:
        sys.stdout.write(svg + "\n")
        return 0

    out = Path(args.output)
    if out.is_dir():
        out = out / filename
    out.write_text(svg, encoding="utf-8")
    logger.info("Wrote %s", out)
    print(f"Saved: {out}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
