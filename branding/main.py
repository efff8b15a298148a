from __future__ import annotations

import argparse
import json
import logging
import sys

from branding.src.palette_engine.colors import PaletteEngineError
from branding.src.palette_engine.io import write_result_json, write_text
from branding.src.palette_engine.models import ExtractionOptions, ExtractionResult
from branding.src.palette_engine.pipeline import (
    PaletteExtractionPipeline,
    build_palette_result,
)
from branding.src.palette_engine.report import css_variables, format_report


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--wcag-level",
        choices=("AA", "AAA"),
        default=None,
        help="Contrast level the palette must meet (default: AA).",
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Optional JSON output path. If omitted, prints JSON to stdout.",
    )
    parser.add_argument(
        "--css-out",
        default=None,
        help="Optional path to write the palette as CSS custom properties.",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print a human-readable analysis report to stderr.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brand-palette",
        description="Derive an accessible brand palette from a logo.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    extract = subparsers.add_parser(
        "extract",
        help="Extract primary, secondary and accent colors from a logo image.",
    )
    extract.add_argument(
        "--image", required=True, help="Path or URL to the logo image."
    )
    extract.add_argument(
        "--max-dimension",
        type=int,
        default=None,
        help="Working resolution bounding box in pixels (default: 200).",
    )
    extract.add_argument(
        "--clusters",
        type=int,
        default=None,
        help="Number of K-means clusters (default: 10).",
    )
    extract.add_argument("--min-brightness", type=float, default=None)
    extract.add_argument("--max-brightness", type=float, default=None)
    extract.add_argument("--min-saturation", type=float, default=None)
    _add_output_arguments(extract)

    palette = subparsers.add_parser(
        "palette",
        help="Build an accessible palette from manually chosen colors.",
    )
    palette.add_argument("--primary", required=True, help="Primary brand color.")
    palette.add_argument("--secondary", default=None, help="Optional secondary color.")
    palette.add_argument("--accent", default=None, help="Optional accent color.")
    _add_output_arguments(palette)

    return parser


def _emit(result: ExtractionResult, args: argparse.Namespace, min_contrast: float) -> None:
    if args.out:
        write_result_json(result, args.out)
    else:
        print(json.dumps(result.to_dict(), indent=2))

    if args.css_out:
        write_text(css_variables(result.palette), args.css_out)

    if args.report:
        print(format_report(result, min_contrast=min_contrast), file=sys.stderr)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "extract":
            options = ExtractionOptions().with_overrides(
                max_dimension=args.max_dimension,
                cluster_count=args.clusters,
                min_brightness=args.min_brightness,
                max_brightness=args.max_brightness,
                min_saturation=args.min_saturation,
                wcag_level=args.wcag_level,
            )
            result = PaletteExtractionPipeline(options).run_path(args.image)
            _emit(result, args, options.min_contrast)
            return

        if args.command == "palette":
            options = ExtractionOptions().with_overrides(wcag_level=args.wcag_level)
            result = build_palette_result(
                args.primary,
                secondary=args.secondary,
                accent=args.accent,
                wcag_level=options.wcag_level,
            )
            _emit(result, args, options.min_contrast)
            return
    except (PaletteEngineError, ValueError, OSError) as exc:
        parser.exit(2, f"{parser.prog}: error: {exc}\n")

    parser.error("unknown command")


if __name__ == "__main__":
    main()
