#!/usr/bin/env python3
"""
make_gradients.py
Write SVG gradients for palettes that approximate analog video signals.

Usage:
  python make_gradients.py -s SOURCE [--outdir DIR] [--greys-only] [--three-tone] [--preview] [--debug]
  python make_gradients.py --list

Sources:
  approx_nes, nes                : 4 levels bracketed by black/white, 12 hues
  composite_NN_Mx                : NN levels, hue count from the pixel clock multiple
  composite_08_ega[_skip]        : 8 levels, 6 hues from 15 degrees
  ega_extended_32, cga0/cga1_extended_16 : explicit EGA/CGA hue lists
  Every swept source also has a *_rotated twin offset by half a hue step.

Output:
  One SVG per (hue group, tone window):
    <source>[_<hue>]_<gradient>.svg, e.g. composite_16_1x_hue_01_deep_shadow.svg
  With --greys-only the hue part is dropped: composite_16_1x_deep_shadow.svg
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from composite_gradients.assemble import assemble_palette
from composite_gradients.core_types import GradientError, UnknownSource
from composite_gradients.preview import save_palette_preview
from composite_gradients.render import (
    build_render_units,
    gradient_filename,
    write_gradient_svg,
)
from composite_gradients.sources import SOURCES, resolve
from composite_gradients.tone_windows import windows_for
from composite_gradients.utils import (
    debug_log,
    error,
    format_seconds_compact,
    key_value_pairs_to_string,
    log,
    print_banner,
    print_config_line,
    warn,
)

# CLI args


def parse_cli_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        source: source name (validated later against the registry)
        outdir: Path for outputs
        greys_only: bool, only the grey group
        three_tone: bool, Shadow/Mid/Hilite instead of five windows
        preview: bool, also write <source>_preview.png
        list: bool, print sources and exit
        debug: bool for per-file output
    """
    parser = argparse.ArgumentParser(
        prog="make_gradients",
        description="Write SVG gradients for analog video-signal palettes.",
    )
    parser.add_argument(
        "-s", "--source", default="approx_nes", help="Source name (see --list)"
    )
    parser.add_argument(
        "--outdir", type=Path, default=Path("."), help="Output directory"
    )
    parser.add_argument(
        "--greys-only", action="store_true", help="Only the grey group"
    )
    parser.add_argument(
        "--three-tone",
        action="store_true",
        help="Shadow/Mid/Hilite only (drops the deep windows)",
    )
    parser.add_argument(
        "--preview", action="store_true", help="Also write a PNG swatch preview"
    )
    parser.add_argument("--list", action="store_true", help="List sources and exit")
    parser.add_argument("--debug", action="store_true", help="Per-file details")
    return parser.parse_args(argv)


def _print_sources() -> None:
    for name, profile in SOURCES.items():
        log(
            f"{name:<28} "
            + key_value_pairs_to_string(
                [
                    ("Samples", profile.sample_count),
                    ("Hues", len(profile.hues)),
                    ("Greys", profile.grey_band),
                ]
            )
        )


def run(args: argparse.Namespace) -> int:
    """Resolve, assemble, window, write. Returns a process exit status."""
    t0 = time.perf_counter()
    try:
        profile = resolve(args.source)
    except UnknownSource as exc:
        error(f"{exc}; use --list to see available sources")
        return 2

    print_banner(profile.display_name)
    print_config_line(
        "source",
        [
            ("Name", profile.name),
            ("Samples", profile.sample_count),
            ("Hues", 0 if args.greys_only else len(profile.hues)),
            ("Grey band", profile.grey_band),
            ("Three tone", args.three_tone),
        ],
        debug=False,
    )
    if args.three_tone and len(windows_for(profile)) == 3:
        warn(f"{profile.name} already has three windows; --three-tone has no effect")

    try:
        palette = assemble_palette(profile, greys_only=args.greys_only)
        units = build_render_units(profile, palette, three_tone=args.three_tone)
    except GradientError as exc:
        error(str(exc))
        return 1

    outdir: Path = args.outdir
    outdir.mkdir(parents=True, exist_ok=True)
    for unit in units:
        dst = outdir / gradient_filename(profile.name, unit)
        write_gradient_svg(dst, unit)
        if args.debug:
            debug_log(f"wrote {dst.name} ({len(unit.stops)} stops)")

    if args.preview:
        dst = outdir / f"{profile.name}_preview.png"
        save_palette_preview(dst, palette)
        log(f"preview: {dst}")

    log(
        key_value_pairs_to_string(
            [
                ("Groups", len(palette.groups)),
                ("Files", len(units)),
                ("Time", format_seconds_compact(time.perf_counter() - t0)),
            ]
        )
    )
    return 0


# Entry point


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = parse_cli_args(argv)
    if args.list:
        _print_sources()
        return 0
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
