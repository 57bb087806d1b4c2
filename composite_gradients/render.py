# composite_gradients/render.py
from __future__ import annotations

"""
Render units and SVG gradient output.

Exports:
  build_render_units(profile, palette, three_tone=False) -> list[RenderUnit]
  gradient_id(unit)                     -> "Source [Hue ]Gradient"
  gradient_svg(unit)                    -> SVG text
  gradient_filename(source_name, unit)  -> "<source>[_<hue>]_<gradient>.svg"
  write_gradient_svg(path, unit)
"""

from pathlib import Path
from typing import List

from .core_types import Palette, RenderUnit, SourceProfile, slugify_label
from .tone_windows import stop_offsets, window_colors, windows_for


def build_render_units(
    profile: SourceProfile, palette: Palette, *, three_tone: bool = False
) -> List[RenderUnit]:
    """
    One unit per (hue group, window), groups outermost.
    hue_label is None when the palette has a single group.
    """
    windows = windows_for(profile, three_tone=three_tone)
    single = len(palette.groups) == 1
    units: List[RenderUnit] = []
    for group in palette.groups:
        for window in windows:
            colors = window_colors(group, window)
            units.append(
                RenderUnit(
                    source_display_name=profile.display_name,
                    hue_label=None if single else group.label,
                    gradient_label=window.label,
                    stops=tuple(zip(colors, stop_offsets(len(colors)))),
                )
            )
    return units


def gradient_id(unit: RenderUnit) -> str:
    parts = [unit.source_display_name, unit.hue_label, unit.gradient_label]
    return " ".join(p for p in parts if p)


def gradient_svg(unit: RenderUnit) -> str:
    """SVG document with one linearGradient holding the unit's stops."""
    lines = [
        "<svg>",
        f'    <linearGradient id="{gradient_id(unit)}" '
        'gradientUnits="objectBoundingBox" spreadMethod="pad">',
    ]
    for color, offset in unit.stops:
        lines.append(
            f'        <stop stop-color="#{color.hex}" '
            f'offset="{offset:f}" stop-opacity="1"/>'
        )
    lines.append("    </linearGradient>")
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def gradient_filename(source_name: str, unit: RenderUnit) -> str:
    parts = [source_name]
    if unit.hue_label:
        parts.append(slugify_label(unit.hue_label))
    parts.append(slugify_label(unit.gradient_label))
    return "_".join(parts) + ".svg"


def write_gradient_svg(path: Path, unit: RenderUnit) -> None:
    """Write one gradient file (UTF-8, LF line endings)."""
    with open(path, "w", encoding="utf-8", newline="\n") as fh:
        fh.write(gradient_svg(unit))


__all__ = [
    "build_render_units",
    "gradient_id",
    "gradient_svg",
    "gradient_filename",
    "write_gradient_svg",
]
