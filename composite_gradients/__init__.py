"""
composite_gradients package.

Purpose:
  Derive palettes that approximate analog video signals (NES, NTSC composite,
  EGA/CGA extensions) and emit their tonal ranges as SVG gradients.
  See make_gradients.py for the CLI.

Public API:
  voltage_tables : luma/saturation tables (build_voltage_table, VOLTAGE_TABLES).
  colour_synth   : YIQ decode to 8-bit RGB (rgb_from_sample, generate_hue, ...).
  sources        : source profile registry (resolve, source_names, SOURCES).
  assemble       : palette assembly (assemble_palette).
  tone_windows   : Shadow/Mid/Hilite windows (windows_for, window_colors).
  render         : render units and SVG text (build_render_units, gradient_svg).
  preview        : PNG swatch preview of a palette.
  core_types     : value objects and errors.
  utils          : print logging helpers.

Quick start:
  from composite_gradients import resolve, assemble_palette, build_render_units
  profile = resolve("composite_16_1x")
  units = build_render_units(profile, assemble_palette(profile))
"""

__version__ = "0.2.0"

# Re-export namespaces for convenience.
from . import constants
from . import core_types
from . import voltage_tables
from . import colour_synth
from . import sources
from . import assemble
from . import tone_windows
from . import render
from . import preview
from . import utils

from .core_types import (  # noqa: E402,F401
    CapacityExceeded,
    Color,
    GradientError,
    InvalidWindowRequest,
    UnknownSource,
)
from .sources import resolve, source_names  # noqa: E402,F401
from .assemble import assemble_palette  # noqa: E402,F401
from .tone_windows import windows_for  # noqa: E402,F401
from .render import build_render_units, gradient_svg  # noqa: E402,F401

__all__ = [
    "__version__",
    "constants",
    "core_types",
    "voltage_tables",
    "colour_synth",
    "sources",
    "assemble",
    "tone_windows",
    "render",
    "preview",
    "utils",
    "CapacityExceeded",
    "Color",
    "GradientError",
    "InvalidWindowRequest",
    "UnknownSource",
    "resolve",
    "source_names",
    "assemble_palette",
    "windows_for",
    "build_render_units",
    "gradient_svg",
]
