# composite_gradients/sources.py
from __future__ import annotations

"""
Source profile registry.

Exports:
  SOURCES: dict[str, SourceProfile]   # built once at import
  resolve(name) -> SourceProfile      # raises UnknownSource
  source_names() -> list[str]         # registry order
  swept_hues(step, start)             -> tuple[HueSpec, ...]

Every source is a fixed record. Sweep sources decode 360/step hues starting
at their start angle; each has a `_rotated` twin starting half a step later.
EGA/CGA extensions list their hues explicitly, with brown built as a blend of
a dark orange lower half and a yellow upper half.
"""

from typing import Dict, List, Tuple

from .core_types import GreyBand, HueSpec, SourceProfile, UnknownSource, VoltageTable
from .voltage_tables import APPROX_NES_TABLE, NES_TABLE, SKIP_08_TABLE, voltage_table


def swept_hues(step_degrees: float, start_degrees: float) -> Tuple[HueSpec, ...]:
    """Uniform sweep in increasing angle, modulo 360."""
    count = int(round(360.0 / step_degrees))
    return tuple(
        HueSpec(f"Hue {k + 1:02d}", (start_degrees + k * step_degrees) % 360.0)
        for k in range(count)
    )


# Explicit EGA/CGA hues (degrees in the I/Q plane)
RED = HueSpec("Red", 15.0)
MAGENTA = HueSpec("Magenta", 75.0)
BLUE = HueSpec("Blue", 135.0)
CYAN = HueSpec("Cyan", 195.0)
GREEN = HueSpec("Green", 255.0)
BROWN = HueSpec("Brown", 345.0, upper_degrees=315.0)

EGA_HUES: Tuple[HueSpec, ...] = (RED, MAGENTA, BLUE, CYAN, GREEN, BROWN)
CGA0_HUES: Tuple[HueSpec, ...] = (GREEN, RED, BROWN)
CGA1_HUES: Tuple[HueSpec, ...] = (CYAN, MAGENTA)

# (name, display name, table, hue step, hue start, grey band)
_SWEEPS: List[Tuple[str, str, VoltageTable, float, float, GreyBand]] = [
    ("approx_nes", "Approx NES", APPROX_NES_TABLE, 30.0, 0.0, "bookend"),
    ("nes", "NES", NES_TABLE, 30.0, 0.0, "bookend"),
    ("composite_16_1x", "Composite 16 1x", voltage_table(16), 90.0, 0.0, "leading"),
    ("composite_12_1p50x", "Composite 12 1.5x", voltage_table(12), 60.0, 0.0, "leading"),
    ("composite_18_1p50x", "Composite 18 1.5x", voltage_table(18), 60.0, 0.0, "leading"),
    ("composite_48_1p50x", "Composite 48 1.5x", voltage_table(48), 60.0, 0.0, "leading"),
    ("composite_08_2x", "Composite 08 2x", voltage_table(8), 45.0, 0.0, "leading"),
    ("composite_32_2x", "Composite 32 2x", voltage_table(32), 45.0, 0.0, "leading"),
    ("composite_08_2p50x", "Composite 08 2.5x", voltage_table(8), 36.0, 0.0, "leading"),
    ("composite_32_2p50x", "Composite 32 2.5x", voltage_table(32), 36.0, 0.0, "leading"),
    ("composite_06_3x", "Composite 06 3x", voltage_table(6), 30.0, 0.0, "leading"),
    ("composite_24_3x", "Composite 24 3x", voltage_table(24), 30.0, 0.0, "leading"),
    ("composite_36_3x", "Composite 36 3x", voltage_table(36), 30.0, 0.0, "leading"),
    ("composite_08_ega", "Composite 08 EGA", voltage_table(8), 60.0, 15.0, "leading"),
    ("composite_08_ega_skip", "Composite 08 EGA Skip", SKIP_08_TABLE, 60.0, 15.0, "leading"),
]

# (name, display name, table, hues)
_EXPLICIT: List[Tuple[str, str, VoltageTable, Tuple[HueSpec, ...]]] = [
    ("ega_extended_32", "EGA Extended 32", voltage_table(32), EGA_HUES),
    ("cga0_extended_16", "CGA0 Extended 16", voltage_table(16), CGA0_HUES),
    ("cga1_extended_16", "CGA1 Extended 16", voltage_table(16), CGA1_HUES),
]


def _sweep_profile(
    name: str,
    display_name: str,
    table: VoltageTable,
    step: float,
    start: float,
    grey_band: GreyBand,
    rotated: bool,
) -> SourceProfile:
    if rotated:
        name, display_name, start = (
            f"{name}_rotated",
            f"{display_name} Rotated",
            start + step / 2.0,
        )
    return SourceProfile(
        name=name,
        display_name=display_name,
        table=table,
        hues=swept_hues(step, start),
        grey_band=grey_band,
        hue_step_degrees=step,
        hue_start_degrees=start,
        rotated=rotated,
    )


def _build_registry() -> Dict[str, SourceProfile]:
    registry: Dict[str, SourceProfile] = {}
    for name, display, table, step, start, band in _SWEEPS:
        for rotated in (False, True):
            profile = _sweep_profile(name, display, table, step, start, band, rotated)
            registry[profile.name] = profile
    for name, display, table, hues in _EXPLICIT:
        registry[name] = SourceProfile(
            name=name,
            display_name=display,
            table=table,
            hues=hues,
            grey_band="leading",
            hue_start_degrees=hues[0].degrees,
        )
    return registry


SOURCES: Dict[str, SourceProfile] = _build_registry()


def resolve(name: str) -> SourceProfile:
    """Look up a source by name."""
    try:
        return SOURCES[name]
    except KeyError:
        raise UnknownSource(name) from None


def source_names() -> List[str]:
    return list(SOURCES)


__all__ = [
    "SOURCES",
    "EGA_HUES",
    "CGA0_HUES",
    "CGA1_HUES",
    "resolve",
    "source_names",
    "swept_hues",
]
