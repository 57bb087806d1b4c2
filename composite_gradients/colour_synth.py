# composite_gradients/colour_synth.py
from __future__ import annotations

"""
Voltage levels -> 8-bit RGB through a fixed YIQ decode.

Exports:
  rgb_from_levels(luma, saturation, hue_degrees) -> uint8 [N,3]
  rgb_from_sample(sample, hue_degrees)           -> Color
  generate_hue(table, hue_degrees, part)          -> list[Color]
  generate_blend(table, lower_degrees, upper_degrees) -> list[Color]
  generate_greys(table)                           -> list[Color]

Decode:
  i = sat * cos(h), q = sat * sin(h)
  r = Y + 0.956 i + 0.619 q
  g = Y - 0.272 i - 0.647 q
  b = Y - 1.106 i + 1.703 q
  Each channel is scaled by 255, rounded half up, then clamped to [0, 255].
"""

import math
from typing import List

import numpy as np

from .constants import YIQ_TO_B, YIQ_TO_G, YIQ_TO_R
from .core_types import Color, HalfPart, Levels, U8Colors, VoltageSample, VoltageTable


def _to_u8(channel: np.ndarray) -> np.ndarray:
    """Scale [0,1] to [0,255], round half up, clamp."""
    return np.clip(np.floor(channel * 255.0 + 0.5), 0.0, 255.0).astype(np.uint8)


def rgb_from_levels(luma: Levels, saturation: Levels, hue_degrees: float) -> U8Colors:
    """
    Decode N (luma, saturation) pairs at one hue. Vectorised.
    Args:
      luma, saturation: float arrays [N] in 0..1
      hue_degrees: rotation in the I/Q plane
    Returns:
      uint8 array [N,3]
    """
    lum = np.asarray(luma, dtype=np.float64)
    sat = np.asarray(saturation, dtype=np.float64)
    angle = 2.0 * math.pi * hue_degrees / 360.0
    i = sat * math.cos(angle)
    q = sat * math.sin(angle)

    out = np.empty(lum.shape + (3,), dtype=np.uint8)
    out[..., 0] = _to_u8(lum + YIQ_TO_R[0] * i + YIQ_TO_R[1] * q)
    out[..., 1] = _to_u8(lum + YIQ_TO_G[0] * i + YIQ_TO_G[1] * q)
    out[..., 2] = _to_u8(lum + YIQ_TO_B[0] * i + YIQ_TO_B[1] * q)
    return out


def _colors(rows: U8Colors) -> List[Color]:
    return [Color(int(r), int(g), int(b)) for r, g, b in rows.tolist()]


def rgb_from_sample(sample: VoltageSample, hue_degrees: float) -> Color:
    """Single-sample convenience wrapper around rgb_from_levels."""
    rows = rgb_from_levels(
        np.array([sample.luma]), np.array([sample.saturation]), hue_degrees
    )
    return _colors(rows)[0]


def generate_hue(
    table: VoltageTable, hue_degrees: float, part: HalfPart = "full"
) -> List[Color]:
    """Colours for one hue over the full table or its lower/upper half."""
    idx = table.index_range(part)
    sl = slice(idx.start, idx.stop)
    return _colors(rgb_from_levels(table.luma[sl], table.saturation[sl], hue_degrees))


def generate_blend(
    table: VoltageTable, lower_degrees: float, upper_degrees: float
) -> List[Color]:
    """Lower half at one hue followed by upper half at another."""
    return generate_hue(table, lower_degrees, "lower") + generate_hue(
        table, upper_degrees, "upper"
    )


def generate_greys(table: VoltageTable) -> List[Color]:
    """Hue-independent greys: r = g = b = round(255 * luma)."""
    grey = _to_u8(table.luma)
    return [Color(v, v, v) for v in grey.tolist()]


__all__ = [
    "rgb_from_levels",
    "rgb_from_sample",
    "generate_hue",
    "generate_blend",
    "generate_greys",
]
