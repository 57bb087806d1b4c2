# composite_gradients/constants.py
"""
Fixed numbers used across the project.

- Capacity limits (MAX_SHADES, MAX_HUES)
- YIQ decode coefficients
- Supported voltage table sizes
- Hand-authored NES level tables
"""
from __future__ import annotations

from typing import Tuple

# =========================
# Capacity
# =========================
MAX_SHADES = 64  # colours per hue group
MAX_HUES = 32  # chromatic hue groups per palette (the grey group is extra)

# =========================
# YIQ -> RGB decode
# =========================
YIQ_TO_R: Tuple[float, float] = (0.956, 0.619)
YIQ_TO_G: Tuple[float, float] = (-0.272, -0.647)
YIQ_TO_B: Tuple[float, float] = (-1.106, 1.703)

# =========================
# Voltage tables
# =========================
SAMPLE_COUNTS: Tuple[int, ...] = (6, 8, 12, 16, 18, 24, 32, 36, 48)

# the luma is the average of the low and high voltages;
# the saturation is half of the peak-to-peak voltage.

# nesdev wiki, "NTSC video" and "PPU palettes"
NES_LUMA: Tuple[float, ...] = (0.1995, 0.342, 0.654, 0.8575)
NES_SATURATION: Tuple[float, ...] = (0.1995, 0.342, 0.346, 0.1425)

# rounded to look like the NES rather than follow the 1/(n+2) step
APPROX_NES_LUMA: Tuple[float, ...] = (0.2, 0.35, 0.65, 0.85)
APPROX_NES_SATURATION: Tuple[float, ...] = (0.2, 0.35, 0.35, 0.15)

# =========================
# Bracketing colours
# =========================
BLACK_RGB: Tuple[int, int, int] = (0, 0, 0)
WHITE_RGB: Tuple[int, int, int] = (255, 255, 255)

__all__ = [
    "MAX_SHADES",
    "MAX_HUES",
    "YIQ_TO_R",
    "YIQ_TO_G",
    "YIQ_TO_B",
    "SAMPLE_COUNTS",
    "NES_LUMA",
    "NES_SATURATION",
    "APPROX_NES_LUMA",
    "APPROX_NES_SATURATION",
    "BLACK_RGB",
    "WHITE_RGB",
]
