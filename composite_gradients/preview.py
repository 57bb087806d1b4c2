# composite_gradients/preview.py
from __future__ import annotations

"""
Palette preview swatches (PNG via Pillow).

One row per hue group, one square swatch per colour. Short rows are padded
with black.
"""

from pathlib import Path

import numpy as np
from PIL import Image

from .core_types import Palette, U8Colors


def palette_rows(palette: Palette) -> U8Colors:
    """uint8 [G, W, 3] grid of colours, W = longest group."""
    width = max((len(g) for g in palette.groups), default=0)
    grid = np.zeros((len(palette.groups), width, 3), dtype=np.uint8)
    for row, group in enumerate(palette.groups):
        if len(group):
            grid[row, : len(group)] = np.array(group.colors, dtype=np.uint8)
    return grid


def palette_preview_image(palette: Palette, swatch: int = 16) -> Image.Image:
    """Scale the colour grid up so each colour is a swatch x swatch block."""
    grid = palette_rows(palette)
    scaled = np.repeat(np.repeat(grid, swatch, axis=0), swatch, axis=1)
    return Image.fromarray(scaled)


def save_palette_preview(path: Path, palette: Palette, swatch: int = 16) -> None:
    palette_preview_image(palette, swatch).save(path)


__all__ = ["palette_rows", "palette_preview_image", "save_palette_preview"]
