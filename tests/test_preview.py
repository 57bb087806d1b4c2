from PIL import Image

from composite_gradients.assemble import assemble_palette
from composite_gradients.preview import (
    palette_preview_image,
    palette_rows,
    save_palette_preview,
)
from composite_gradients.sources import resolve


def test_rows_match_groups():
    palette = assemble_palette(resolve("approx_nes"))
    grid = palette_rows(palette)
    assert grid.shape == (13, 6, 3)
    assert tuple(grid[0, 0]) == (0, 0, 0)
    assert tuple(grid[0, 5]) == (255, 255, 255)


def test_image_scales_swatches():
    palette = assemble_palette(resolve("cga1_extended_16"))
    img = palette_preview_image(palette, swatch=4)
    assert img.size == (16 * 4, 3 * 4)
    assert img.mode == "RGB"
    assert img.getpixel((3, 3)) == tuple(palette.groups[0].colors[0])
    assert img.getpixel((4, 8)) == tuple(palette.groups[2].colors[1])


def test_save_png(tmp_path):
    palette = assemble_palette(resolve("composite_06_3x"))
    dst = tmp_path / "preview.png"
    save_palette_preview(dst, palette, swatch=2)
    with Image.open(dst) as img:
        assert img.size == (6 * 2, 13 * 2)
