import numpy as np
from PIL import Image

from bitify.engine import CellGrid
from bitify.glyph_atlas import GLYPH_HEIGHT, GLYPH_WIDTH, glyph_for


def draw_glyph(canvas: np.ndarray, glyph: np.ndarray, x: int, y: int, color: tuple[int, int, int]) -> None:
    """Paint the "on" bits of ``glyph`` into an (H, W, 3) canvas with its top-left at (x, y).

    Off bits are left untouched. Any part of the glyph falling outside the
    canvas is skipped.
    """
    height, width = canvas.shape[:2]
    x0, y0 = max(x, 0), max(y, 0)
    x1, y1 = min(x + glyph.shape[1], width), min(y + glyph.shape[0], height)
    if x0 >= x1 or y0 >= y1:
        return
    mask = glyph[y0 - y : y1 - y, x0 - x : x1 - x]
    canvas[y0:y1, x0:x1][mask] = color


def render_grid(grid: CellGrid) -> Image.Image:
    """Rasterize a character grid onto a black RGB image, one 8x12 glyph per cell."""
    canvas = np.zeros((grid.height * GLYPH_HEIGHT, grid.width * GLYPH_WIDTH, 3), dtype=np.uint8)
    for r, row in enumerate(grid.rows):
        for c, cell in enumerate(row):
            draw_glyph(canvas, glyph_for(cell.character), c * GLYPH_WIDTH, r * GLYPH_HEIGHT, cell.color)
    return Image.fromarray(canvas)
