# src/gridmaze/render/image.py
# Render a grid to PNG with Pillow. Same palette as the pygame tileset.

import os
from typing import Optional, Tuple

from PIL import Image, ImageDraw

from ..grid import Grid
from ..tiles import WALL

WALL_RGB = (80, 80, 80)
PASSAGE_RGB = (220, 220, 220)
EXIT_RGB = (255, 220, 0)
PLAYER_RGB = (80, 200, 120)

def render_image(grid: Grid, tile_size: int = 16, player: Optional[Tuple[int, int]] = None) -> Image.Image:
    canvas = Image.new("RGB", (grid.width * tile_size, grid.height * tile_size), PASSAGE_RGB)
    draw = ImageDraw.Draw(canvas)
    for y in range(grid.height):
        for x in range(grid.width):
            if (x, y) == grid.exit:
                color = EXIT_RGB
            elif grid.at(x, y) == WALL:
                color = WALL_RGB
            else:
                continue
            x0, y0 = x * tile_size, y * tile_size
            draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), fill=color)
    if player is not None:
        px, py = player
        m = max(1, tile_size // 4)
        x0, y0 = px * tile_size, py * tile_size
        draw.ellipse((x0 + m, y0 + m, x0 + tile_size - 1 - m, y0 + tile_size - 1 - m), fill=PLAYER_RGB)
    return canvas

def render_png(grid: Grid, out_png: str, tile_size: int = 16, player: Optional[Tuple[int, int]] = None) -> None:
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    render_image(grid, tile_size, player).save(out_png)
