# src/gridmaze/mapgen/carve.py
# Recursive-backtracker carve (iterative DFS) on the odd-cell lattice.
# Coordinates are 0-based, grid is [row][col].

import logging
from typing import List, Tuple

from ..errors import InvalidDimensions
from ..grid import Grid
from ..rng import RandomSource
from ..tiles import PASSAGE, WALL

logger = logging.getLogger(__name__)

XY = Tuple[int, int]

START: XY = (1, 1)

def normalize_dimensions(width: int, height: int) -> Tuple[int, int]:
    """Bump even sides up to the next odd value."""
    if width % 2 == 0:
        width += 1
    if height % 2 == 0:
        height += 1
    return width, height

def exit_cell(width: int, height: int) -> XY:
    # East border, one row above the bottom. H-2 is odd, so (W-2, H-2) is a
    # lattice cell and the exit always opens onto the carved interior.
    return (width - 1, height - 2)

def empty_wall_grid(width: int, height: int) -> List[List[str]]:
    return [[WALL for _ in range(width)] for _ in range(height)]

def lattice_neighbors(x: int, y: int, width: int, height: int) -> List[XY]:
    # Only offsets whose midpoint wall stays inside the outer border.
    out = []
    if x - 2 > 0:
        out.append((x - 2, y))
    if x + 2 < width - 1:
        out.append((x + 2, y))
    if y - 2 > 0:
        out.append((x, y - 2))
    if y + 2 < height - 1:
        out.append((x, y + 2))
    return out

def carve_passages(cells: List[List[str]], rng: RandomSource) -> int:
    """
    Carve a perfect maze into `cells` in place, starting from (1,1).
    Returns the number of cells turned into passage.
    """
    height = len(cells)
    width = len(cells[0])
    sx, sy = START
    cells[sy][sx] = PASSAGE
    carved = 1
    stack = [START]

    while stack:
        x, y = stack[-1]
        unvisited = [
            (nx, ny) for (nx, ny) in lattice_neighbors(x, y, width, height)
            if cells[ny][nx] == WALL
        ]
        if not unvisited:
            stack.pop()
            continue

        nx, ny = unvisited[rng.below(len(unvisited))]
        cells[(y + ny) // 2][(x + nx) // 2] = PASSAGE
        cells[ny][nx] = PASSAGE
        carved += 2
        stack.append((nx, ny))

    return carved

def carve_maze(width: int, height: int, rng: RandomSource) -> Grid:
    """
    Carve a maze of the normalized size and open the exit. Sides of 3 are
    accepted and yield only (1,1) plus the exit; anything smaller has no
    room for the start cell.
    """
    width, height = normalize_dimensions(width, height)
    if width < 3 or height < 3:
        raise InvalidDimensions(width, height, 3)

    cells = empty_wall_grid(width, height)
    carved = carve_passages(cells, rng)

    ex, ey = exit_cell(width, height)
    cells[ey][ex] = PASSAGE

    logger.debug("carved %dx%d maze: %d passage cells + exit", width, height, carved)
    return Grid(rows=tuple("".join(row) for row in cells), exit=(ex, ey))
