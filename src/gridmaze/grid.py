from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .tiles import CELLS, is_open

XY = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """
    Read-only W×H maze. Rows are strings indexed rows[y][x]; x grows east,
    y grows south. `exit` is the single passage cut into the border.
    """
    rows: Tuple[str, ...]
    exit: XY

    @classmethod
    def from_rows(cls, rows: Iterable[str], exit: Optional[XY] = None) -> "Grid":
        rows = tuple(rows)
        if not rows or not rows[0]:
            raise ValueError("grid must have at least one row and one column")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has {len(row)} cells, expected {width}")
            bad = set(row) - set(CELLS)
            if bad:
                raise ValueError(f"row {y} contains unknown cell symbols {sorted(bad)!r}")
        if exit is None:
            exit = (width - 1, len(rows) - 2)
        return cls(rows=rows, exit=exit)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> str:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} grid")
        return self.rows[y][x]

    def is_passage(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and is_open(self.rows[y][x])

    def as_text(self) -> str:
        return "\n".join(self.rows)
