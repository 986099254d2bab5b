# src/gridmaze/mapgen/generator.py
# Level generator: size validation on top of the carve.

from typing import Optional

from ..config import DEFAULTS
from ..errors import InvalidDimensions
from ..grid import Grid
from ..rng import PMRandom, RandomSource
from .carve import carve_maze, normalize_dimensions


def generate(width: int, height: int, rng: RandomSource) -> Grid:
    w, h = normalize_dimensions(width, height)
    if w < DEFAULTS.min_dimension or h < DEFAULTS.min_dimension:
        raise InvalidDimensions(w, h, DEFAULTS.min_dimension)
    return carve_maze(w, h, rng)


def generate_grid(width: int = DEFAULTS.width, height: int = DEFAULTS.height, seed: Optional[int] = None) -> Grid:
    rng = PMRandom.from_entropy() if seed is None else PMRandom.seeded(seed)
    return generate(width, height, rng)
