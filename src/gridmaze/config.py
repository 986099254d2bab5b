from dataclasses import dataclass

@dataclass(frozen=True)
class GameConfig:
    # Every level of the original game is 21x21.
    width: int = 21
    height: int = 21
    # Smallest normalized side that still has room for a corridor.
    min_dimension: int = 5

DEFAULTS = GameConfig()
