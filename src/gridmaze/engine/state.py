# src/gridmaze/engine/state.py
# Level controller: owns one grid and the player pose for a single level.

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import DEFAULTS
from ..grid import Grid
from ..mapgen.generator import generate_grid
from .movement import Command, MessageKind, apply
from .player import Direction, Player

logger = logging.getLogger(__name__)


class LevelState(Enum):
    GENERATING = "generating"
    PLAYING = "playing"
    WON = "won"


@dataclass(frozen=True)
class Observation:
    """Everything a renderer needs for one frame."""
    grid: Grid
    player_x: int
    player_y: int
    player_dir: Direction
    last_message_kind: MessageKind
    won: bool
    state: LevelState

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def cell(self, x: int, y: int) -> str:
        return self.grid.at(x, y)


class LevelController:
    def __init__(
        self,
        grid: Optional[Grid] = None,
        *,
        width: int = DEFAULTS.width,
        height: int = DEFAULTS.height,
        seed: Optional[int] = None,
    ) -> None:
        self.state = LevelState.GENERATING
        if grid is None:
            grid = generate_grid(width, height, seed=seed)
        self.grid = grid
        self.player = Player.start()
        self.last_message_kind = MessageKind.WELCOME
        self.state = LevelState.PLAYING

    @property
    def won(self) -> bool:
        return self.state is LevelState.WON

    def view(self) -> Observation:
        return Observation(
            grid=self.grid,
            player_x=self.player.x,
            player_y=self.player.y,
            player_dir=self.player.direction,
            last_message_kind=self.last_message_kind,
            won=self.won,
            state=self.state,
        )

    def step(self, command: Command) -> Observation:
        # The level is over once won; the shell decides what comes next.
        if self.state is not LevelState.PLAYING:
            return self.view()

        outcome = apply(self.grid, self.player, command)
        self.player = outcome.player
        self.last_message_kind = outcome.message_kind
        logger.debug("%s -> %s at %s facing %s", command.name, outcome.message_kind.name,
                     self.player.position, self.player.direction.name)

        if outcome.won:
            self.state = LevelState.WON
            logger.info("level won at exit %s", self.grid.exit)
        return self.view()


def new_level(
    width: int = DEFAULTS.width,
    height: int = DEFAULTS.height,
    seed: Optional[int] = None,
) -> LevelController:
    return LevelController(width=width, height=height, seed=seed)
