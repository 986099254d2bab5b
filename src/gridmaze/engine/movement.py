# src/gridmaze/engine/movement.py
# Pure movement rules: (grid, player, command) -> outcome. No state, no I/O.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..grid import Grid
from .player import Player


class Command(Enum):
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    STEP_FORWARD = "step_forward"
    STEP_BACKWARD = "step_backward"


class MessageKind(Enum):
    WELCOME = "welcome"
    TURNED = "turned"
    MOVED = "moved"
    BACKED = "backed"
    BUMP_WALL = "bump_wall"
    BUMP_BOUNDARY = "bump_boundary"
    BACK_WALL = "back_wall"
    BACK_BOUNDARY = "back_boundary"

    @property
    def is_bump(self) -> bool:
        return self in _BLOCKED


_BLOCKED = frozenset({
    MessageKind.BUMP_WALL,
    MessageKind.BUMP_BOUNDARY,
    MessageKind.BACK_WALL,
    MessageKind.BACK_BOUNDARY,
})

# (moved, hit wall, off grid) per step command
_STEP_KINDS = {
    Command.STEP_FORWARD: (MessageKind.MOVED, MessageKind.BUMP_WALL, MessageKind.BUMP_BOUNDARY),
    Command.STEP_BACKWARD: (MessageKind.BACKED, MessageKind.BACK_WALL, MessageKind.BACK_BOUNDARY),
}


@dataclass(frozen=True)
class MoveOutcome:
    player: Player
    message_kind: MessageKind
    won: bool = False


def apply(grid: Grid, player: Player, command: Command) -> MoveOutcome:
    if command is Command.TURN_LEFT:
        return MoveOutcome(player.facing(player.direction.left), MessageKind.TURNED)
    if command is Command.TURN_RIGHT:
        return MoveOutcome(player.facing(player.direction.right), MessageKind.TURNED)

    moved, hit_wall, off_grid = _STEP_KINDS[command]
    if command is Command.STEP_FORWARD:
        dx, dy = player.direction.forward
    else:
        dx, dy = player.direction.backward
    nx, ny = player.x + dx, player.y + dy

    if not grid.in_bounds(nx, ny):
        return MoveOutcome(player, off_grid)
    if not grid.is_passage(nx, ny):
        return MoveOutcome(player, hit_wall)

    return MoveOutcome(player.moved_to(nx, ny), moved, won=(nx, ny) == grid.exit)
