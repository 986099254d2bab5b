# src/gridmaze/ui/messages.py
# Player-facing text for compass, outcomes and prompts.

from typing import Optional

from ..engine.movement import Command, MessageKind
from ..engine.player import Direction

WELCOME = "Welcome to Grid Maze!"
UNKNOWN_COMMAND = "Unknown command."
ESCAPED = "You slip through the opening and escape the maze!"
PLAY_AGAIN = "Play another level? (Y/N)"
CONTROLS = "Controls: W = forward, S = backward, A = left, D = right, Q = quit"

_COMPASS = {
    Direction.NORTH: "[Compass] Facing NORTH ↑",
    Direction.EAST: "[Compass] Facing EAST  →",
    Direction.SOUTH: "[Compass] Facing SOUTH ↓",
    Direction.WEST: "[Compass] Facing WEST  ←",
}

_OUTCOME = {
    MessageKind.MOVED: "You move forward. Facing {d}.",
    MessageKind.BACKED: "You step backward. Facing {d}.",
    MessageKind.BUMP_WALL: "You bump into a wall. Still facing {d}.",
    MessageKind.BUMP_BOUNDARY: "You bump into the boundary. Still facing {d}.",
    MessageKind.BACK_WALL: "You step back into a wall. Still facing {d}.",
    MessageKind.BACK_BOUNDARY: "You back into the boundary. Still facing {d}.",
}

def direction_name(direction: Direction) -> str:
    return direction.name.lower()

def compass_line(direction: Direction) -> str:
    return _COMPASS[direction]

def outcome_text(kind: MessageKind, direction: Direction, command: Optional[Command] = None) -> str:
    """
    Text for a message kind. TURNED is shared by both turns, so the issued
    command picks left or right; without it the turn is reported neutrally.
    """
    d = direction_name(direction)
    if kind is MessageKind.WELCOME:
        return WELCOME
    if kind is MessageKind.TURNED:
        if command is Command.TURN_LEFT:
            return f"You turn left. Now facing {d}."
        if command is Command.TURN_RIGHT:
            return f"You turn right. Now facing {d}."
        return f"You turn. Now facing {d}."
    return _OUTCOME[kind].format(d=d)
