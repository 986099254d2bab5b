# src/gridmaze/shell.py
# Terminal front end: clear, draw, read one key, repeat. All game rules live
# in the engine; this module only maps keys to commands and prints frames.

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Callable, Optional, TextIO

from .engine.movement import Command
from .engine.state import LevelController, new_level
from .ui.messages import ESCAPED, PLAY_AGAIN, UNKNOWN_COMMAND, WELCOME, outcome_text
from .ui.text import render_lines

logger = logging.getLogger(__name__)

KEYMAP = {
    "w": Command.STEP_FORWARD,
    "s": Command.STEP_BACKWARD,
    "a": Command.TURN_LEFT,
    "d": Command.TURN_RIGHT,
}
QUIT_KEY = "q"


def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


def read_key(stream: TextIO) -> Optional[str]:
    """Next non-blank character from `stream`, or None at end of input."""
    while True:
        ch = stream.read(1)
        if ch == "":
            return None
        if not ch.isspace():
            return ch


class TerminalShell:
    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        clear: Optional[Callable[[], None]] = None,
        level_factory: Callable[[], LevelController] = new_level,
    ) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.clear = clear or clear_screen
        self.level_factory = level_factory

    def write(self, text: str = "") -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def play_level(self, level: LevelController) -> bool:
        """Run one level. True if the player escaped, False on quit or EOF."""
        message = WELCOME
        while True:
            self.clear()
            for line in render_lines(level.view(), message):
                self.write(line)

            key = read_key(self.stdin)
            if key is None or key.lower() == QUIT_KEY:
                return False

            command = KEYMAP.get(key.lower())
            if command is None:
                message = UNKNOWN_COMMAND
                continue

            obs = level.step(command)
            message = outcome_text(obs.last_message_kind, obs.player_dir, command)
            if obs.won:
                self.clear()
                self.write(ESCAPED)
                return True

    def ask_play_again(self) -> bool:
        self.write()
        self.write(PLAY_AGAIN)
        key = read_key(self.stdin)
        return key is not None and key.lower() == "y"

    def run(self) -> int:
        levels = 0
        while True:
            levels += 1
            if not self.play_level(self.level_factory()):
                break
            if not self.ask_play_again():
                break
        logger.debug("shell finished after %d level(s)", levels)
        return 0


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gridmaze",
        description="Find the exit of a freshly generated maze. W/A/S/D to move, Q to quit.",
    )
    parser.parse_args(argv)
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return TerminalShell().run()


if __name__ == "__main__":
    raise SystemExit(main())
