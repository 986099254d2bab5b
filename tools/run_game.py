# tools/run_game.py
# Windowed runner: same LevelController as the terminal shell, drawn with pygame.
# W/S step forward/back, A/D turn, Q or Esc quits. After escaping, Y or Enter
# starts a fresh level and N quits.

from __future__ import annotations

import argparse
from typing import Optional

import pygame

from gridmaze.config import DEFAULTS
from gridmaze.engine.movement import Command
from gridmaze.engine.state import LevelController, new_level
from gridmaze.render.tileset import Tileset
from gridmaze.tiles import player_glyph
from gridmaze.ui.messages import CONTROLS, ESCAPED, PLAY_AGAIN, WELCOME, compass_line, outcome_text
from gridmaze.ui.status_bar import StatusBarState, render_status_bar

KEY_COMMANDS = {
    pygame.K_w: Command.STEP_FORWARD,
    pygame.K_s: Command.STEP_BACKWARD,
    pygame.K_a: Command.TURN_LEFT,
    pygame.K_d: Command.TURN_RIGHT,
}

STATUS_LINE_PX = 22


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Grid Maze (pygame window)")
    parser.add_argument("--width", type=int, default=DEFAULTS.width)
    parser.add_argument("--height", type=int, default=DEFAULTS.height)
    parser.add_argument("--seed", type=int, default=None, help="seed for the first level; later levels add 1")
    parser.add_argument("--tile", type=int, default=24, help="tile size in pixels")
    parser.add_argument("--fps", type=int, default=30)
    args = parser.parse_args(argv)

    seed = args.seed

    def fresh_level() -> LevelController:
        nonlocal seed
        level = new_level(args.width, args.height, seed=seed)
        if seed is not None:
            seed += 1
        return level

    level = fresh_level()
    w, h = level.grid.width, level.grid.height

    if not pygame.get_init():
        pygame.init()

    tileset = Tileset(args.tile)
    bar_h = STATUS_LINE_PX * 3
    screen = pygame.display.set_mode((w * args.tile, h * args.tile + bar_h))
    pygame.display.set_caption("Grid Maze")
    clock = pygame.time.Clock()

    message = WELCOME
    running = True

    def draw() -> None:
        obs = level.view()
        screen.fill((0, 0, 0))
        for y in range(obs.height):
            for x in range(obs.width):
                surf = tileset.for_cell(obs.cell(x, y), is_exit=(x, y) == level.grid.exit)
                screen.blit(surf, (x * args.tile, y * args.tile))
        if not obs.won:
            screen.blit(tileset.get(player_glyph(obs.player_dir)), (obs.player_x * args.tile, obs.player_y * args.tile))
        state = StatusBarState(
            compass=compass_line(obs.player_dir),
            message=message,
            hint=PLAY_AGAIN if obs.won else CONTROLS,
        )
        render_status_bar(screen, (0, h * args.tile), w * args.tile, STATUS_LINE_PX, state)
        pygame.display.flip()

    # ---------- Main loop ----------
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type != pygame.KEYDOWN:
                continue
            elif event.key in (pygame.K_ESCAPE, pygame.K_q):
                running = False
            elif level.won:
                if event.key in (pygame.K_y, pygame.K_RETURN):
                    level = fresh_level()
                    message = WELCOME
                elif event.key == pygame.K_n:
                    running = False
            elif event.key in KEY_COMMANDS:
                command = KEY_COMMANDS[event.key]
                obs = level.step(command)
                message = ESCAPED if obs.won else outcome_text(obs.last_message_kind, obs.player_dir, command)

        draw()
        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
