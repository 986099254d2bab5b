# src/gridmaze/ui/text.py
# Plain-text frame: compass, message, maze rows with the player glyph, legend.

from typing import List

from ..engine.state import Observation
from ..tiles import player_glyph
from .messages import CONTROLS, compass_line

def grid_lines(obs: Observation) -> List[str]:
    rows = list(obs.grid.rows)
    row = rows[obs.player_y]
    x = obs.player_x
    rows[obs.player_y] = row[:x] + player_glyph(obs.player_dir) + row[x + 1:]
    return rows

def render_lines(obs: Observation, message: str) -> List[str]:
    lines = [compass_line(obs.player_dir), message, ""]
    lines.extend(grid_lines(obs))
    lines.append("")
    lines.append(CONTROLS)
    return lines
