from gridmaze.engine.movement import Command, MessageKind
from gridmaze.engine.player import Direction
from gridmaze.engine.state import LevelController
from gridmaze.grid import Grid
from gridmaze.ui.messages import CONTROLS, WELCOME, compass_line, outcome_text
from gridmaze.ui.text import render_lines

ROWS = ["#####", "#   #", "### #", "#    ", "#####"]

def test_outcome_text_names_the_facing():
    assert outcome_text(MessageKind.TURNED, Direction.WEST, Command.TURN_LEFT) == "You turn left. Now facing west."
    assert outcome_text(MessageKind.TURNED, Direction.EAST, Command.TURN_RIGHT) == "You turn right. Now facing east."
    assert outcome_text(MessageKind.MOVED, Direction.SOUTH) == "You move forward. Facing south."
    assert outcome_text(MessageKind.BACKED, Direction.NORTH) == "You step backward. Facing north."
    assert outcome_text(MessageKind.BUMP_WALL, Direction.NORTH) == "You bump into a wall. Still facing north."
    assert outcome_text(MessageKind.BUMP_BOUNDARY, Direction.EAST) == "You bump into the boundary. Still facing east."
    assert outcome_text(MessageKind.BACK_WALL, Direction.WEST) == "You step back into a wall. Still facing west."
    assert outcome_text(MessageKind.BACK_BOUNDARY, Direction.WEST) == "You back into the boundary. Still facing west."
    assert outcome_text(MessageKind.WELCOME, Direction.NORTH) == WELCOME

def test_compass_line():
    assert compass_line(Direction.NORTH) == "[Compass] Facing NORTH ↑"
    assert compass_line(Direction.WEST) == "[Compass] Facing WEST  ←"

def test_render_lines_layout():
    level = LevelController(Grid.from_rows(ROWS))
    lines = render_lines(level.view(), WELCOME)
    assert lines[0] == compass_line(Direction.NORTH)
    assert lines[1] == WELCOME
    assert lines[2] == ""
    assert lines[3:8] == ["#####", "#^  #", "### #", "#    ", "#####"]
    assert lines[8:] == ["", CONTROLS]

def test_render_lines_tracks_pose():
    level = LevelController(Grid.from_rows(ROWS))
    level.step(Command.TURN_RIGHT)
    obs = level.step(Command.STEP_FORWARD)
    lines = render_lines(obs, "")
    assert lines[4] == "# > #"
    assert lines[0] == compass_line(Direction.EAST)
