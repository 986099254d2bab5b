# tests/test_player_walk.py
from gridmaze.engine.movement import Command, MessageKind, apply
from gridmaze.engine.player import Direction, Player
from gridmaze.grid import Grid
from gridmaze.mapgen.generator import generate_grid

# Tiny 7x7 room with a short wall in the middle:
# - outer rim walls, exit cut at (6,5)
# - blocker at (2..4, 3)
def make_test_grid():
    return Grid.from_rows([
        "#######",
        "#     #",
        "#     #",
        "# ### #",
        "#     #",
        "#      ",
        "#######",
    ])

ALL_DIRS = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)

def test_turns_rotate_in_place():
    g = make_test_grid()
    p = Player.start()
    out = apply(g, p, Command.TURN_RIGHT)
    assert out.player == Player(1, 1, Direction.EAST)
    assert out.message_kind is MessageKind.TURNED and not out.won

    out = apply(g, p, Command.TURN_LEFT)
    assert out.player == Player(1, 1, Direction.WEST)

    d = Direction.NORTH
    for want in (Direction.EAST, Direction.SOUTH, Direction.WEST, Direction.NORTH):
        d = d.right
        assert d is want

def test_forward_into_border_wall_is_a_bump():
    for seed in range(5):
        g = generate_grid(21, 21, seed=seed)
        out = apply(g, Player.start(), Command.STEP_FORWARD)
        assert out.message_kind is MessageKind.BUMP_WALL
        assert out.player == Player(1, 1, Direction.NORTH)

def test_walk_around_the_blocker():
    g = make_test_grid()
    p = Player(1, 2, Direction.EAST)

    out = apply(g, p, Command.STEP_FORWARD)
    assert out.player.position == (2, 2) and out.message_kind is MessageKind.MOVED

    # Facing east, the blocker is below; turn right and bump it
    p = apply(g, out.player, Command.TURN_RIGHT).player
    out = apply(g, p, Command.STEP_FORWARD)
    assert out.message_kind is MessageKind.BUMP_WALL
    assert out.player == Player(2, 2, Direction.SOUTH)

    # Backing up (north) is open
    out = apply(g, p, Command.STEP_BACKWARD)
    assert out.message_kind is MessageKind.BACKED
    assert out.player == Player(2, 1, Direction.SOUTH)

    # One more back step hits the rim
    out = apply(g, out.player, Command.STEP_BACKWARD)
    assert out.message_kind is MessageKind.BACK_WALL
    assert out.player == Player(2, 1, Direction.SOUTH)

def test_stepping_off_the_grid_is_a_boundary_bump():
    g = make_test_grid()
    at_exit = Player(6, 5, Direction.EAST)
    out = apply(g, at_exit, Command.STEP_FORWARD)
    assert out.message_kind is MessageKind.BUMP_BOUNDARY
    assert out.player == at_exit and not out.won

    facing_in = Player(6, 5, Direction.WEST)
    out = apply(g, facing_in, Command.STEP_BACKWARD)
    assert out.message_kind is MessageKind.BACK_BOUNDARY
    assert out.player == facing_in

def test_entering_the_exit_wins_either_way():
    g = make_test_grid()
    out = apply(g, Player(5, 5, Direction.EAST), Command.STEP_FORWARD)
    assert out.won and out.player.position == g.exit

    out = apply(g, Player(5, 5, Direction.WEST), Command.STEP_BACKWARD)
    assert out.won and out.message_kind is MessageKind.BACKED

    out = apply(g, Player(5, 4, Direction.SOUTH), Command.STEP_FORWARD)
    assert not out.won and out.player.position == (5, 5)

def _passages(g):
    return [(x, y) for y in range(g.height) for x in range(g.width) if g.is_passage(x, y)]

def test_turn_pairs_are_identity():
    g = generate_grid(11, 11, seed=3)
    for x, y in _passages(g):
        for d in ALL_DIRS:
            p = Player(x, y, d)
            lr = apply(g, apply(g, p, Command.TURN_LEFT).player, Command.TURN_RIGHT).player
            rl = apply(g, apply(g, p, Command.TURN_RIGHT).player, Command.TURN_LEFT).player
            assert lr == p and rl == p

def test_forward_then_back_returns_home():
    g = generate_grid(11, 11, seed=4)
    for x, y in _passages(g):
        for d in ALL_DIRS:
            p = Player(x, y, d)
            fwd = apply(g, p, Command.STEP_FORWARD)
            if fwd.message_kind is not MessageKind.MOVED:
                continue
            back = apply(g, fwd.player, Command.STEP_BACKWARD)
            assert back.message_kind is MessageKind.BACKED
            assert back.player == p

def test_bumps_never_move_or_turn():
    for seed in range(3):
        g = generate_grid(11, 11, seed=seed)
        for x, y in _passages(g):
            for d in ALL_DIRS:
                p = Player(x, y, d)
                for cmd in (Command.STEP_FORWARD, Command.STEP_BACKWARD):
                    out = apply(g, p, cmd)
                    if out.message_kind.is_bump:
                        assert out.player == p
                    else:
                        assert out.player.direction is d
                    assert out.won == (out.player.position == g.exit and out.player != p)
