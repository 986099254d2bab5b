# Canonical cell symbols (the only two the core recognizes) and player glyphs

WALL = "#"
PASSAGE = " "
CELLS = (WALL, PASSAGE)

# Indexed by Direction value: NORTH, EAST, SOUTH, WEST
PLAYER_GLYPHS = ("^", ">", "v", "<")

def is_open(cell: str) -> bool:
    return cell == PASSAGE

def player_glyph(direction) -> str:
    return PLAYER_GLYPHS[direction.value]
