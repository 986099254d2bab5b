from dataclasses import dataclass

@dataclass
class StatusBarState:
    compass: str = ""
    message: str = ""
    hint: str = ""

def render_status_bar(screen, origin_xy: tuple[int,int], width: int, line_height: int, state: StatusBarState) -> None:
    """
    Draw the compass, message and hint lines under the maze.
    Does not touch the grid.
    """
    import pygame  # local import to avoid hard dep when not used
    ox, oy = origin_xy
    lines = [t for t in (state.compass, state.message, state.hint) if t]
    pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(ox, oy, width, line_height * 3))
    font = pygame.font.SysFont(None, max(10, line_height - 4))

    y = oy
    for text in lines:
        img = font.render(text, True, (220, 220, 220))
        screen.blit(img, (ox + line_height // 2, y + (line_height - img.get_height()) // 2))
        y += line_height
