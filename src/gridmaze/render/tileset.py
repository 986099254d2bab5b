# src/gridmaze/render/tileset.py
from __future__ import annotations
import pygame
from functools import lru_cache
from typing import Tuple

from ..tiles import PASSAGE, PLAYER_GLYPHS, WALL

EXIT = "exit"

def fill_color(key: str) -> Tuple[int, int, int, int]:
    if key == WALL:  return ( 80,  80,  80, 255)
    if key == EXIT:  return (255, 220,   0, 255)
    if key in PLAYER_GLYPHS: return (80, 200, 120, 255)
    return (220, 220, 220, 255)                      # passage

class Tileset:
    """
    Tiny cached surface factory keyed by cell symbol:
      - '#' wall, ' ' passage, "exit" for the opening
      - '^' '>' 'v' '<' player, drawn as the glyph on a coloured square
    Returns pygame.Surface of exactly (tile_size, tile_size).
    """
    def __init__(self, tile_size: int, font=None):
        self.tile_size = tile_size
        self._font = font

    @property
    def font(self):
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont(None, max(10, self.tile_size))
        return self._font

    @lru_cache(maxsize=64)
    def get(self, key: str) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(fill_color(key))
        if key in PLAYER_GLYPHS:
            txt = self.font.render(key, True, (0, 0, 0))
            r = txt.get_rect(center=(self.tile_size // 2, self.tile_size // 2))
            img.blit(txt, r)
        return img

    def for_cell(self, cell: str, is_exit: bool = False) -> pygame.Surface:
        if is_exit:
            return self.get(EXIT)
        return self.get(WALL if cell == WALL else PASSAGE)
