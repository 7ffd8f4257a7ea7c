"""
Level / labirent çizimi.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pygame

from mazegame.model.tile import TileType

if TYPE_CHECKING:
    from mazegame.model.level import Level

ConfigColor = tuple[int, int, int]


@dataclass(frozen=True)
class TilePalette:
    wall: ConfigColor = (30, 50, 60)  # koyu turkuaz
    goal: ConfigColor = (255, 235, 50)  # sarı
    obstacle: ConfigColor = (255, 140, 0)  # turuncu
    floor: ConfigColor = (232, 232, 232)  # açık gri


class LevelRenderer:
    """Level tile'larını düz renkli dikdörtgenler olarak çizer."""

    def __init__(self, palette: TilePalette | None = None) -> None:
        self.palette = palette or TilePalette()

    def draw(
        self,
        surface: pygame.Surface,
        level: Level,
        offset: tuple[int, int] = (0, 0),
    ) -> None:
        ts = level.ts
        for r in range(level.rows()):
            for c in range(level.cols()):
                rect = pygame.Rect(offset[0] + c * ts, offset[1] + r * ts, ts, ts)
                pygame.draw.rect(surface, self.color_for(level.grid[r][c]), rect)

    def color_for(self, code: int) -> ConfigColor:
        """Tile koduna karşılık gelen rengi döndürür; bilinmeyen kodlar floor gibi çizilir."""
        match code:
            case TileType.WALL:
                return self.palette.wall
            case TileType.GOAL:
                return self.palette.goal
            case TileType.OBSTACLE:
                return self.palette.obstacle
        return self.palette.floor
