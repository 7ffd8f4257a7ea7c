"""
Level modeli: tek bir labirent ızgarasını temsil eder.

Sorumluluklar:
- Izgarayı saklamak
- Başlangıç (start) tile'ını bulmak
- Sınır / çarpışma / anlam sorgularını cevaplamak (in_bounds, is_wall, is_goal ...)
- Tile'ları çizmek (LevelRenderer'a devreder)
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from mazegame.model.tile import TilePosition, TileType

if TYPE_CHECKING:
    import pygame

    from mazegame.view.level_renderer import LevelRenderer

logger = logging.getLogger(__name__)

Grid = list[list[int]]


class InvalidLevelError(ValueError):
    """Izgara veya tile boyutu geçersiz."""


class TileOutOfBoundsError(IndexError):
    """Izgara dışındaki bir hücre sorgulandı."""

    def __init__(self, r: int, c: int, rows: int, cols: int) -> None:
        super().__init__(f"Tile ({r}, {c}) is outside the {rows}x{cols} grid")
        self.r = r
        self.c = c


class Level:
    """Bir labirent ızgarası ve tile boyutu (piksel)."""

    def __init__(self, grid: Sequence[Sequence[int]], tile_size: int) -> None:
        """
        Args:
            grid: Satır öncelikli tile kodları (grid[r][c])
            tile_size: Bir tile'ın piksel cinsinden kenar uzunluğu

        Raises:
            InvalidLevelError: Izgara boş/düzensizse veya tile_size pozitif değilse
        """
        self.grid: Grid = self._copy_grid(grid)
        self.ts = self._check_tile_size(tile_size)

        # Başlangıç pozisyonu (row/col). Değeri 2 olan tile aranarak bulunur.
        self.start: Optional[TilePosition] = self.find_start()

        # Oyuncu doğduktan sonra start tile'ı floor gibi davranır ve çizilir.
        if self.start is not None:
            self.grid[self.start.row][self.start.col] = TileType.FLOOR
            logger.debug(
                f"Level {self.rows()}x{self.cols()} created, start at "
                f"({self.start.row}, {self.start.col})"
            )
        else:
            logger.warning(f"Level {self.rows()}x{self.cols()} has no start tile")

    @staticmethod
    def _copy_grid(grid: Sequence[Sequence[int]]) -> Grid:
        rows = [list(row) for row in grid]
        if not rows:
            raise InvalidLevelError("Level grid must have at least one row")
        width = len(rows[0])
        if width == 0:
            raise InvalidLevelError("Level grid rows must not be empty")
        for index, row in enumerate(rows):
            if len(row) != width:
                raise InvalidLevelError(
                    f"Row {index} has {len(row)} tiles, expected {width}"
                )
        return rows

    @staticmethod
    def _check_tile_size(tile_size: int) -> int:
        # bool da int'tir, True'yu tile boyutu olarak kabul etme
        if isinstance(tile_size, bool) or not isinstance(tile_size, int) or tile_size <= 0:
            raise InvalidLevelError(f"Tile size must be a positive integer, got {tile_size!r}")
        return tile_size

    # ----- Boyut yardımcıları -----

    def rows(self) -> int:
        return len(self.grid)

    def cols(self) -> int:
        return len(self.grid[0])

    def pixel_width(self) -> int:
        return self.cols() * self.ts

    def pixel_height(self) -> int:
        return self.rows() * self.ts

    # ----- Anlam yardımcıları -----

    def in_bounds(self, r: int, c: int) -> bool:
        return r >= 0 and c >= 0 and r < self.rows() and c < self.cols()

    def tile_at(self, r: int, c: int) -> int:
        """
        (r, c) hücresindeki tile kodunu döndürür.

        Raises:
            TileOutOfBoundsError: Hücre ızgara dışındaysa (negatif indeksler dahil)
        """
        if not self.in_bounds(r, c):
            raise TileOutOfBoundsError(r, c, self.rows(), self.cols())
        return self.grid[r][c]

    def is_wall(self, r: int, c: int) -> bool:
        return self.tile_at(r, c) == TileType.WALL

    def is_obstacle(self, r: int, c: int) -> bool:
        return self.tile_at(r, c) == TileType.OBSTACLE

    def is_goal(self, r: int, c: int) -> bool:
        return self.tile_at(r, c) == TileType.GOAL

    def is_blocked(self, r: int, c: int) -> bool:
        """Hücreye girilemez mi? (sınır dışı, duvar veya engel)"""
        if not self.in_bounds(r, c):
            return True
        return self.grid[r][c] in (TileType.WALL, TileType.OBSTACLE)

    # ----- Başlangıç arama -----

    def find_start(self) -> Optional[TilePosition]:
        """Izgarayı satır satır tarar, ilk START tile'ını döndürür (yoksa None)."""
        for r in range(self.rows()):
            for c in range(self.cols()):
                if self.grid[r][c] == TileType.START:
                    return TilePosition(r, c)
        return None

    # ----- Çizim -----

    def draw(
        self,
        surface: pygame.Surface,
        offset: tuple[int, int] = (0, 0),
        renderer: Optional[LevelRenderer] = None,
    ) -> None:
        """Her tile'ı düz renkli bir dikdörtgen olarak çizer."""
        if renderer is None:
            from mazegame.view.level_renderer import LevelRenderer

            renderer = LevelRenderer()
        renderer.draw(surface, self, offset)
