"""
Tile tanımları ve tipleri.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator


class TileType(IntEnum):
    FLOOR = 0
    WALL = 1
    START = 2
    GOAL = 3
    OBSTACLE = 4


@dataclass(frozen=True)
class TilePosition:
    row: int
    col: int

    def __iter__(self) -> Iterator[int]:
        # r, c = level.start
        yield self.row
        yield self.col
