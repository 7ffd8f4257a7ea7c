"""
Tile tabanlı labirent oyunu: Level modeli ve pygame çizimi.
"""
from mazegame.model.level import InvalidLevelError, Level, TileOutOfBoundsError
from mazegame.model.tile import TilePosition, TileType

__all__ = ["InvalidLevelError", "Level", "TileOutOfBoundsError", "TilePosition", "TileType"]
