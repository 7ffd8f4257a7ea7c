"""
Hazır level ızgaraları.

Tile kodları:
0 = floor, 1 = wall, 2 = start, 3 = goal, 4 = obstacle
"""
from __future__ import annotations

_LEVELS: dict[str, tuple[tuple[int, ...], ...]] = {
    "level_1": (
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 2, 0, 0, 0, 1, 0, 0, 0, 0, 1),
        (1, 0, 1, 1, 0, 1, 0, 1, 1, 0, 1),
        (1, 0, 1, 0, 0, 0, 0, 0, 1, 0, 1),
        (1, 0, 1, 0, 1, 1, 1, 0, 1, 0, 1),
        (1, 0, 0, 0, 0, 0, 1, 0, 0, 3, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    ),
    "level_2": (
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 2, 0, 4, 0, 0, 0, 1, 0, 0, 0, 0, 1),
        (1, 0, 0, 1, 1, 1, 0, 1, 0, 1, 1, 0, 1),
        (1, 4, 0, 0, 0, 1, 0, 0, 0, 4, 1, 0, 1),
        (1, 1, 1, 1, 0, 1, 1, 1, 0, 1, 1, 0, 1),
        (1, 0, 0, 0, 0, 0, 4, 1, 0, 0, 0, 0, 1),
        (1, 0, 1, 1, 1, 0, 0, 1, 1, 1, 4, 1, 1),
        (1, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 3, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    ),
    "level_3": (
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
        (1, 3, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1),
        (1, 1, 1, 0, 1, 0, 1, 1, 1, 0, 1, 0, 1, 0, 1),
        (1, 0, 0, 0, 4, 0, 1, 0, 0, 0, 4, 0, 1, 0, 1),
        (1, 0, 1, 1, 1, 1, 1, 0, 1, 1, 1, 1, 1, 0, 1),
        (1, 0, 0, 0, 0, 0, 4, 0, 1, 0, 0, 0, 0, 0, 1),
        (1, 1, 1, 1, 1, 0, 1, 1, 1, 0, 1, 1, 1, 4, 1),
        (1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 2, 1),
        (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    ),
}


def available_levels() -> list[str]:
    """Level ID'lerini sırasıyla döndürür (level_1, level_2, ...)."""
    return sorted(_LEVELS, key=_extract_level_number)


def get_grid(level_id: str) -> list[list[int]]:
    """
    Level ızgarasının yeni bir kopyasını döndürür.

    Raises:
        KeyError: Level bulunamadıysa
    """
    try:
        rows = _LEVELS[level_id]
    except KeyError:
        raise KeyError(f"Level '{level_id}' bulunamadı") from None
    return [list(row) for row in rows]


def _extract_level_number(level_id: str) -> int:
    """level_X formatından X numarasını çıkarır"""
    try:
        return int(level_id.split("_")[-1])
    except (ValueError, IndexError):
        return 999
