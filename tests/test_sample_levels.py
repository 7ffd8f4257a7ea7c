import pytest

from mazegame.data.sample_levels import available_levels, get_grid
from mazegame.model.level import Level


def test_available_levels_sorted():
    assert available_levels() == ["level_1", "level_2", "level_3"]


@pytest.mark.parametrize("level_id", ["level_1", "level_2", "level_3"])
def test_every_sample_has_start_and_goal(level_id):
    level = Level(get_grid(level_id), 8)
    assert level.start is not None
    goals = [
        (r, c)
        for r in range(level.rows())
        for c in range(level.cols())
        if level.is_goal(r, c)
    ]
    assert len(goals) == 1


def test_get_grid_returns_copy():
    grid = get_grid("level_1")
    grid[0][0] = 0
    assert get_grid("level_1")[0][0] == 1


def test_unknown_level():
    with pytest.raises(KeyError):
        get_grid("level_42")
