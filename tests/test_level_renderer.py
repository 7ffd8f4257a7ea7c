import pygame

from mazegame.model.level import Level
from mazegame.view.level_renderer import LevelRenderer, TilePalette

WALL = (30, 50, 60)
GOAL = (255, 235, 50)
OBSTACLE = (255, 140, 0)
FLOOR = (232, 232, 232)


def _rgb(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def test_color_for_codes():
    renderer = LevelRenderer()
    assert renderer.color_for(0) == FLOOR
    assert renderer.color_for(1) == WALL
    assert renderer.color_for(2) == FLOOR
    assert renderer.color_for(3) == GOAL
    assert renderer.color_for(4) == OBSTACLE
    assert renderer.color_for(9) == FLOOR


def test_draw_fills_each_tile(maze_grid):
    level = Level(maze_grid, 10)
    surface = pygame.Surface((level.pixel_width(), level.pixel_height()))
    level.draw(surface)

    assert _rgb(surface, 0, 0) == WALL
    # start tile'ı floor olarak çizilir
    assert _rgb(surface, 15, 15) == FLOOR
    assert _rgb(surface, 35, 15) == OBSTACLE
    assert _rgb(surface, 35, 25) == GOAL
    assert _rgb(surface, 49, 39) == WALL


def test_draw_with_offset(maze_grid):
    level = Level(maze_grid, 10)
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    level.draw(surface, offset=(20, 30))

    assert _rgb(surface, 19, 29) == (0, 0, 0)
    assert _rgb(surface, 20, 30) == WALL
    assert _rgb(surface, 20 + 35, 30 + 25) == GOAL
    assert _rgb(surface, 70, 70) == (0, 0, 0)


def test_custom_palette(maze_grid):
    palette = TilePalette(wall=(1, 2, 3))
    level = Level(maze_grid, 4)
    surface = pygame.Surface((level.pixel_width(), level.pixel_height()))
    level.draw(surface, renderer=LevelRenderer(palette))
    assert _rgb(surface, 0, 0) == (1, 2, 3)
    assert _rgb(surface, 5, 5) == FLOOR
