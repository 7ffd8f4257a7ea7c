import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest


@pytest.fixture
def pygame_display():
    pygame.display.init()
    yield
    pygame.quit()


@pytest.fixture
def maze_grid():
    return [
        [1, 1, 1, 1, 1],
        [1, 2, 0, 4, 1],
        [1, 0, 1, 3, 1],
        [1, 1, 1, 1, 1],
    ]
