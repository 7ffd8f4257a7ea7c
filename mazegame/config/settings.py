"""
Oyun ayarları: ortam değişkenlerinden okunur.
"""
from __future__ import annotations

import os

TILE_SIZE = int(os.getenv("MAZE_TILE_SIZE", "32"))

WINDOW_WIDTH = int(os.getenv("MAZE_WINDOW_WIDTH", "960"))
WINDOW_HEIGHT = int(os.getenv("MAZE_WINDOW_HEIGHT", "640"))
FPS = int(os.getenv("MAZE_FPS", "60"))

# Başlangıçta açılacak level
START_LEVEL = os.getenv("MAZE_LEVEL", "level_1")

LOG_LEVEL = os.getenv("MAZE_LOG_LEVEL", "INFO")
