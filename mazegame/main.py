"""
Labirenti açmak için basit bir giriş noktası.
"""
from __future__ import annotations

import logging

from mazegame.config import settings
from mazegame.data.sample_levels import get_grid
from mazegame.model.level import Level
from mazegame.view.level_scene import LevelScene
from mazegame.view.pygame_view import PygameView, ViewConfig

logger = logging.getLogger(__name__)


def build_level(level_id: str = settings.START_LEVEL, tile_size: int = settings.TILE_SIZE) -> Level:
    """Hazır ızgaralardan bir Level oluşturur."""
    level = Level(get_grid(level_id), tile_size)
    logger.info(f"Loaded {level_id}: {level.rows()}x{level.cols()} tiles, start={level.start}")
    return level


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    scene = LevelScene(build_level())
    view = PygameView(ViewConfig())
    view.initialize()
    try:
        view.render(scene)
    finally:
        view.shutdown()


if __name__ == "__main__":
    main()
