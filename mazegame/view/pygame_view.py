"""
Pygame tabanlı View katmanı: pencere, görüntüleme döngüsü ve sahne çizimi.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import pygame

from mazegame.config import settings

if TYPE_CHECKING:
    from mazegame.view.level_scene import LevelScene

logger = logging.getLogger(__name__)

ConfigColor = tuple[int, int, int]


@dataclass(frozen=True)
class ViewConfig:
    """Pygame penceresi için temel yapılandırma."""

    width: int = settings.WINDOW_WIDTH
    height: int = settings.WINDOW_HEIGHT
    fps: int = settings.FPS
    background_color: ConfigColor = (16, 20, 24)
    caption: str = "Maze"


class PygameView:
    """Pencereyi açar ve tek bir sahneyi döngü içinde çizer."""

    def __init__(self, config: ViewConfig) -> None:
        self._config = config
        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None

    def initialize(self) -> None:
        """Pygame'i başlatır ve ekranı hazırlar."""
        pygame.init()
        self._screen = pygame.display.set_mode((self._config.width, self._config.height))
        pygame.display.set_caption(self._config.caption)
        self._clock = pygame.time.Clock()
        logger.info(f"Window opened: {self._config.width}x{self._config.height}")

    def shutdown(self) -> None:
        """Pygame kaynaklarını temizler."""
        pygame.quit()

    def render(self, scene: LevelScene, run_seconds: Optional[float] = None) -> None:
        """
        View döngüsünü çalıştırır.

        :param scene: Her karede güncellenecek ve çizilecek sahne.
        :param run_seconds: İsteğe bağlı max süre (test/kontrol amacıyla).
        """
        if self._screen is None or self._clock is None:
            raise RuntimeError("View initialize() çağrılmadan render edilemez.")

        running = True
        elapsed = 0.0
        while running:
            delta = self._clock.tick(self._config.fps) / 1000.0
            elapsed += delta

            events = list(pygame.event.get())
            if any(event.type == pygame.QUIT for event in events):
                running = False

            scene.handle_events(events)
            scene.update(delta)

            self._screen.fill(self._config.background_color)
            scene.draw(self._screen)
            pygame.display.flip()

            if run_seconds and elapsed >= run_seconds:
                running = False
        logger.info(f"View loop stopped after {elapsed:.1f}s")
