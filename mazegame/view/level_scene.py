"""
Level sahnesi: tek bir Level'i pencerenin ortasına çizer ve doğma noktasını işaretler.
"""
from __future__ import annotations

import logging
from typing import Iterable

import pygame

from mazegame.model.level import Level
from mazegame.view.level_renderer import LevelRenderer

logger = logging.getLogger(__name__)

SPAWN_COLOR = (70, 130, 255)


class LevelScene:

    def __init__(self, level: Level, renderer: LevelRenderer | None = None) -> None:
        self._level = level
        self._renderer = renderer or LevelRenderer()

    @property
    def level(self) -> Level:
        return self._level

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logger.info("Escape pressed, closing window")
                pygame.event.post(pygame.event.Event(pygame.QUIT))

    def update(self, delta: float) -> None:
        # Hareket / oyun mantığı yok, level statik
        pass

    def offset_for(self, surface: pygame.Surface) -> tuple[int, int]:
        """Level'i yüzeyin ortasına yerleştiren sol üst köşe."""
        offset_x = (surface.get_width() - self._level.pixel_width()) // 2
        offset_y = (surface.get_height() - self._level.pixel_height()) // 2
        return offset_x, offset_y

    def draw(self, surface: pygame.Surface) -> None:
        offset_x, offset_y = self.offset_for(surface)
        self._level.draw(surface, offset=(offset_x, offset_y), renderer=self._renderer)

        start = self._level.start
        if start is None:
            return
        ts = self._level.ts
        spawn_rect = pygame.Rect(offset_x + start.col * ts, offset_y + start.row * ts, ts, ts)
        pygame.draw.circle(surface, SPAWN_COLOR, spawn_rect.center, max(ts // 3, 1))
