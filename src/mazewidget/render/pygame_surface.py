# src/mazewidget/render/pygame_surface.py
from __future__ import annotations

import pygame

from .surface import Surface


class PygameSurface(Surface):
    """
    pygame.Surface with per-pixel alpha. Works without an initialised display,
    so it is also usable headless (e.g. SDL_VIDEODRIVER=dummy).
    """
    def __init__(self, logical_size: int = 0, scale: int = 1):
        self.resize(logical_size, scale)

    def resize(self, logical_size: int, scale: int = 1) -> None:
        self.logical_size = logical_size
        self.scale = scale
        self.image = pygame.Surface(self.backing_size, pygame.SRCALPHA)

    def clear(self) -> None:
        self.image.fill((0, 0, 0, 0))

    def fill_rect(self, x: int, y: int, w: int, h: int, color: str) -> None:
        s = self.scale
        self.image.fill(pygame.Color(color), pygame.Rect(x * s, y * s, w * s, h * s))

    def get_at(self, x: int, y: int) -> pygame.Color:
        # Logical coordinates; samples the top-left backing pixel.
        return self.image.get_at((x * self.scale, y * self.scale))
