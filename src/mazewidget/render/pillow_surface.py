# src/mazewidget/render/pillow_surface.py
# Pillow-backed surface for PNG export.

from __future__ import annotations

import os
from typing import Tuple

from PIL import Image, ImageColor, ImageDraw

from .surface import Surface


class PillowSurface(Surface):
    def __init__(self, logical_size: int = 0, scale: int = 1):
        self.resize(logical_size, scale)

    def resize(self, logical_size: int, scale: int = 1) -> None:
        self.logical_size = logical_size
        self.scale = scale
        self.image = Image.new("RGBA", self.backing_size, (0, 0, 0, 0))
        self._draw = ImageDraw.Draw(self.image)

    def clear(self) -> None:
        if self.logical_size:
            self.image.paste((0, 0, 0, 0), (0, 0) + self.image.size)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: str) -> None:
        if w <= 0 or h <= 0:
            return
        s = self.scale
        x0, y0 = x * s, y * s
        # ImageDraw boxes are inclusive on both ends.
        self._draw.rectangle((x0, y0, x0 + w * s - 1, y0 + h * s - 1), fill=ImageColor.getcolor(color, "RGBA"))

    def get_at(self, x: int, y: int) -> Tuple[int, ...]:
        return self.image.getpixel((x * self.scale, y * self.scale))

    def save(self, path: str) -> None:
        d = os.path.dirname(path)
        if d:
            os.makedirs(d, exist_ok=True)
        self.image.save(path)
