# src/mazewidget/render/surface.py
# Drawing-surface capability used by the geometry renderer.
# Callers draw in logical units; `scale` only affects the backing resolution.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


class Surface:
    """
    Minimal rectangle-fill surface:
      - resize(logical_size, scale): reallocate backing store (size*scale square)
      - clear(): wipe to transparent
      - fill_rect(x, y, w, h, color): logical coordinates, color as "#rrggbb"
    """
    logical_size: int = 0
    scale: int = 1

    def resize(self, logical_size: int, scale: int = 1) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def fill_rect(self, x: int, y: int, w: int, h: int, color: str) -> None:
        raise NotImplementedError

    @property
    def backing_size(self) -> Tuple[int, int]:
        n = self.logical_size * self.scale
        return n, n


@dataclass
class RecordingSurface(Surface):
    """Headless surface: keeps the ops of the last pass instead of pixels."""
    logical_size: int = 0
    scale: int = 1
    ops: List[Tuple] = field(default_factory=list)
    passes: int = 0

    def resize(self, logical_size: int, scale: int = 1) -> None:
        self.logical_size = logical_size
        self.scale = scale
        self.ops = []
        self.passes += 1

    def clear(self) -> None:
        self.ops.append(("clear",))

    def fill_rect(self, x: int, y: int, w: int, h: int, color: str) -> None:
        self.ops.append(("fill", x, y, w, h, color))

    def fills(self) -> List[Tuple[int, int, int, int, str]]:
        return [op[1:] for op in self.ops if op[0] == "fill"]
