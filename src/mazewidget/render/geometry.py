# src/mazewidget/render/geometry.py
# Grid -> rectangle fills on a square surface.
# Only top/left walls are drawn per cell; the shared copy on the neighbour is
# skipped, so right/bottom are drawn only on the last column/row.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from ..config import MazeOptions
from ..grid import Grid
from .surface import Surface


@dataclass(frozen=True)
class FillOp:
    x: int
    y: int
    w: int
    h: int
    color: str

    def as_tuple(self):
        return (self.x, self.y, self.w, self.h, self.color)


def measure_square(width: float, height: float, square_by: str = "width", padding: int = 0) -> int:
    """
    Side of the drawing square for a container of width x height.
    "min" uses the smaller side, anything else the width.
    """
    # Inside the padding: the square excludes the inset on every side.
    w = max(0.0, width - 2 * padding)
    h = max(0.0, height - 2 * padding)
    if square_by == "min":
        return int(math.floor(min(w, h)))
    return int(math.floor(w))


def backing_scale(device_pixel_ratio) -> int:
    return max(1, int(math.floor(device_pixel_ratio or 1)))


def wall_thickness(cell: float, ratio: float) -> int:
    return max(1, math.ceil(cell * ratio))


def plan_fills(grid: Grid, cols: int, rows: int, size: int, options: MazeOptions) -> List[FillOp]:
    """
    Fill ops for one pass, background first.
    `cols`/`rows` are the configured dimensions; they may differ from the
    grid's after set_options(), in which case only cells present in both are
    visited and the cell size still follows `cols`.
    """
    ops = [FillOp(0, 0, size, size, options.bg_color)]
    if size <= 0 or cols <= 0 or rows <= 0:
        return ops

    cell = size / cols
    t = wall_thickness(cell, options.line_width_ratio)
    cell_size = math.ceil(cell)
    color = options.wall_color

    for y in range(min(rows, grid.rows)):
        for x in range(min(cols, grid.cols)):
            w = grid.cells[y][x].walls
            px = math.floor(x * cell)
            py = math.floor(y * cell)

            if w["top"]:
                ops.append(FillOp(px, py, cell_size, t, color))
            if w["left"]:
                ops.append(FillOp(px, py, t, cell_size, color))
            if x == cols - 1 and w["right"]:
                ops.append(FillOp(px + cell_size - t, py, t, cell_size, color))
            if y == rows - 1 and w["bottom"]:
                ops.append(FillOp(px, py + cell_size - t, cell_size, t, color))
    return ops


def render(surface: Surface, grid: Grid, cols: int, rows: int, size: int, options: MazeOptions) -> List[FillOp]:
    """Clear the surface and replay one full pass of fills. Returns the ops."""
    ops = plan_fills(grid, cols, rows, size, options)
    surface.clear()
    for op in ops:
        surface.fill_rect(op.x, op.y, op.w, op.h, op.color)
    return ops
