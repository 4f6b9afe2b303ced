# src/mazewidget/mapgen/generator.py
# Canonical maze generator: fresh grid per call, never mutated afterwards.

import logging

from ..config import MazeOptions
from ..grid import Grid
from .carve import carve_maze

logger = logging.getLogger(__name__)


def generate_grid(options: MazeOptions) -> Grid:
    args = options.carve_args()
    grid = carve_maze(**args)
    logger.debug(f"Carved {options.cols}x{options.rows} maze (seed={options.seed})")
    return grid
