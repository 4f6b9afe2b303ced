from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

SIDES = ("top", "right", "bottom", "left")
OPPOSITE = {"top": "bottom", "right": "left", "bottom": "top", "left": "right"}
# (dx, dy) per side; row 0 is the top, col 0 is the left.
OFFSETS = {"top": (0, -1), "right": (1, 0), "bottom": (0, 1), "left": (-1, 0)}
# Bit per side for compact exports (TSV, debugging).
WALL_BITS = {"top": 1, "right": 2, "bottom": 4, "left": 8}

XY = Tuple[int, int]


def _all_walls() -> Dict[str, bool]:
    return {side: True for side in SIDES}


@dataclass
class Cell:
    visited: bool = False
    walls: Dict[str, bool] = field(default_factory=_all_walls)

    def mask(self) -> int:
        return sum(bit for side, bit in WALL_BITS.items() if self.walls[side])


@dataclass
class Grid:
    cols: int
    rows: int
    cells: List[List[Cell]]  # cells[y][x]

    @classmethod
    def empty(cls, cols: int, rows: int) -> "Grid":
        # Every cell starts closed on all four sides and unvisited.
        cells = [[Cell() for _ in range(cols)] for _ in range(rows)]
        return cls(cols=cols, rows=rows, cells=cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.cols}x{self.rows} grid")
        return self.cells[y][x]

    def open_wall(self, x: int, y: int, side: str) -> None:
        """Clear a single wall flag, e.g. a boundary opening."""
        walls = self.cell(x, y).walls
        if side not in walls:
            raise KeyError(side)
        walls[side] = False

    def remove_wall_between(self, x: int, y: int, side: str) -> XY:
        """
        Open the wall between (x, y) and its neighbour on `side`.
        Both copies of the shared wall are cleared; returns the neighbour.
        """
        dx, dy = OFFSETS[side]
        nx, ny = x + dx, y + dy
        here, there = self.cell(x, y), self.cell(nx, ny)
        here.walls[side] = False
        there.walls[OPPOSITE[side]] = False
        return nx, ny

    def open_adjacencies(self) -> int:
        # Only right/bottom so each interior edge is counted once.
        n = 0
        for y in range(self.rows):
            for x in range(self.cols):
                w = self.cells[y][x].walls
                if x < self.cols - 1 and not w["right"]:
                    n += 1
                if y < self.rows - 1 and not w["bottom"]:
                    n += 1
        return n

    def reachable_from(self, x: int = 0, y: int = 0) -> Set[XY]:
        seen = {(x, y)}
        queue = deque([(x, y)])
        while queue:
            cx, cy = queue.popleft()
            walls = self.cells[cy][cx].walls
            for side, (dx, dy) in OFFSETS.items():
                nx, ny = cx + dx, cy + dy
                if walls[side] or not self.in_bounds(nx, ny) or (nx, ny) in seen:
                    continue
                seen.add((nx, ny))
                queue.append((nx, ny))
        return seen

    def as_mask_matrix(self) -> List[List[int]]:
        return [[c.mask() for c in row] for row in self.cells]


def create_grid(cols: int, rows: int) -> Grid:
    for name, v in (("cols", cols), ("rows", rows)):
        if isinstance(v, bool) or not isinstance(v, int) or v <= 0:
            raise ValueError(f"{name} must be a positive integer, got {v!r}")
    return Grid.empty(cols, rows)
