# src/mazewidget/mapgen/carve.py
# Randomized depth-first backtracker over a wall-indexed grid.
# One RNG draw per step that has at least one unvisited neighbour; the
# neighbour order below is part of the output, changing it changes every maze.

from typing import List, Optional, Tuple

from ..config import EntryExitPoint, DEFAULT_ENTRY
from ..grid import Grid, OFFSETS, create_grid
from ..rng import LCGRandom

XY = Tuple[int, int]

# Neighbour probe order: top, right, bottom, left.
DIRS = ("top", "right", "bottom", "left")


def unvisited_neighbors(grid: Grid, x: int, y: int) -> List[Tuple[str, int, int]]:
    out = []
    for side in DIRS:
        dx, dy = OFFSETS[side]
        nx, ny = x + dx, y + dy
        if grid.in_bounds(nx, ny) and not grid.cells[ny][nx].visited:
            out.append((side, nx, ny))
    return out


def carve_tree(grid: Grid, rng: LCGRandom) -> Grid:
    """
    Carve a spanning tree into `grid` starting at (0, 0).
    Uses an explicit stack; the top is inspected, not popped, until it has
    no unvisited neighbours left.
    """
    stack: List[XY] = [(0, 0)]
    grid.cells[0][0].visited = True

    while stack:
        x, y = stack[-1]
        unv = unvisited_neighbors(grid, x, y)
        if unv:
            side, nx, ny = unv[rng.choice_index(len(unv))]
            grid.remove_wall_between(x, y, side)
            grid.cells[ny][nx].visited = True
            stack.append((nx, ny))
        else:
            stack.pop()
    return grid


def resolve_entry(entry: Optional[EntryExitPoint]) -> EntryExitPoint:
    return (entry or DEFAULT_ENTRY).resolved(0, 0, "top")


def resolve_exit(exit: Optional[EntryExitPoint], cols: int, rows: int) -> EntryExitPoint:
    if exit is None:
        return EntryExitPoint(cols - 1, rows - 1, "bottom")
    return exit.resolved(cols - 1, rows - 1, "bottom")


def open_entry_exit(
    grid: Grid,
    entry: Optional[EntryExitPoint] = None,
    exit: Optional[EntryExitPoint] = None,
) -> Tuple[EntryExitPoint, EntryExitPoint]:
    """
    Force the entry and exit walls open. No check that the side is on the
    boundary or that entry != exit; out-of-range cells raise IndexError.
    """
    ent = resolve_entry(EntryExitPoint.coerce(entry))
    ex = resolve_exit(EntryExitPoint.coerce(exit), grid.cols, grid.rows)
    grid.open_wall(ent.x, ent.y, ent.side)
    grid.open_wall(ex.x, ex.y, ex.side)
    return ent, ex


def carve_maze(
    cols: int,
    rows: int,
    seed: int,
    entry: Optional[EntryExitPoint] = None,
    exit: Optional[EntryExitPoint] = None,
) -> Grid:
    grid = create_grid(cols, rows)
    carve_tree(grid, LCGRandom(seed))
    open_entry_exit(grid, entry, exit)
    return grid
