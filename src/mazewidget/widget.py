# src/mazewidget/widget.py
# MazeWidget: owns the options and the current grid, and drives carve/draw.
# Only regenerate() carves; every other trigger (resize, redraw(),
# set_options()) re-renders the grid it already has.

from __future__ import annotations

import logging
from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Union

from .config import DEFAULTS, MazeOptions
from .grid import Grid
from .mapgen.generator import generate_grid
from .mount import Mount, resolve_mount
from .render.geometry import FillOp, backing_scale, measure_square, render
from .render.surface import Surface

logger = logging.getLogger(__name__)

OptionsLike = Optional[Union[MazeOptions, Mapping[str, Any]]]


@dataclass
class WidgetState:
    # options/grid are private copies; surface/mount are the live objects.
    options: MazeOptions
    grid: Grid
    surface: Surface
    mount: Mount


def _merge(current: MazeOptions, options: OptionsLike) -> MazeOptions:
    if isinstance(options, MazeOptions):
        return options
    return current.merged(options)


def _default_surface() -> Surface:
    from .render.pygame_surface import PygameSurface
    return PygameSurface()


class MazeWidget:
    def __init__(
        self,
        mount: Union[str, Mount, None],
        options: OptionsLike = None,
        surface_factory: Callable[[], Surface] = _default_surface,
    ):
        # Resolve first: nothing is allocated if the mount is missing.
        self.mount = resolve_mount(mount)
        self.options = _merge(DEFAULTS, options)
        self.grid = generate_grid(self.options)
        self._destroyed = False
        self.last_ops: List[FillOp] = []

        self.surface = surface_factory()
        self.mount.attach(self.surface, self._offset())
        self._unsubscribe: Optional[Callable[[], None]] = self.mount.subscribe_resize(self._draw)
        self._draw()

    # ---------- internals ----------
    def _offset(self):
        p = int(self.options.padding)
        return (p, p)

    def _reattach(self) -> None:
        # Padding may have changed; the surface moves with it.
        if not self._destroyed:
            self.mount.attach(self.surface, self._offset())

    def _measure(self) -> int:
        w, h = self.mount.size()
        return measure_square(w, h, self.options.square_by, self.options.padding)

    def _draw(self) -> None:
        if self._destroyed:
            return
        size = self._measure()
        scale = backing_scale(self.mount.device_pixel_ratio())
        self.surface.resize(size, scale)
        o = self.options
        self.last_ops = render(self.surface, self.grid, o.cols, o.rows, size, o)
        logger.debug(f"Drew {o.cols}x{o.rows} maze at {size}px (x{scale})")

    # ---------- public API ----------
    def regenerate(self, options: OptionsLike = None) -> None:
        # Carve before committing, so a failed carve keeps the previous options.
        options = _merge(self.options, options)
        self.grid = generate_grid(options)
        self.options = options
        self._reattach()
        self._draw()

    def redraw(self) -> None:
        self._draw()

    def set_options(self, partial: OptionsLike = None) -> None:
        # Visual update only: the grid is not re-carved even if cols/rows/seed change.
        self.options = _merge(self.options, partial)
        self._reattach()
        self._draw()

    def destroy(self) -> None:
        if self._destroyed:
            return
        self._destroyed = True
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.mount.detach(self.surface)
        logger.debug("Maze widget destroyed")

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def get_state(self) -> WidgetState:
        return WidgetState(
            options=deepcopy(self.options),
            grid=deepcopy(self.grid),
            surface=self.surface,
            mount=self.mount,
        )


def create_maze_widget(
    mount: Union[str, Mount, None],
    options: OptionsLike = None,
    surface_factory: Callable[[], Surface] = _default_surface,
) -> MazeWidget:
    """
    Build a widget on `mount` (a Mount or a registered mount name) and draw it.

    Headless use:
        create_maze_widget(StaticMount(500, 500), {"cols": 10},
                           surface_factory=RecordingSurface)
    """
    return MazeWidget(mount, options, surface_factory=surface_factory)
