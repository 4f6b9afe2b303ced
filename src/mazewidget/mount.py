# src/mazewidget/mount.py
# Mount points: where a widget measures itself, hears about resizes and
# places its surface. The widget only talks to the Mount interface.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple, Union

from .errors import MountNotFoundError
from .render.surface import Surface

logger = logging.getLogger(__name__)

ResizeCallback = Callable[[], None]
Unsubscribe = Callable[[], None]


class Mount:
    def size(self) -> Tuple[float, float]:
        raise NotImplementedError

    def device_pixel_ratio(self) -> float:
        return 1.0

    def subscribe_resize(self, callback: ResizeCallback) -> Unsubscribe:
        raise NotImplementedError

    def attach(self, surface: Surface, offset: Tuple[int, int] = (0, 0)) -> None:
        raise NotImplementedError

    def detach(self, surface: Surface) -> None:
        raise NotImplementedError


class _Listeners:
    """Shared subscribe/notify bookkeeping."""

    def __init__(self) -> None:
        self._callbacks: List[ResizeCallback] = []

    def subscribe(self, callback: ResizeCallback) -> Unsubscribe:
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)
        return unsubscribe

    def notify(self) -> None:
        for cb in list(self._callbacks):
            cb()

    def __len__(self) -> int:
        return len(self._callbacks)


@dataclass
class StaticMount(Mount):
    """
    Headless mount with a fixed box. resize() updates the box and notifies
    subscribers synchronously, like a resize observer would.
    """
    width: float = 0.0
    height: float = 0.0
    dpr: float = 1.0
    attached: Dict[int, Tuple[Surface, Tuple[int, int]]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self._listeners = _Listeners()

    def size(self) -> Tuple[float, float]:
        return self.width, self.height

    def device_pixel_ratio(self) -> float:
        return self.dpr

    def subscribe_resize(self, callback: ResizeCallback) -> Unsubscribe:
        return self._listeners.subscribe(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    def resize(self, width: float, height: Optional[float] = None) -> None:
        self.width = width
        self.height = width if height is None else height
        self._listeners.notify()

    def attach(self, surface: Surface, offset: Tuple[int, int] = (0, 0)) -> None:
        self.attached[id(surface)] = (surface, offset)

    def detach(self, surface: Surface) -> None:
        self.attached.pop(id(surface), None)


class PygameWindowMount(Mount):
    """
    Resizable pygame window. pump() drains the event queue, dispatching
    window resizes to subscribers; present() blits attached surfaces.
    """
    def __init__(self, width: int = 480, height: int = 480, caption: str = "Maze", dpr: float = 1.0, bg=(24, 24, 24)):
        import pygame  # local import: headless users never need a window
        self._pg = pygame
        pygame.init()
        pygame.display.set_caption(caption)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.dpr = dpr
        self.bg = bg
        self._listeners = _Listeners()
        self._attached: Dict[int, Tuple[Surface, Tuple[int, int]]] = {}

    def size(self) -> Tuple[float, float]:
        w, h = self.screen.get_size()
        return float(w), float(h)

    def device_pixel_ratio(self) -> float:
        return self.dpr

    def subscribe_resize(self, callback: ResizeCallback) -> Unsubscribe:
        return self._listeners.subscribe(callback)

    def attach(self, surface: Surface, offset: Tuple[int, int] = (0, 0)) -> None:
        self._attached[id(surface)] = (surface, offset)

    def detach(self, surface: Surface) -> None:
        self._attached.pop(id(surface), None)

    def pump(self) -> List:
        """Handle resize events; return the remaining events for the caller."""
        pg = self._pg
        rest = []
        resized = False
        for ev in pg.event.get():
            if ev.type == pg.VIDEORESIZE:
                self.screen = pg.display.set_mode((ev.w, ev.h), pg.RESIZABLE)
                resized = True
            elif ev.type == getattr(pg, "WINDOWSIZECHANGED", None):
                resized = True
            else:
                rest.append(ev)
        if resized:
            logger.debug(f"Window resized to {self.screen.get_size()}")
            self._listeners.notify()
        return rest

    def present(self) -> None:
        pg = self._pg
        self.screen.fill(self.bg)
        for surface, offset in self._attached.values():
            image = getattr(surface, "image", None)
            if image is None or not surface.logical_size:
                continue
            if surface.scale != 1:
                # Window space is logical; downsample the backing store.
                n = surface.logical_size
                image = pg.transform.smoothscale(image, (n, n))
            self.screen.blit(image, offset)
        pg.display.flip()

    def close(self) -> None:
        self._pg.quit()


# Name -> Mount lookup, the analogue of resolving a selector.
_REGISTRY: Dict[str, Mount] = {}


def register_mount(name: str, mount: Mount) -> None:
    if name in _REGISTRY:
        logger.warning(f"Mount '{name}' is already registered. Overwriting.")
    _REGISTRY[name] = mount


def unregister_mount(name: str) -> None:
    _REGISTRY.pop(name, None)


def resolve_mount(mount: Union[str, Mount, None]) -> Mount:
    found = _REGISTRY.get(mount) if isinstance(mount, str) else mount
    if found is None:
        raise MountNotFoundError("create_maze_widget: mount element not found.")
    return found
