from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Optional, Union

from .errors import OptionsError


@dataclass(frozen=True)
class EntryExitPoint:
    # x = column, y = row; None means "use the default for this field".
    x: Optional[int] = None
    y: Optional[int] = None
    side: Optional[str] = None

    @classmethod
    def coerce(cls, value: Union["EntryExitPoint", Mapping[str, Any], None]) -> Optional["EntryExitPoint"]:
        if value is None or isinstance(value, EntryExitPoint):
            return value
        unknown = set(value) - {"x", "y", "side"}
        if unknown:
            raise OptionsError(f"unknown entry/exit keys: {sorted(unknown)}")
        return cls(x=value.get("x"), y=value.get("y"), side=value.get("side"))

    def resolved(self, x: int, y: int, side: str) -> "EntryExitPoint":
        """Fill each missing field from the given defaults, independently."""
        return EntryExitPoint(
            x=x if self.x is None else self.x,
            y=y if self.y is None else self.y,
            side=self.side or side,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "side": self.side}


DEFAULT_ENTRY = EntryExitPoint(0, 0, "top")
DEFAULT_EXIT = EntryExitPoint(None, None, "bottom")

# Accepted spellings from the browser-era option names.
ALIASES = {
    "wallColor": "wall_color",
    "bgColor": "bg_color",
    "lineWidthRatio": "line_width_ratio",
    "squareBy": "square_by",
}


@dataclass(frozen=True)
class MazeOptions:
    # Carving inputs
    cols: int = 5
    rows: int = 5
    seed: int = 983811
    entry: Optional[EntryExitPoint] = field(default=DEFAULT_ENTRY)
    exit: Optional[EntryExitPoint] = field(default=DEFAULT_EXIT)
    # Visual only
    wall_color: str = "#ffffff"
    bg_color: str = "#000000"
    line_width_ratio: float = 0.25
    square_by: str = "width"   # "width" or "min"
    padding: int = 0

    def merged(self, overrides: Optional[Mapping[str, Any]] = None, **kw: Any) -> "MazeOptions":
        """
        Shallow merge: each given key replaces the current value wholesale.
        An entry/exit override replaces the whole point, not single fields.
        """
        changes: Dict[str, Any] = {}
        valid = {f.name for f in fields(self)}
        for key, value in {**(overrides or {}), **kw}.items():
            name = ALIASES.get(key, key)
            if name not in valid:
                raise OptionsError(f"unknown option: {key!r}")
            if name in ("entry", "exit"):
                value = EntryExitPoint.coerce(value)
            changes[name] = value
        return replace(self, **changes) if changes else self

    def carve_args(self) -> Dict[str, Any]:
        return {
            "cols": self.cols,
            "rows": self.rows,
            "seed": self.seed,
            "entry": self.entry,
            "exit": self.exit,
        }


DEFAULTS = MazeOptions()
