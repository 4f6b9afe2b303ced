# src/mazewidget/errors.py


class MazeWidgetError(Exception):
    """Base class for widget-level failures."""


class MountNotFoundError(MazeWidgetError):
    pass


class OptionsError(MazeWidgetError, ValueError):
    pass
