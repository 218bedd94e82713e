# gridpath/pathfinding/errors.py


class PathfindingError(Exception):
    """Base class for errors raised by the pathfinding package."""


class ConfigurationError(PathfindingError, ValueError):
    """The finder, its grid or its configuration is malformed."""


class InvalidCoordinateError(PathfindingError, ValueError):
    """A start or destination cell is out of bounds or blocked."""

    def __init__(self, x, y, reason: str):
        self.x = x
        self.y = y
        self.reason = reason
        super().__init__(f"Invalid coordinate ({x}, {y}): {reason}")
