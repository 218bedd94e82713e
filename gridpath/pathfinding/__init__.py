# gridpath/pathfinding/__init__.py
from .astar_pathfinder import PathFinder, PathfindingResult
from .errors import ConfigurationError, InvalidCoordinateError, PathfindingError
from .grid_node import BLOCKED, GridNode

__all__ = [
    'PathFinder',
    'PathfindingResult',
    'GridNode',
    'BLOCKED',
    'PathfindingError',
    'ConfigurationError',
    'InvalidCoordinateError',
]
