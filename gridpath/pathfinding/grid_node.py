# gridpath/pathfinding/grid_node.py
import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union


class _Blocked:
    """Sentinel stored in the cell lookup for impassable cells."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "BLOCKED"


BLOCKED = _Blocked()


@dataclass(eq=False)
class GridNode:
    """
    Search state of a single traversable cell.

    Nodes are only created by ``PathFinder.load_map`` and live as long as the
    map they were loaded from. ``parent`` holds the index of the predecessor in
    the owning finder's ``nodes`` list, ``None`` for the start node.
    """
    x: int
    y: int
    idx: int
    g: float = 0.0  # Cost from start along the best known path
    h: float = 0.0  # Weighted straight-line distance to the destination
    parent: Optional[int] = None
    is_open: bool = False
    is_closed: bool = False
    in_path: bool = False

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def F(self) -> int:
        """Combined score ``g + h`` rounded half up."""
        return int(math.floor(self.g + self.h + 0.5))

    def open(self):
        """Add the node to the open set."""
        self.is_open = True
        self.is_closed = False

    def close(self):
        """Move the node to the closed set."""
        self.is_open = False
        self.is_closed = True

    def relax(self, g: float, parent: Optional[int]):
        """Record a better route: cost and predecessor always change together."""
        self.g = g
        self.parent = parent

    def distance_to(self, other: "GridNode") -> float:
        """Straight-line distance between the two cells."""
        dx = abs(self.x - other.x)
        dy = abs(self.y - other.y)
        return math.sqrt(dx * dx + dy * dy)


Cell = Union[GridNode, _Blocked]
