# gridpath/pathfinding/astar_pathfinder.py
import heapq
import logging
import time
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from dataclasses import dataclass, field

from config.schemas import BoardLegend, PathFinderConfig
from config.settings import DEFAULT_G_WEIGHT, DEFAULT_H_WEIGHT
from gridpath.pathfinding.errors import ConfigurationError, InvalidCoordinateError
from gridpath.pathfinding.grid_node import BLOCKED, Cell, GridNode
from gridpath.utils.logger_config import get_search_logger

logger = logging.getLogger(__name__)

NO_PATH = "No path found"
BUDGET_EXHAUSTED = "Loop budget exhausted"


@dataclass
class PathfindingResult:
    """Result of a single search."""
    success: bool
    path: List[Tuple[int, int]] = field(default_factory=list)  # Destination first
    path_cost: float = 0.0
    loops: int = 0
    nodes_explored: int = 0
    computation_time: float = 0.0
    failure_reason: Optional[str] = None

    @property
    def route(self) -> List[Tuple[int, int]]:
        """The path in start-to-destination order."""
        return list(reversed(self.path))


class PathFinder:
    """
    A* search over an 8-connected grid with a Euclidean heuristic.

    Usage:
        finder = PathFinder(10, 10)
        finder.load_map(rows)          # rows[y][x], truthy = traversable
        finder.set_start(0, 0)
        finder.set_destination(9, 9)
        path = finder.find_path()      # GridNodes, destination first

    The finder keeps its search state on the nodes themselves, so a map has to
    be reloaded for a clean search after start or destination change. An
    instance must only be used by one caller at a time; the loop budget is the
    only way to bound a long search.
    """

    def __init__(self, width: int, height: int,
                 g_weight: float = DEFAULT_G_WEIGHT,
                 h_weight: float = DEFAULT_H_WEIGHT,
                 use_priority_queue: bool = False):
        if not isinstance(width, int) or not isinstance(height, int) or width <= 0 or height <= 0:
            raise ConfigurationError(f"Grid dimensions must be positive integers, got {width}x{height}")

        self.width = width
        self.height = height

        # Fixed for the lifetime of the finder
        self.g_weight = g_weight
        self.h_weight = h_weight
        self.use_priority_queue = use_priority_queue

        # Grid state, replaced wholesale by load_map
        self.nodes: List[GridNode] = []
        self.cells: Dict[Tuple[int, int], Cell] = {}

        self.start: Optional[Tuple[int, int]] = None
        self.destination: Optional[Tuple[int, int]] = None

        # Per-search state
        self.max_loops: Optional[int] = None
        self.loop_count = 0
        self.nodes_closed = 0  # Closed by the latest search only
        self.budget_exhausted = False
        self._open_heap: List[Tuple[int, float, int]] = []

        # Statistics
        self.total_searches = 0
        self.successful_searches = 0

        self._search_logger = get_search_logger(self)

    @classmethod
    def from_config(cls, width: int, height: int, config: PathFinderConfig) -> "PathFinder":
        """Build a finder with the weights and selection strategy of `config`."""
        return cls(width, height,
                   g_weight=config.g_weight,
                   h_weight=config.h_weight,
                   use_priority_queue=config.use_priority_queue)

    def load_map(self, traversability: Iterable[Sequence]) -> bool:
        """
        Load the map from rows indexed [y][x]. Truthy values are traversable,
        falsy values (False, 0, None) are walls. Origin is the top left.
        """
        rows = list(traversability)
        if len(rows) != self.height:
            raise ConfigurationError(f"Map has {len(rows)} rows, expected {self.height}")

        nodes: List[GridNode] = []
        cells: Dict[Tuple[int, int], Cell] = {}
        for y, row in enumerate(rows):
            row = list(row)
            if len(row) != self.width:
                raise ConfigurationError(f"Map row {y} has {len(row)} cells, expected {self.width}")
            for x, traversable in enumerate(row):
                if traversable:
                    node = GridNode(x=x, y=y, idx=len(nodes))
                    nodes.append(node)
                    cells[(x, y)] = node
                else:
                    cells[(x, y)] = BLOCKED

        self.nodes = nodes
        self.cells = cells
        self.loop_count = 0
        self.nodes_closed = 0
        self.budget_exhausted = False
        self._open_heap = []

        logger.debug(f"Loaded {self.width}x{self.height} map with {len(nodes)} traversable cells")
        return True

    def set_start(self, x: int, y: int):
        """Set the start position on the map."""
        self._validate_coordinate(x, y, "start")
        self.start = (x, y)

    def set_destination(self, x: int, y: int):
        """Set the destination position on the map."""
        self._validate_coordinate(x, y, "destination")
        self.destination = (x, y)

    def _validate_coordinate(self, x: int, y: int, role: str):
        if isinstance(x, bool) or isinstance(y, bool) or not isinstance(x, int) or not isinstance(y, int):
            raise InvalidCoordinateError(x, y, f"{role} coordinates must be integers")
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise InvalidCoordinateError(x, y, f"{role} is outside the {self.width}x{self.height} grid")
        # Blocked cells can only be detected once a map is loaded
        if self.cells and self.cells[(x, y)] is BLOCKED:
            raise InvalidCoordinateError(x, y, f"{role} cell is blocked")

    def _node_at(self, position: Optional[Tuple[int, int]], role: str) -> GridNode:
        if position is None:
            raise ConfigurationError(f"The {role} has not been set")
        if not self.cells:
            raise ConfigurationError("No map loaded, call load_map() first")
        cell = self.cells.get(position, BLOCKED)
        if cell is BLOCKED:
            raise InvalidCoordinateError(position[0], position[1], f"{role} cell is blocked in the loaded map")
        return cell

    def find_path(self, max_loops: Optional[int] = None) -> List[GridNode]:
        """
        Run the A* search from start to destination.

        Args:
            max_loops: Maximum number of loop iterations, None for no limit.
                The first iteration always runs.

        Returns:
            The path nodes from destination to start, or an empty list if the
            destination is unreachable or the loop budget ran out.
        """
        if max_loops is not None and max_loops < 0:
            raise ValueError(f"max_loops must be >= 0 or None, got {max_loops}")

        start_node = self._node_at(self.start, "start")
        dest_node = self._node_at(self.destination, "destination")

        self.max_loops = max_loops
        self.loop_count = 0
        self.nodes_closed = 0
        self.budget_exhausted = False
        self.total_searches += 1

        logger.debug(f"Searching path from {self.start} to {self.destination} (max_loops={max_loops})")

        start_node.open()
        start_node.h = self.h_weight * start_node.distance_to(dest_node)
        start_node.relax(0, None)

        # Deliberately a one-node path: expanding the start would close the
        # destination, which could then never be selected and the search would
        # return []
        if start_node is dest_node:
            self.successful_searches += 1
            return self._build_path(start_node)

        if self.use_priority_queue:
            self._open_heap = [(node.F, node.h, -node.idx) for node in self.nodes if node.is_open]
            heapq.heapify(self._open_heap)

        current = start_node
        while True:
            for neighbour in self.neighbours_of(current):
                tentative_g = current.g + current.distance_to(neighbour) * self.g_weight
                if neighbour.is_open:
                    if tentative_g < neighbour.g:
                        neighbour.relax(tentative_g, current.idx)
                        self._push_open(neighbour)
                else:
                    neighbour.open()
                    # h is set once, when the node is first opened
                    neighbour.h = neighbour.distance_to(dest_node) * self.h_weight
                    neighbour.relax(tentative_g, current.idx)
                    self._push_open(neighbour)

            current.close()
            self.nodes_closed += 1
            current = self._lowest_f_open_node()

            if current is dest_node:
                path = self._build_path(current)
                self.successful_searches += 1
                logger.debug(f"Path of {len(path)} nodes found after {self.loop_count} loops, cost {dest_node.g:.2f}")
                return path

            self.loop_count += 1
            if current is None:
                break
            self._search_logger.debug(f"next node {current.position} F={current.F} h={current.h:.2f}")
            if self.max_loops is not None and self.loop_count >= self.max_loops:
                self.budget_exhausted = True
                break

        if self.budget_exhausted:
            logger.debug(f"Search stopped after {self.loop_count} loops, budget of {self.max_loops} exhausted")
        else:
            logger.debug(f"No path from {self.start} to {self.destination}, open set exhausted")
        return []

    def search(self, max_loops: Optional[int] = None) -> PathfindingResult:
        """Run find_path() and summarise the outcome."""
        start_time = time.time()
        path = self.find_path(max_loops)
        computation_time = time.time() - start_time

        nodes_explored = self.nodes_closed
        if not path:
            return PathfindingResult(
                success=False,
                loops=self.loop_count,
                nodes_explored=nodes_explored,
                computation_time=computation_time,
                failure_reason=BUDGET_EXHAUSTED if self.budget_exhausted else NO_PATH
            )

        return PathfindingResult(
            success=True,
            path=[node.position for node in path],
            path_cost=path[0].g,
            loops=self.loop_count,
            nodes_explored=nodes_explored,
            computation_time=computation_time
        )

    def _build_path(self, dest_node: GridNode) -> List[GridNode]:
        # Walk back until the start node, which has no parent
        path = []
        current = dest_node
        while current.parent is not None:
            path.append(current)
            current.in_path = True
            current = self.nodes[current.parent]
        path.append(current)
        current.in_path = True
        return path

    def _push_open(self, node: GridNode):
        if self.use_priority_queue:
            heapq.heappush(self._open_heap, (node.F, node.h, -node.idx))

    def _lowest_f_open_node(self) -> Optional[GridNode]:
        """
        Get the open node with the lowest F value. On equal F the lower h wins,
        and on equal F and h the node loaded last wins.
        """
        if self.use_priority_queue:
            # Lazy deletion: entries of closed nodes or outdated F are dropped here
            while self._open_heap:
                f_score, _, neg_idx = self._open_heap[0]
                node = self.nodes[-neg_idx]
                if node.is_open and node.F == f_score:
                    return node
                heapq.heappop(self._open_heap)
            return None

        lowest = None
        for node in self.nodes:
            if not node.is_open:
                continue
            if lowest is None or node.F < lowest.F:
                lowest = node
            elif node.F == lowest.F and node.h <= lowest.h:
                lowest = node
        return lowest

    def neighbours_of(self, node: GridNode) -> List[GridNode]:
        """The open or unexplored nodes in the 3x3 block around `node`."""
        neighbours = []
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                # Out-of-range positions are not in the lookup
                cell = self.cells.get((node.x + dx, node.y + dy), BLOCKED)
                if cell is BLOCKED or cell.is_closed:
                    continue
                neighbours.append(cell)
        return neighbours

    def get_statistics(self) -> Dict:
        """Get search statistics."""
        success_rate = (self.successful_searches / self.total_searches * 100) if self.total_searches > 0 else 0

        return {
            'total_searches': self.total_searches,
            'successful_searches': self.successful_searches,
            'success_rate': success_rate,
            'grid_size': f"{self.width}x{self.height}",
            'traversable_cells': len(self.nodes),
            'blocked_cells': len(self.cells) - len(self.nodes),
            'g_weight': self.g_weight,
            'h_weight': self.h_weight,
        }

    def visualize_grid(self, path: Optional[Iterable] = None,
                       legend: Optional[BoardLegend] = None) -> str:
        """Render the loaded map as text, marking `path` (nodes or (x, y) pairs)."""
        if not self.cells:
            raise ConfigurationError("No map loaded, call load_map() first")

        legend = legend or BoardLegend()
        on_path = {p.position if isinstance(p, GridNode) else tuple(p) for p in (path or [])}

        rows = []
        for y in range(self.height):
            row = ""
            for x in range(self.width):
                if (x, y) == self.start:
                    row += legend.start
                elif (x, y) == self.destination:
                    row += legend.destination
                elif (x, y) in on_path:
                    row += legend.path
                elif self.cells[(x, y)] is BLOCKED:
                    row += legend.blocked
                else:
                    row += legend.open
            rows.append(row)

        return "\n".join(rows)
