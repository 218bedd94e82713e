# gridpath/board.py
"""
Text boards: a game board drawn with one character per cell, parsed into the
traversability grid and the start and destination cells of a search.

    S..#
    .#.#
    ...D
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from config.schemas import BoardLegend, PathFinderConfig
from gridpath.pathfinding.astar_pathfinder import PathFinder
from gridpath.pathfinding.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class Board:
    width: int
    height: int
    traversability: List[List[bool]]  # [y][x]
    start: Tuple[int, int]
    destination: Tuple[int, int]

    def build_pathfinder(self, config: Optional[PathFinderConfig] = None) -> PathFinder:
        """A finder with this board loaded and start/destination set."""
        config = config or PathFinderConfig()
        finder = PathFinder.from_config(self.width, self.height, config)
        finder.load_map(self.traversability)
        finder.set_start(*self.start)
        finder.set_destination(*self.destination)
        return finder


def parse_board(text: str, legend: Optional[BoardLegend] = None) -> Board:
    """Parse a text board. Leading and trailing blank lines are ignored."""
    legend = legend or BoardLegend()

    lines = [line.rstrip("\r") for line in text.split("\n")]
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise ConfigurationError("Board is empty")

    width = len(lines[0])
    start = None
    destination = None
    traversability = []

    for y, line in enumerate(lines):
        if len(line) != width:
            raise ConfigurationError(f"Board row {y} has {len(line)} cells, expected {width}")

        row = []
        for x, char in enumerate(line):
            if char == legend.blocked:
                row.append(False)
                continue
            if char == legend.start:
                if start is not None:
                    raise ConfigurationError(f"Board has more than one start ({start} and {(x, y)})")
                start = (x, y)
            elif char == legend.destination:
                if destination is not None:
                    raise ConfigurationError(f"Board has more than one destination ({destination} and {(x, y)})")
                destination = (x, y)
            elif char != legend.open:
                raise ConfigurationError(f"Unknown board character {char!r} at ({x}, {y})")
            row.append(True)
        traversability.append(row)

    if start is None:
        raise ConfigurationError(f"Board has no start marker {legend.start!r}")
    if destination is None:
        raise ConfigurationError(f"Board has no destination marker {legend.destination!r}")

    logger.debug(f"Parsed {width}x{len(lines)} board, start {start}, destination {destination}")
    return Board(width=width, height=len(lines), traversability=traversability,
                 start=start, destination=destination)


def load_board(path, legend: Optional[BoardLegend] = None) -> Board:
    """Read and parse a board file."""
    board_file = Path(path)
    if not board_file.exists():
        raise FileNotFoundError(f"Board file not found: {board_file}")
    return parse_board(board_file.read_text(encoding='utf-8'), legend)
