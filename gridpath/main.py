#!/usr/bin/env python3
# gridpath/main.py

"""
Command-line entry point: compute a route across a text board.

Loads the board and the pathfinder configuration, runs the A* search and
prints the board with the route drawn on it.
"""

import argparse
import logging
import sys

from config.schemas import PathFinderConfig
from config.settings import LOG_LEVEL
from gridpath.board import load_board
from gridpath.pathfinding.errors import PathfindingError
from gridpath.utils.config_loader import DEFAULT_CONFIG_DIR, ConfigLoader
from gridpath.utils.logger_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="A* route finder for text boards")
    parser.add_argument("board", help="Path to the board file.")
    parser.add_argument(
        "--config-dir",
        default=str(DEFAULT_CONFIG_DIR),
        help="Directory holding pathfinder.yml."
    )
    parser.add_argument("--max-loops", type=int, help="Loop budget, overrides the config file.")
    parser.add_argument("--g-weight", type=float, help="Path cost weight, overrides the config file.")
    parser.add_argument("--h-weight", type=float, help="Heuristic weight, overrides the config file.")
    parser.add_argument(
        "--priority-queue",
        action="store_true",
        help="Select the next node with a heap instead of a full scan."
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level."
    )
    parser.add_argument("--log-dir", help="Write rotating log files to this directory.")
    return parser


def main(argv=None):
    """Main function."""
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), log_dir=args.log_dir)

    try:
        config = ConfigLoader(args.config_dir).load_pathfinder_config()
        overrides = {
            key: value for key, value in (
                ("max_loops", args.max_loops),
                ("g_weight", args.g_weight),
                ("h_weight", args.h_weight),
            ) if value is not None
        }
        if args.priority_queue:
            overrides["use_priority_queue"] = True
        if overrides:
            config = PathFinderConfig.model_validate({**config.model_dump(), **overrides})

        board = load_board(args.board, config.legend)
        finder = board.build_pathfinder(config)
        result = finder.search(config.max_loops)
    except (PathfindingError, FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to compute route: {e}")
        return EXIT_ERROR

    print(finder.visualize_grid(result.path, config.legend))
    if not result.success:
        logger.info(f"{result.failure_reason} after {result.loops} loops ({result.nodes_explored} nodes explored)")
        return EXIT_NO_PATH

    print(" -> ".join(f"({x}, {y})" for x, y in result.route))
    logger.info(f"Route of {len(result.path)} cells, cost {result.path_cost:.2f}, "
                f"{result.nodes_explored} nodes explored in {result.computation_time * 1000:.1f} ms")
    return EXIT_FOUND


if __name__ == "__main__":
    sys.exit(main())
