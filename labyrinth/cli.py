"""
Command-line maze solver.

Reads a maze file, marks the shortest path from S to E with '*' and writes
the grid back (to the same file unless --output is given).

Usage:
    labyrinth-solve maze.txt
    labyrinth-solve maze.txt --output solved.txt --log-level DEBUG
"""

import argparse
import logging
from pathlib import Path
from typing import Optional

from labyrinth.config import get_settings
from labyrinth.core import GridError, find_path, load_maze_file, save_maze_file

logger = logging.getLogger("labyrinth")

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_INVALID_GRID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="labyrinth-solve",
        description="Find and mark the shortest path through a character-grid maze.",
    )
    parser.add_argument("maze", type=Path, help="Path to the maze file")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Where to write the solved maze (default: overwrite the input file)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level (default: LOG_LEVEL setting)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level or get_settings().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        grid = load_maze_file(args.maze)
    except OSError as e:
        logger.error(str(e))
        print(f"Can't open {args.maze} for reading")
        return EXIT_IO_ERROR
    except GridError as e:
        logger.error(f"Invalid maze {args.maze}: {e}")
        print(f"Invalid maze: {e}")
        return EXIT_INVALID_GRID

    result = find_path(grid)

    output = args.output or args.maze
    try:
        save_maze_file(grid, output)
    except OSError as e:
        logger.error(f"Failed to write {output}: {e}")
        print(f"Can't open {output} for writing")
        return EXIT_IO_ERROR

    print(result.message)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
