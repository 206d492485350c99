"""
Maze file I/O for the labyrinth solver.

Reads grids from line-oriented text files and writes annotated grids back.
"""

import logging
from pathlib import Path
from typing import Optional

from .grid import Grid, GridError, MalformedInputError

logger = logging.getLogger(__name__)


def load_maze_file(file_path: Path | str) -> Grid:
    """
    Load a grid from a maze file.

    Args:
        file_path: Path to the maze file.

    Returns:
        Grid parsed from the file contents.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        IsADirectoryError: If the path is a directory.
        OSError: If the file cannot be read.
        MalformedInputError: If the file is not UTF-8 text.
        UnknownSymbolError: If the file contains an unknown symbol.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Maze file not found: {file_path}")

    if file_path.is_dir():
        raise IsADirectoryError(f"Maze path is a directory: {file_path}")

    try:
        # newline="" keeps lone "\r" as a cell for the grid to reject
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            maze_text = f.read()
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"Maze file is not UTF-8 text: {e}") from e

    grid = Grid.from_text(maze_text)
    logger.info(f"Loaded maze {file_path} ({grid.rows}x{grid.cols})")
    return grid


def save_maze_file(grid: Grid, file_path: Path | str) -> None:
    """
    Write the current grid state to a file, one row per line.

    Raises:
        OSError: If the file cannot be written.
    """
    file_path = Path(file_path)
    text = "".join(f"{line}\n" for line in grid.serialize())
    file_path.write_text(text, encoding="utf-8")
    logger.info(f"Wrote maze {file_path}")


def validate_maze_text(maze_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Args:
        maze_text: Multi-line string representing the maze grid.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        Grid.from_text(maze_text)
        return True, None
    except GridError as e:
        return False, str(e)
