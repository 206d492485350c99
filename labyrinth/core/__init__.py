# Core module
from .grid import (
    PATH_MARKER,
    Cell,
    CellType,
    Direction,
    Grid,
    GridError,
    MalformedInputError,
    UnknownSymbolError,
    classify_char,
)
from .path_search import NO_PATH, PathSearch, SearchResult, SearchState, find_path
from .maze_io import load_maze_file, save_maze_file, validate_maze_text

__all__ = [
    "PATH_MARKER",
    "Cell",
    "CellType",
    "Direction",
    "Grid",
    "GridError",
    "MalformedInputError",
    "UnknownSymbolError",
    "classify_char",
    "NO_PATH",
    "PathSearch",
    "SearchResult",
    "SearchState",
    "find_path",
    "load_maze_file",
    "save_maze_file",
    "validate_maze_text",
]
