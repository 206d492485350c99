"""
Labyrinth grid model.

Holds the maze as mutable rows of characters and answers bounds and
cell-type queries for the path search.

Maze Format:
    S = Start position
    E = Finish (goal)
    # = Wall (impassable)
    _ = Empty cell
    * = Path marker (written by the solver, traversable)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

PATH_MARKER = "*"


class GridError(Exception):
    """Base exception for grids that cannot be loaded."""

    pass


class UnknownSymbolError(GridError):
    """Exception raised when a grid character is not a known symbol."""

    def __init__(self, char: str, cell: Optional["Cell"] = None):
        self.char = char
        self.cell = cell
        where = f" at ({cell.row}, {cell.col})" if cell is not None else ""
        super().__init__(
            f"Unknown symbol {char!r}{where}. "
            f"Valid symbols: {', '.join(sorted(SYMBOLS))}"
        )


class MalformedInputError(GridError):
    """Exception raised when the input cannot be used as a rectangular grid."""

    pass


class CellType(Enum):
    """Types of cells in the grid."""
    EMPTY = "_"
    WALL = "#"
    START = "S"
    FINISH = "E"
    PATH = "*"

    @classmethod
    def from_char(cls, char: str) -> "CellType":
        """Convert character to CellType."""
        try:
            return cls(char)
        except ValueError:
            raise UnknownSymbolError(char) from None


SYMBOLS = frozenset(cell_type.value for cell_type in CellType)


def classify_char(char: str) -> CellType:
    """Classify a single grid character."""
    return CellType.from_char(char)


class Direction(Enum):
    """Orthogonal movement directions, in search order."""
    EAST = "east"
    SOUTH = "south"
    WEST = "west"
    NORTH = "north"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (d_row, d_col) for this direction."""
        deltas = {
            Direction.EAST: (0, 1),
            Direction.SOUTH: (1, 0),
            Direction.WEST: (0, -1),
            Direction.NORTH: (-1, 0),
        }
        return deltas[self]


@dataclass(frozen=True)
class Cell:
    """(row, col) coordinate in the grid."""
    row: int
    col: int

    def move(self, direction: Direction) -> "Cell":
        """Return the neighbouring cell in direction."""
        d_row, d_col = direction.delta
        return Cell(self.row + d_row, self.col + d_col)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"row": self.row, "col": self.col}


class Grid:
    """
    Maze grid stored as rows of characters.

    Dimensions are fixed at load time. Cell contents change only through
    color(), which the path search uses to mark the shortest path.

    Example usage:
        grid = Grid.from_text("S__\\n_#_\\n__E")
        grid.cell_type(Cell(1, 1))  # CellType.WALL
        grid.serialize()            # ["S__", "_#_", "__E"]
    """

    def __init__(self, rows: Iterable[Iterable[str]]):
        # Own copy; color() mutates it in place
        self._cells = [list(row) for row in rows]
        self.rows: int = len(self._cells)
        self.cols: int = len(self._cells[0]) if self._cells else 0
        self.start: Optional[Cell] = None
        self.finish: Optional[Cell] = None
        self._scan()

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grid":
        """
        Build a grid from rows of text, top to bottom.

        Args:
            lines: One string per grid row.

        Returns:
            Grid with start and finish located.

        Raises:
            UnknownSymbolError: If a character is not one of ``_ # S E *``.
            MalformedInputError: If rows are not all the same length.
        """
        rows = []
        for line in lines:
            if not isinstance(line, str):
                raise MalformedInputError(
                    f"Grid rows must be strings, got {type(line).__name__}"
                )
            rows.append(line)
        return cls(rows)

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """
        Build a grid from newline-separated text.

        Rows are split on "\\n" only. One trailing "\\r" per row and a single
        trailing empty line are dropped; any other character is a cell.
        """
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return cls.from_lines(
            line[:-1] if line.endswith("\r") else line for line in lines
        )

    def _scan(self) -> None:
        """Validate every cell and locate start and finish."""
        for r, row in enumerate(self._cells):
            if len(row) != self.cols:
                raise MalformedInputError(
                    f"Row {r} has {len(row)} columns, expected {self.cols}"
                )
            for c, char in enumerate(row):
                if char not in SYMBOLS:
                    raise UnknownSymbolError(char, Cell(r, c))

                # Last occurrence wins for duplicates
                if char == CellType.START.value:
                    if self.start is not None:
                        logger.warning(
                            f"Multiple start cells: {self.start} replaced by ({r}, {c})"
                        )
                    self.start = Cell(r, c)
                elif char == CellType.FINISH.value:
                    if self.finish is not None:
                        logger.warning(
                            f"Multiple finish cells: {self.finish} replaced by ({r}, {c})"
                        )
                    self.finish = Cell(r, c)

        logger.debug(
            f"Loaded {self.rows}x{self.cols} grid, start={self.start}, finish={self.finish}"
        )

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether cell lies inside the grid."""
        return 0 <= cell.row < self.rows and 0 <= cell.col < self.cols

    def char_at(self, cell: Cell) -> str:
        """Get the character currently stored at cell."""
        return self._cells[cell.row][cell.col]

    def cell_type(self, cell: Cell) -> CellType:
        """Get cell type at cell. The caller checks bounds first."""
        return classify_char(self.char_at(cell))

    def color(self, cell: Cell, marker: str = PATH_MARKER) -> None:
        """Overwrite the character at cell with marker."""
        self._cells[cell.row][cell.col] = marker

    def count(self, cell_type: CellType) -> int:
        """Count cells of the given type."""
        return sum(row.count(cell_type.value) for row in self._cells)

    def serialize(self) -> list[str]:
        """Current grid state as one string per row."""
        return ["".join(row) for row in self._cells]

    def to_text(self) -> str:
        """Current grid state as newline-separated text."""
        return "\n".join(self.serialize())

    def to_dict(self) -> dict:
        """Get grid metadata."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "start": self.start.to_dict() if self.start else None,
            "finish": self.finish.to_dict() if self.finish else None,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"
