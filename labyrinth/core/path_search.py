"""
Shortest-path search over a labyrinth grid.

Breadth-first search from the start cell with 4-directional moves. When the
finish is reached the path is traced back through the parent matrix and
marked on the grid with the path marker. Start and finish keep their symbols.
"""

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .grid import PATH_MARKER, Cell, CellType, Direction, Grid

logger = logging.getLogger(__name__)

WALL = CellType.WALL.value
NEIGHBOUR_OFFSETS = tuple(direction.delta for direction in Direction)


class SearchState(Enum):
    """Lifecycle of a single search run."""
    NOT_STARTED = "not_started"
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a search run."""
    found: bool
    length: Optional[int] = None
    path: tuple[Cell, ...] = ()

    @property
    def message(self) -> str:
        """Human-readable summary."""
        if self.found:
            return f"Path found! Length: {self.length}"
        return "There is no path from start to finish"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "found": self.found,
            "length": self.length,
            "path": [cell.to_dict() for cell in self.path],
        }


NO_PATH = SearchResult(found=False)


class PathSearch:
    """
    One breadth-first search over a grid.

    The queue, visited matrix and parent matrix are created inside run() and
    dropped when it returns. An instance runs once; the grid is mutated with
    path markers when a path is found.

    Example usage:
        grid = Grid.from_lines(["S_E"])
        result = PathSearch(grid).run()
        result.length     # 2
        grid.serialize()  # ["S*E"]
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.state = SearchState.NOT_STARTED
        self.result: Optional[SearchResult] = None

    def run(self) -> SearchResult:
        """
        Search for a shortest path from start to finish.

        Returns:
            SearchResult with the path length in edges, or NO_PATH.

        Raises:
            RuntimeError: If this search has already run.
        """
        if self.state is not SearchState.NOT_STARTED:
            raise RuntimeError(f"Search already ran (state: {self.state.value})")
        self.state = SearchState.RUNNING

        grid = self.grid
        start, finish = grid.start, grid.finish
        if start is None or finish is None:
            logger.debug("Grid has no start or finish, skipping search")
            return self._finish(SearchState.EXHAUSTED, NO_PATH)

        visited = [[False] * grid.cols for _ in range(grid.rows)]
        parent: list[list[Optional[Cell]]] = [
            [None] * grid.cols for _ in range(grid.rows)
        ]

        # (distance, cell, candidate parent); duplicates are dropped on dequeue
        queue: deque[tuple[int, Cell, Cell]] = deque([(0, start, start)])

        while queue:
            distance, current, came_from = queue.popleft()

            if visited[current.row][current.col]:
                continue
            visited[current.row][current.col] = True
            parent[current.row][current.col] = came_from

            if current == finish:
                path = self._color_path(parent, finish)
                return self._finish(
                    SearchState.FOUND,
                    SearchResult(found=True, length=distance, path=path),
                )

            for d_row, d_col in NEIGHBOUR_OFFSETS:
                neighbour = Cell(current.row + d_row, current.col + d_col)
                if not grid.in_bounds(neighbour):
                    continue
                if grid.char_at(neighbour) == WALL:
                    continue
                queue.append((distance + 1, neighbour, current))

        return self._finish(SearchState.EXHAUSTED, NO_PATH)

    def _color_path(
        self, parent: list[list[Optional[Cell]]], finish: Cell
    ) -> tuple[Cell, ...]:
        """Mark interior path cells and return the full path, start first."""
        path = [finish]
        cell = parent[finish.row][finish.col]
        while parent[cell.row][cell.col] != cell:
            self.grid.color(cell, PATH_MARKER)
            path.append(cell)
            cell = parent[cell.row][cell.col]
        path.append(cell)
        path.reverse()
        return tuple(path)

    def _finish(self, state: SearchState, result: SearchResult) -> SearchResult:
        self.state = state
        self.result = result
        if result.found:
            logger.debug(f"Path found with length {result.length}")
        else:
            logger.debug("Search exhausted without reaching finish")
        return result


def find_path(grid: Grid) -> SearchResult:
    """Run a single search over grid and mark the path it finds."""
    return PathSearch(grid).run()
