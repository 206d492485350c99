"""Solve routes for running the path search on submitted grids."""

import logging

from fastapi import APIRouter, HTTPException, Request, status

from labyrinth.api.rate_limit import limiter
from labyrinth.config import get_settings
from labyrinth.core import Grid, GridError, find_path
from labyrinth.schemas.solve import GridPosition, SolveRequest, SolveResponse

logger = logging.getLogger(__name__)

settings = get_settings()

router = APIRouter(tags=["Solve"])


def count_cells(grid_data: str) -> int:
    """Upper bound on the cells in grid_data, without parsing it."""
    return len(grid_data) - grid_data.count("\n")


# Sync route: FastAPI runs it in its threadpool, off the event loop
@router.post(
    "/solve",
    response_model=SolveResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
def solve_maze(
    request: Request,
    solve_data: SolveRequest,
) -> SolveResponse:
    """Find a shortest path through the submitted maze.

    Returns the grid with the path marked by '*' characters.
    A maze without a path is not an error: found is false and the
    grid comes back unchanged.
    """
    cells = count_cells(solve_data.grid_data)
    if cells > settings.max_grid_cells:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Grid too large: {cells} cells exceeds {settings.max_grid_cells}",
        )

    try:
        grid = Grid.from_text(solve_data.grid_data)
    except GridError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    result = find_path(grid)
    logger.info(
        f"Solved {grid.rows}x{grid.cols} grid: found={result.found} length={result.length}"
    )

    return SolveResponse(
        found=result.found,
        length=result.length,
        grid_data=grid.to_text(),
        rows=grid.rows,
        cols=grid.cols,
        path=[GridPosition(row=cell.row, col=cell.col) for cell in result.path],
        message=result.message,
    )
