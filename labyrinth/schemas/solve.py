"""Solve schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


class SolveRequest(BaseModel):
    """Schema for a solve request."""

    grid_data: str = Field(..., description="Maze rows separated by newlines")


class GridPosition(BaseModel):
    """Schema for a position in the grid."""

    row: int
    col: int


class SolveResponse(BaseModel):
    """Schema for solve response."""

    found: bool
    length: Optional[int] = None
    grid_data: str  # grid with path markers applied
    rows: int
    cols: int
    path: list[GridPosition] = []
    message: str
