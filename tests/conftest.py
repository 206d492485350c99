"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from labyrinth.main import app


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def sample_maze_lines() -> list[str]:
    """Sample 5x5 maze with two shortest paths of length 4."""
    return [
        "#####",
        "#S__#",
        "#_#_#",
        "#__E#",
        "#####",
    ]
