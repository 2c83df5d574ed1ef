# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.repositories import BlogRepository


@pytest.fixture
def mock_repo() -> AsyncMock:
    """Create a mock blog repository."""
    return AsyncMock(spec=BlogRepository)


@pytest.fixture
async def client(mock_repo: AsyncMock) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing with the repository mocked out."""
    app.state.blog_repository = mock_repo
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    del app.state.blog_repository
