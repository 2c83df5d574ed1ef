# tests/main/conftest.py
"""Pytest configuration and fixtures for main tests."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

from httpx import ASGITransport, AsyncClient
from pytest import fixture

from app.main import app
from app.repositories import BlogRepository


@fixture
def mock_repo() -> AsyncMock:
    """Create a mock blog repository."""
    return AsyncMock(spec=BlogRepository)


@fixture
async def client(mock_repo: AsyncMock) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing FastAPI endpoints."""
    app.state.blog_repository = mock_repo
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    del app.state.blog_repository
