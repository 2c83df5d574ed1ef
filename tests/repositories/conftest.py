# tests/repositories/conftest.py
"""Pytest fixtures for repository tests."""

from collections.abc import Callable
from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import mongomock
import pytest

from app.repositories import BlogRepository


class AsyncCursorAdapter:
    """Async `to_list` over a mongomock cursor."""

    def __init__(self, cursor: Any) -> None:
        self._cursor = cursor

    async def to_list(self, length: int | None = None) -> list[dict[str, Any]]:
        documents = list(self._cursor)
        return documents if length is None else documents[:length]


class AsyncDatabaseAdapter:
    """Answers the commands the repository issues against the database."""

    def __init__(self) -> None:
        self.commands: list[str] = []

    async def command(self, name: str, *args: Any, **kwargs: Any) -> dict[str, Any]:
        self.commands.append(name)
        return {"ok": 1.0}


class AsyncCollectionAdapter:
    """Expose an in-memory mongomock collection through the async pymongo collection API."""

    def __init__(self, collection: mongomock.Collection) -> None:
        self._collection = collection
        self.database = AsyncDatabaseAdapter()

    async def insert_one(self, document: dict[str, Any]) -> Any:
        return self._collection.insert_one(document)

    def find(self, *args: Any, **kwargs: Any) -> AsyncCursorAdapter:
        return AsyncCursorAdapter(self._collection.find(*args, **kwargs))

    async def find_one(self, *args: Any, **kwargs: Any) -> dict[str, Any] | None:
        return self._collection.find_one(*args, **kwargs)

    async def find_one_and_update(self, *args: Any, **kwargs: Any) -> dict[str, Any] | None:
        return self._collection.find_one_and_update(*args, **kwargs)

    async def find_one_and_delete(self, *args: Any, **kwargs: Any) -> dict[str, Any] | None:
        return self._collection.find_one_and_delete(*args, **kwargs)


@pytest.fixture
def mongo_collection() -> mongomock.Collection:
    """Create an empty in-memory blog collection."""
    return mongomock.MongoClient()["blog_test"]["blog_test"]


@pytest.fixture
def repository(
    mongo_collection: mongomock.Collection,
    clock: Callable[[], datetime],
) -> BlogRepository:
    """Create a repository backed by the in-memory collection."""
    return BlogRepository(AsyncCollectionAdapter(mongo_collection), clock=clock)


@pytest.fixture
def mock_collection() -> MagicMock:
    """Create a collection mock whose driver calls are all async."""
    mock = MagicMock()
    mock.insert_one = AsyncMock()
    mock.find_one = AsyncMock()
    mock.find_one_and_update = AsyncMock()
    mock.find_one_and_delete = AsyncMock()
    mock.find.return_value.to_list = AsyncMock(return_value=[])
    mock.database.command = AsyncMock(return_value={"ok": 1.0})
    return mock


@pytest.fixture
def mock_repository(mock_collection: MagicMock, clock: Callable[[], datetime]) -> BlogRepository:
    """Create a repository over the collection mock."""
    return BlogRepository(mock_collection, clock=clock)


@pytest.fixture
def wall_clock_repository(mongo_collection: mongomock.Collection) -> BlogRepository:
    """Create a repository that stamps writes with the real UTC clock."""
    return BlogRepository(AsyncCollectionAdapter(mongo_collection))


@pytest.fixture
def frozen_clock_repository(
    mongo_collection: mongomock.Collection,
    clock: Callable[[], datetime],
) -> BlogRepository:
    """Create a repository whose clock never advances."""
    frozen = clock()
    return BlogRepository(AsyncCollectionAdapter(mongo_collection), clock=lambda: frozen)
