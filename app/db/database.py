"""MongoDB client and collection management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from typing import Any

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from app.configs import Settings, file_logger

logger = file_logger(getLogger(__name__))


def create_client(settings: Settings) -> AsyncMongoClient:
    """
    Create the MongoDB client from application settings.

    The client connects lazily; no network traffic happens until the
    first operation.

    Args:
        settings: Application settings

    Returns:
        AsyncMongoClient: Configured, unconnected client
    """
    kwargs: dict[str, Any] = {
        "host": settings.DB_HOST,
        "port": settings.DB_PORT,
        "tz_aware": True,
        "serverSelectionTimeoutMS": int(settings.DB_CONNECT_TIMEOUT * 1000),
    }
    if settings.DB_USERNAME:
        kwargs |= {
            "username": settings.DB_USERNAME,
            "password": settings.DB_PASSWORD.get_secret_value(),
            "authSource": settings.DB_AUTHSOURCE,
        }

    return AsyncMongoClient(**kwargs)


def get_collection(client: AsyncMongoClient, settings: Settings) -> AsyncCollection:
    """
    Return the blog collection.

    Args:
        client: MongoDB client
        settings: Application settings

    Returns:
        AsyncCollection: Blog collection handle
    """
    return client[settings.DB_DATABASE][settings.collection_name]


@asynccontextmanager
async def mongo_client(settings: Settings) -> AsyncGenerator[AsyncMongoClient]:
    """
    Context manager owning the process-wide MongoDB client.

    Use this once per process, in the application lifespan. The client is
    closed on exit even if the body raises.

    Yields:
        AsyncMongoClient: Shared database client

    Example:
        ```python
        async with mongo_client(settings) as client:
            repo = BlogRepository(get_collection(client, settings))
        ```
    """
    client = create_client(settings)
    logger.info(
        f"Database client created for {settings.DB_HOST}:{settings.DB_PORT}/{settings.DB_DATABASE}",
    )
    try:
        yield client
    finally:
        await client.close()
        logger.info("Database connections closed")
