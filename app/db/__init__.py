"""MongoDB client management."""

from app.db.database import create_client, get_collection, mongo_client

__all__ = [
    "create_client",
    "get_collection",
    "mongo_client",
]
