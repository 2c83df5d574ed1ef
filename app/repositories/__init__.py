"""Repository layer for database operations."""

from app.repositories.blog import BlogRepository, build_search_filter, parse_object_id

__all__ = ["BlogRepository", "build_search_filter", "parse_object_id"]
