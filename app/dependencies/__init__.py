# app/dependencies/__init__.py

from app.dependencies.dependencies import BlogRepoDep, get_blog_repository

__all__ = [
    "BlogRepoDep",
    "get_blog_repository",
]
