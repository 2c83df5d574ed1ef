# app/dependencies/dependencies.py

"""Application dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from app.repositories import BlogRepository


def get_blog_repository(request: Request) -> BlogRepository:
    """
    Resolve the `BlogRepository` created in the application lifespan.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    BlogRepository
        Repository bound to the shared database client.
    """
    return request.app.state.blog_repository


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
