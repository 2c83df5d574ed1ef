# app/routes/blog.py

"""
Blog Routes.

Provides CRUD endpoints and keyword search for blog posts.

Summary
-------
Endpoints include:
  - Create blog
  - Get blog by id
  - List blogs (optionally filtered by a search term)
  - Update blog
  - Delete blog

Dependencies
------------
  - `BlogRepoDep`: Repository bound to the shared database client.

Errors
------
Repository errors propagate to the database exception handler, which maps
them to `400` (invalid identifier, empty update), `404` (not found) or
`500` (connectivity and storage failures). An empty listing is answered
with `204 No Content`.
"""

from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Body, Query
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from app.configs import file_logger, settings
from app.dependencies import BlogRepoDep
from app.errors.database import EmptyResultError
from app.schemas import BlogCreate, BlogCreatedResponse, BlogResponse, BlogUpdate

router = APIRouter(prefix="/posts", tags=["📝 Posts"])

logger = file_logger(getLogger(__name__))

BLOG_EXAMPLE = {
    "id": "6616c1f0a2b4c3d2e1f00a11",
    "createdAt": "2025-04-15T10:00:00Z",
    "updatedAt": "2025-04-15T10:00:00Z",
    "title": "My Test Blog",
    "category": "Tech",
    "content": "This is some blog content.",
    "tags": ["python", "fastapi"],
}

INVALID_ID_RESPONSE = {
    "description": "Invalid identifier",
    "content": {
        "application/json": {
            "example": {"detail": "Invalid blog ID: 'abc'", "kind": "invalid_identifier"},
        },
    },
}

NOT_FOUND_RESPONSE = {
    "description": "Not found",
    "content": {
        "application/json": {
            "example": {"detail": "Blog with ID <id> not found", "kind": "not_found"},
        },
    },
}


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogCreatedResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog post",
    description="Create a new blog post with the provided information.",
    responses={
        201: {"content": {"application/json": {"example": {"data": BLOG_EXAMPLE["id"]}}}},
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"detail": "Invalid request body"}}},
        },
    },
    operation_id="posts_create",
)
async def create_blog(
    blog: Annotated[
        BlogCreate,
        Body(
            examples=[
                {
                    "title": "My Test Blog",
                    "category": "Tech",
                    "content": "This is some blog content.",
                    "tags": ["python", "fastapi"],
                },
            ],
        ),
    ],
    repo: BlogRepoDep,
) -> BlogCreatedResponse:
    """
    Create a new blog post.

    Parameters
    ----------
    blog : BlogCreate
        Blog input payload.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogCreatedResponse
        Identifier of the created blog.
    """
    blog_id = await repo.create_blog(blog, timeout=settings.CREATE_TIMEOUT)
    return BlogCreatedResponse(data=blog_id)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blog posts",
    description=(
        "Retrieve every blog post, or only those whose title, content or "
        "category contains `term` (case-insensitive)."
    ),
    responses={
        200: {"content": {"application/json": {"example": [BLOG_EXAMPLE]}}},
        204: {"description": "No blog posts found"},
    },
    operation_id="posts_list",
)
async def get_blogs(
    repo: BlogRepoDep,
    term: Annotated[str | None, Query(description="Optional search term")] = None,
) -> list[BlogResponse] | Response:
    """
    List blogs, optionally filtered by a search term.

    Parameters
    ----------
    repo : BlogRepository
        Repository dependency.
    term : str | None
        Search term matched against title, content and category.

    Returns
    -------
    list[BlogResponse] | Response
        Matching blogs, or an empty `204` response when nothing matches.
    """
    try:
        if term:
            blogs = await repo.get_blogs_by_term(term, timeout=settings.REQUEST_TIMEOUT)
        else:
            blogs = await repo.get_blogs(timeout=settings.REQUEST_TIMEOUT)
    except EmptyResultError as e:
        logger.info(e.detail)
        return Response(status_code=HTTP_204_NO_CONTENT)

    return [BlogResponse.from_db(blog) for blog in blogs]


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    description="Retrieve a blog post by its identifier.",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: INVALID_ID_RESPONSE,
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="posts_get_by_id",
)
async def get_blog(blog_id: str, repo: BlogRepoDep) -> BlogResponse:
    """
    Get blog by ID.

    Parameters
    ----------
    blog_id : str
        Blog identifier (24-character hex string).
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogResponse
        Blog data.
    """
    blog = await repo.get_blog(blog_id, timeout=settings.REQUEST_TIMEOUT)
    return BlogResponse.from_db(blog)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update blog",
    description="Update only the fields present in the request body.",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: {
            "description": "Invalid identifier or nothing to update",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "No valid fields to update",
                        "kind": "validation_failure",
                    },
                },
            },
        },
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="posts_update",
)
async def update_blog(
    blog_id: str,
    blog_update: Annotated[BlogUpdate, Body()],
    repo: BlogRepoDep,
) -> BlogResponse:
    """
    Update blog.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    blog_update : BlogUpdate
        Fields to overwrite.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogResponse
        Blog after the update.
    """
    blog = await repo.update_blog(blog_id, blog_update, timeout=settings.REQUEST_TIMEOUT)
    return BlogResponse.from_db(blog)


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Delete blog",
    description="Delete a blog post and return it as it was before removal.",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: INVALID_ID_RESPONSE,
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="posts_delete",
)
async def delete_blog(blog_id: str, repo: BlogRepoDep) -> BlogResponse:
    """
    Delete blog.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogResponse
        The deleted blog.
    """
    blog = await repo.delete_blog(blog_id, timeout=settings.REQUEST_TIMEOUT)
    return BlogResponse.from_db(blog)
