"""
Blog schemas for the Blog Platform API.

This module defines the request and response models for blog posts.
Create requests require every field; update requests carry only the
fields the caller supplied, tracked through pydantic's `model_fields_set`.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.blog import BlogDB


class BlogCreate(BaseModel):
    """Blog creation model (for request body - excludes auto-generated fields)."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(
        ...,
        min_length=1,
        description="Blog title",
        examples=["My Test Blog"],
    )
    category: str = Field(
        ...,
        min_length=1,
        description="Blog category",
        examples=["Tech"],
    )
    content: str = Field(
        ...,
        min_length=1,
        description="Blog content",
        examples=["This is some blog content."],
    )
    tags: list[str] = Field(
        ...,
        description="Blog tags (may be empty)",
        examples=[["python", "fastapi"]],
    )


class BlogUpdate(BaseModel):
    """
    Blog update model (all fields optional).

    Only fields present in the request body are applied. An empty string
    is a legitimate value; an explicit `null` is rejected.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Updated Blog Title",
                "tags": ["python", "updated"],
            },
        },
    )

    title: str | None = None
    category: str | None = None
    content: str | None = None
    tags: list[str] | None = None

    @field_validator("title", "category", "content", "tags", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """Reject explicit nulls; omit the field to leave it unchanged."""
        if v is None:
            mssg = "Field may be omitted but not null"
            raise ValueError(mssg)
        return v

    def changes(self) -> dict[str, Any]:
        """
        Return the fields explicitly provided by the caller.

        Returns:
            dict[str, Any]: Provided field names mapped to their values
        """
        return {name: getattr(self, name) for name in sorted(self.model_fields_set)}


class BlogResponse(BaseModel):
    """Blog response model."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Blog ID (24-character hex string)")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
    title: str
    category: str
    content: str
    tags: list[str]

    @classmethod
    def from_db(cls, blog: BlogDB) -> "BlogResponse":
        """
        Convert a `BlogDB` document model into a response model.

        Args:
            blog: Stored blog

        Returns:
            BlogResponse: Response model with a hex string identifier
        """
        return cls(
            id=str(blog.id),
            created_at=blog.created_at,
            updated_at=blog.updated_at,
            title=blog.title,
            category=blog.category,
            content=blog.content,
            tags=blog.tags,
        )


class BlogCreatedResponse(BaseModel):
    """Response returned after a blog is created."""

    data: str = Field(description="Identifier of the created blog")


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str | None = None
