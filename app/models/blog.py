"""Blog document model for MongoDB."""

from datetime import UTC, datetime
from typing import Any

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator


class BlogDB(BaseModel):
    """
    Blog document model for MongoDB.

    This model represents one document of the blog collection. Field names
    match the stored keys; the identifier is stored under `_id`.
    """

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: ObjectId = Field(alias="_id", description="Blog ID")

    # Timestamps
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    # Content fields
    title: str = Field(description="Blog title")
    category: str = Field(description="Blog category")
    content: str = Field(description="Blog content")
    tags: list[str] = Field(default_factory=list, description="Blog tags")

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, value: datetime) -> datetime:
        """Attach UTC to naive datetimes returned by the driver."""
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "BlogDB":
        """
        Build a model from a raw MongoDB document.

        Args:
            document: Document as returned by the driver

        Returns:
            BlogDB: Validated blog model
        """
        return cls.model_validate(document)

    def to_document(self) -> dict[str, Any]:
        """
        Serialize the model into a MongoDB document.

        Returns:
            dict[str, Any]: Document keyed by stored field names
        """
        return self.model_dump(by_alias=True)
