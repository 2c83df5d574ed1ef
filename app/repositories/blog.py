"""Blog repository for MongoDB operations."""

from asyncio import wait_for
from collections.abc import Awaitable, Callable
from datetime import datetime, timedelta
from logging import getLogger
from re import escape
from typing import Any, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError
from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import ConnectionFailure, PyMongoError

from app.configs import file_logger
from app.errors.database import (
    DatabaseConnectionError,
    EmptyResultError,
    EmptyUpdateError,
    InvalidIdentifierError,
    RecordNotFoundError,
    StorageError,
)
from app.models.blog import BlogDB
from app.schemas.blog import BlogCreate, BlogUpdate
from app.utils.helpers import utc_now

T = TypeVar("T")

logger = file_logger(getLogger(__name__))

SEARCH_FIELDS = ("title", "content", "category")

# Smallest step a stored timestamp can take; BSON dates keep milliseconds
TIMESTAMP_RESOLUTION = timedelta(milliseconds=1)


def parse_object_id(blog_id: str) -> ObjectId:
    """
    Parse a hex string into a MongoDB ObjectId.

    Args:
        blog_id: 24-character hexadecimal identifier

    Returns:
        ObjectId: Parsed identifier

    Raises:
        InvalidIdentifierError: If the string is not a well-formed ObjectId
    """
    if not isinstance(blog_id, str):
        raise InvalidIdentifierError(detail=f"Invalid blog ID: {blog_id!r}")
    try:
        return ObjectId(blog_id)
    except (InvalidId, TypeError) as e:
        raise InvalidIdentifierError(detail=f"Invalid blog ID: {blog_id!r}") from e


def build_search_filter(term: str, *, literal: bool = False) -> dict[str, Any]:
    """
    Build a case-insensitive OR filter over the searchable fields.

    Args:
        term: Search term, used as a regex pattern unless `literal` is set
        literal: Escape pattern metacharacters so the term matches verbatim

    Returns:
        dict[str, Any]: MongoDB filter document
    """
    pattern = escape(term) if literal else term
    return {
        "$or": [{field: {"$regex": pattern, "$options": "i"}} for field in SEARCH_FIELDS],
    }


class BlogRepository:
    """
    Repository for Blog database operations.

    This class is the only writer to the blog collection. It owns
    identifier parsing and generation, timestamps, the partial-update
    merge, and the translation of driver failures into database errors.

    Every operation accepts an optional `timeout` in seconds. When it
    expires the store call is abandoned and `DatabaseConnectionError`
    is raised.
    """

    def __init__(
        self,
        collection: AsyncCollection,
        *,
        clock: Callable[[], datetime] = utc_now,
        literal_search: bool = False,
    ) -> None:
        """
        Initialize repository with a collection handle.

        Args:
            collection: Blog collection of the shared database client
            clock: Source of timestamps
            literal_search: Match search terms verbatim instead of as patterns
        """
        self.collection = collection
        self.clock = clock
        self._last_stamp: datetime | None = None
        self.literal_search = literal_search

    async def health(self, timeout: float | None = None) -> None:
        """
        Ping the database.

        Args:
            timeout: Deadline in seconds

        Raises:
            DatabaseConnectionError: If the ping fails or times out
        """
        try:
            await self._execute(
                self.collection.database.command("ping"),
                timeout,
                "ping database",
            )
        except StorageError as e:
            raise DatabaseConnectionError(detail=f"Failed to ping database: {e}") from e

    async def create_blog(self, blog: BlogCreate, timeout: float | None = None) -> str:
        """
        Create a new blog post in the database.

        Args:
            blog: Validated creation schema
            timeout: Deadline in seconds

        Returns:
            str: Hex string identifier of the new blog

        Raises:
            StorageError: If the insert is rejected
            DatabaseConnectionError: If the database is unreachable
        """
        now = self._stamp()
        db_blog = BlogDB(
            id=ObjectId(),
            created_at=now,
            updated_at=now,
            title=blog.title,
            category=blog.category,
            content=blog.content,
            tags=list(blog.tags),
        )

        result = await self._execute(
            self.collection.insert_one(db_blog.to_document()),
            timeout,
            "insert blog entry",
        )
        blog_id = str(result.inserted_id)
        logger.info(f"Created blog {blog_id}")
        return blog_id

    async def get_blog(self, blog_id: str, timeout: float | None = None) -> BlogDB:
        """
        Get blog by ID.

        Args:
            blog_id: Blog identifier as a hex string
            timeout: Deadline in seconds

        Returns:
            BlogDB: The stored blog

        Raises:
            InvalidIdentifierError: If `blog_id` is malformed
            RecordNotFoundError: If no blog has this ID
        """
        object_id = parse_object_id(blog_id)
        document = await self._execute(
            self.collection.find_one({"_id": object_id}),
            timeout,
            f"fetch blog {blog_id}",
        )
        if document is None:
            raise RecordNotFoundError(detail=f"Blog with ID {blog_id} not found")
        return self._to_model(document)

    async def get_blogs(self, timeout: float | None = None) -> list[BlogDB]:
        """
        Get every blog in natural store order.

        Args:
            timeout: Deadline in seconds

        Returns:
            list[BlogDB]: All blogs

        Raises:
            EmptyResultError: If the collection holds no blogs
        """
        blogs = await self._find({}, timeout, "fetch blogs")
        if not blogs:
            raise EmptyResultError(detail="No blogs found")
        return blogs

    async def get_blogs_by_term(self, term: str, timeout: float | None = None) -> list[BlogDB]:
        """
        Search blogs whose title, content or category contains `term`.

        Matching is case-insensitive. Unless literal search is enabled the
        term is passed to the store as a regular expression.

        Args:
            term: Search term
            timeout: Deadline in seconds

        Returns:
            list[BlogDB]: Matching blogs

        Raises:
            EmptyResultError: If nothing matches
            StorageError: If the store rejects the pattern
        """
        search_filter = build_search_filter(term, literal=self.literal_search)
        blogs = await self._find(search_filter, timeout, "search blogs")
        if not blogs:
            raise EmptyResultError(detail=f"No blogs found matching '{term}'")
        logger.info(f"Found {len(blogs)} blogs matching term '{term}'")
        return blogs

    async def update_blog(
        self,
        blog_id: str,
        blog_update: BlogUpdate,
        timeout: float | None = None,
    ) -> BlogDB:
        """
        Apply a partial update to a blog.

        Only the fields present in `blog_update` are written. `updated_at`
        is always refreshed. The merge is a single atomic find-and-modify.

        Args:
            blog_id: Blog identifier as a hex string
            blog_update: Update schema carrying the provided fields
            timeout: Deadline in seconds

        Returns:
            BlogDB: The blog after the update

        Raises:
            InvalidIdentifierError: If `blog_id` is malformed
            EmptyUpdateError: If no fields were provided
            RecordNotFoundError: If no blog has this ID
        """
        object_id = parse_object_id(blog_id)

        update_fields = blog_update.changes()
        if not update_fields:
            raise EmptyUpdateError()

        update_fields["updated_at"] = self._stamp()

        document = await self._execute(
            self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": update_fields},
                return_document=ReturnDocument.AFTER,
            ),
            timeout,
            f"update blog {blog_id}",
        )
        if document is None:
            raise RecordNotFoundError(detail=f"Blog with ID {blog_id} not found")

        logger.info(f"Updated blog {blog_id}: {sorted(update_fields)}")
        return self._to_model(document)

    async def delete_blog(self, blog_id: str, timeout: float | None = None) -> BlogDB:
        """
        Delete blog by ID.

        Args:
            blog_id: Blog identifier as a hex string
            timeout: Deadline in seconds

        Returns:
            BlogDB: The blog as it was immediately before removal

        Raises:
            InvalidIdentifierError: If `blog_id` is malformed
            RecordNotFoundError: If no blog has this ID
        """
        object_id = parse_object_id(blog_id)
        document = await self._execute(
            self.collection.find_one_and_delete({"_id": object_id}),
            timeout,
            f"delete blog {blog_id}",
        )
        if document is None:
            raise RecordNotFoundError(detail=f"Blog with ID {blog_id} not found")

        logger.info(f"Deleted blog {blog_id}")
        return self._to_model(document)

    def _stamp(self) -> datetime:
        """
        Return the next write timestamp.

        Stamps issued by one repository strictly increase even when the
        clock has not advanced by a full millisecond since the last write.

        Returns:
            datetime: Timestamp later than any stamp issued before
        """
        now = self.clock()
        if self._last_stamp is not None and now <= self._last_stamp:
            now = self._last_stamp + TIMESTAMP_RESOLUTION
        self._last_stamp = now
        return now

    async def _find(
        self,
        query: dict[str, Any],
        timeout: float | None,
        action: str,
    ) -> list[BlogDB]:
        documents = await self._execute(self.collection.find(query).to_list(), timeout, action)
        return [self._to_model(document) for document in documents]

    async def _execute(
        self,
        operation: Awaitable[T],
        timeout: float | None,
        action: str,
    ) -> T:
        """
        Await a driver call under a deadline and classify its failures.

        Args:
            operation: Pending driver call
            timeout: Deadline in seconds, or None for no deadline
            action: Human-readable description used in error messages

        Returns:
            T: Result of the driver call

        Raises:
            DatabaseConnectionError: On timeouts and connection failures
            StorageError: When the database rejects the operation
        """
        try:
            return await wait_for(operation, timeout=timeout)
        except TimeoutError as e:
            logger.warning(f"Timed out trying to {action}")
            raise DatabaseConnectionError(detail=f"Timed out trying to {action}") from e
        except ConnectionFailure as e:
            logger.warning(f"Database unavailable trying to {action}: {e}")
            raise DatabaseConnectionError(
                detail=f"Database unavailable trying to {action}",
            ) from e
        except PyMongoError as e:
            if e.timeout:
                logger.warning(f"Timed out trying to {action}: {e}")
                raise DatabaseConnectionError(detail=f"Timed out trying to {action}") from e
            logger.exception(f"Database error trying to {action}")
            raise StorageError(detail=f"Failed to {action}") from e

    @staticmethod
    def _to_model(document: dict[str, Any]) -> BlogDB:
        try:
            return BlogDB.from_document(document)
        except ValidationError as e:
            logger.exception(f"Malformed blog document {document.get('_id')}")
            raise StorageError(detail="Failed to decode blog document") from e
