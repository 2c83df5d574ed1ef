from logging import getLogger

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from app.configs import file_logger
from app.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class DatabaseError(BaseAppError):
    """Base exception for database errors."""

    kind = "database_error"

    def __init__(
        self,
        detail: str = "Database Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail, status_code)
        self.kind = type(self).kind


class DatabaseConnectionError(DatabaseError):
    """Exception raised when the database is unreachable or times out."""

    kind = "connectivity_failure"

    def __init__(
        self,
        detail: str = "Failed to connect to the database",
    ) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


class InvalidIdentifierError(DatabaseError):
    """Exception raised when a string is not a well-formed record identifier."""

    kind = "invalid_identifier"

    def __init__(
        self,
        detail: str = "Invalid identifier",
    ) -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


class RecordNotFoundError(DatabaseError):
    """Exception raised when a record is not found."""

    kind = "not_found"

    def __init__(
        self,
        detail: str = "Record not found",
    ) -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class EmptyResultError(RecordNotFoundError):
    """Exception raised when a bulk read matches no records."""

    kind = "empty_result"

    def __init__(
        self,
        detail: str = "No records found",
    ) -> None:
        super().__init__(detail)


class EmptyUpdateError(DatabaseError):
    """Exception raised when an update carries no fields to apply."""

    kind = "validation_failure"

    def __init__(
        self,
        detail: str = "No valid fields to update",
    ) -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


class StorageError(DatabaseError):
    """Exception raised when the database rejects an operation."""

    kind = "storage_failure"

    def __init__(
        self,
        detail: str = "Storage operation failed",
    ) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


database_exception_handler = create_exception_handler(logger)
