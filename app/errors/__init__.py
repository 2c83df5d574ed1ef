from app.errors.base import BaseAppError, create_exception_handler
from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    EmptyResultError,
    EmptyUpdateError,
    InvalidIdentifierError,
    RecordNotFoundError,
    StorageError,
    database_exception_handler,
)
from app.errors.validation import validation_exception_handler

__all__ = [
    "BaseAppError",
    "DatabaseConnectionError",
    "DatabaseError",
    "EmptyResultError",
    "EmptyUpdateError",
    "InvalidIdentifierError",
    "RecordNotFoundError",
    "StorageError",
    "create_exception_handler",
    "database_exception_handler",
    "validation_exception_handler",
]
