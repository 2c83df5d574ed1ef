# tests/errors/test_database_errors.py
"""Tests for app/errors/database.py module."""

from unittest.mock import MagicMock

import orjson
import pytest

from app.errors import database_exception_handler
from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    EmptyResultError,
    EmptyUpdateError,
    InvalidIdentifierError,
    RecordNotFoundError,
    StorageError,
)


@pytest.mark.parametrize(
    ("error_class", "kind", "status_code"),
    [
        (DatabaseConnectionError, "connectivity_failure", 500),
        (InvalidIdentifierError, "invalid_identifier", 400),
        (RecordNotFoundError, "not_found", 404),
        (EmptyResultError, "empty_result", 404),
        (EmptyUpdateError, "validation_failure", 400),
        (StorageError, "storage_failure", 500),
    ],
)
def test_error_kind_and_status(
    error_class: type[DatabaseError],
    kind: str,
    status_code: int,
) -> None:
    error = error_class()

    assert isinstance(error, DatabaseError)
    assert error.kind == kind
    assert error.status_code == status_code


def test_empty_result_is_a_not_found() -> None:
    assert issubclass(EmptyResultError, RecordNotFoundError)
    assert not issubclass(RecordNotFoundError, EmptyResultError)


def test_custom_detail_is_kept() -> None:
    error = RecordNotFoundError(detail="Blog with ID abc not found")

    assert error.detail == "Blog with ID abc not found"
    assert str(error) == "Blog with ID abc not found"


@pytest.mark.asyncio
async def test_handler_reports_kind() -> None:
    request = MagicMock()
    request.client.host = "10.0.0.1"
    request.url.path = "/posts/abc"

    response = await database_exception_handler(
        request,
        InvalidIdentifierError(detail="Invalid blog ID: 'abc'"),
    )

    assert response.status_code == 400
    assert orjson.loads(response.body) == {
        "detail": "Invalid blog ID: 'abc'",
        "kind": "invalid_identifier",
    }
