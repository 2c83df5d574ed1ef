# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Keep test runs from writing log files and from reading a developer .env
# This must happen before app is imported anywhere
os.environ["LOG_TO_FILE"] = "false"
os.environ.setdefault("DB_DATABASE", "blog_test")

from datetime import UTC, datetime, timedelta  # noqa: E402

import pytest  # noqa: E402
from bson import ObjectId  # noqa: E402

from app.models.blog import BlogDB  # noqa: E402

FIXED_NOW = datetime(2025, 4, 15, 10, 0, 0, tzinfo=UTC)
SAMPLE_ID = "6616c1f0a2b4c3d2e1f00a11"


class StepClock:
    """Deterministic clock advancing by a fixed step on every call."""

    def __init__(self, start: datetime = FIXED_NOW, step: timedelta = timedelta(seconds=1)) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


@pytest.fixture
def clock() -> StepClock:
    """Create a clock that ticks one second per call."""
    return StepClock()


@pytest.fixture
def sample_blog() -> BlogDB:
    """Create a sample stored blog."""
    return BlogDB.model_validate(
        {
            "_id": ObjectId(SAMPLE_ID),
            "created_at": FIXED_NOW,
            "updated_at": FIXED_NOW,
            "title": "My Test Blog",
            "category": "Tech",
            "content": "This is some blog content.",
            "tags": ["go", "echo"],
        },
    )
