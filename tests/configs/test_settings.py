# tests/configs/test_settings.py
"""Tests for app/configs/settings.py module."""

import pytest

from app.configs import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("DB_HOST", "DB_PORT", "HEALTH_TIMEOUT", "REQUEST_TIMEOUT", "CREATE_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.DB_HOST == "localhost"
        assert settings.DB_PORT == 27017
        assert settings.HEALTH_TIMEOUT == 1.0
        assert settings.REQUEST_TIMEOUT == 1.0
        assert settings.CREATE_TIMEOUT == 10.0
        assert settings.SEARCH_LITERAL is False

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_HOST", "db")
        monkeypatch.setenv("DB_PORT", "27999")
        monkeypatch.setenv("DB_PASSWORD", "hunter2")
        monkeypatch.setenv("SEARCH_LITERAL", "true")

        settings = Settings(_env_file=None)

        assert settings.DB_HOST == "db"
        assert settings.DB_PORT == 27999
        assert settings.DB_PASSWORD.get_secret_value() == "hunter2"
        assert "hunter2" not in repr(settings)
        assert settings.SEARCH_LITERAL is True

    def test_collection_name_falls_back_to_database(self) -> None:
        settings = Settings(_env_file=None, DB_DATABASE="blogs", DB_COLLECTION=None)
        assert settings.collection_name == "blogs"

    def test_collection_name_override(self) -> None:
        settings = Settings(_env_file=None, DB_DATABASE="blogs", DB_COLLECTION="posts")
        assert settings.collection_name == "posts"
