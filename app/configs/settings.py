"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Blog Platform backend application.
"""

from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pydantic import SecretStr
from pydantic_settings.main import BaseSettings, SettingsConfigDict
from pythonjsonlogger.json import JsonFormatter

ENV_FILE = Path(__file__).parent.parent.parent / ".env"
LOG_DIR = Path("logs")

# --- Constants ---
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 3

# Response constants
INVALID_BODY_MESSAGE = "Invalid request body"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Blog Platform API"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: str = "development"
    LOG_TO_FILE: bool = True
    PRODUCTION_FRONTEND_URL: str | None = None
    PORT: int = 8000

    # Database Configuration
    DB_HOST: str = "localhost"
    DB_PORT: int = 27017
    DB_USERNAME: str = ""
    DB_PASSWORD: SecretStr = SecretStr("")
    DB_AUTHSOURCE: str = "admin"
    DB_DATABASE: str = "blog"
    DB_COLLECTION: str | None = None
    DB_CONNECT_TIMEOUT: float = 10.0  # seconds

    # Request deadlines
    HEALTH_TIMEOUT: float = 1.0  # seconds
    REQUEST_TIMEOUT: float = 1.0  # seconds
    CREATE_TIMEOUT: float = 10.0  # seconds

    # Search
    SEARCH_LITERAL: bool = False

    @property
    def collection_name(self) -> str:
        """Blog collection name, falling back to the database name."""
        return self.DB_COLLECTION or self.DB_DATABASE


settings = Settings()


def file_logger(logger: Logger) -> Logger:
    """
    Attach a rotating JSON file handler to a logger.

    Does nothing when `LOG_TO_FILE` is disabled or the logger already
    writes to a file.

    Args:
        logger: Logger to extend.

    Returns:
        Logger: The same logger instance.
    """
    if not settings.LOG_TO_FILE:
        return logger

    if any(isinstance(handler, RotatingFileHandler) for handler in logger.handlers):
        return logger

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        LOG_DIR / "app.log",
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    return logger
