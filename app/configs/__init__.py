from app.configs.settings import (
    INVALID_BODY_MESSAGE,
    Settings,
    file_logger,
    settings,
)

__all__ = [
    "INVALID_BODY_MESSAGE",
    "Settings",
    "file_logger",
    "settings",
]
