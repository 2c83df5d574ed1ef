from app.schemas.blog import (
    BlogCreate,
    BlogCreatedResponse,
    BlogResponse,
    BlogUpdate,
    HealthCheckResponse,
)

__all__ = [
    "BlogCreate",
    "BlogCreatedResponse",
    "BlogResponse",
    "BlogUpdate",
    "HealthCheckResponse",
]
