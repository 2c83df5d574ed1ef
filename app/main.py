# app/main.py

"""Blog Platform Backend - CRUD and keyword search over blog posts stored in MongoDB."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from app.configs import settings
from app.errors import (
    DatabaseConnectionError,
    DatabaseError,
    database_exception_handler,
    validation_exception_handler,
)
from app.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from app.repositories import BlogRepository
from app.routes import blog_router
from app.schemas import HealthCheckResponse
from app.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Blog Platform Backend API",
    version="1.0.0",
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)

routes = [blog_router]

_ = [app.include_router(router) for router in routes]

errors = [
    (DatabaseError, database_exception_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"status": "healthy", "timestamp": "2025-01-01 00:00:00"},
                },
            },
        },
        500: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "unhealthy Failed to ping database",
                        "timestamp": "2025-01-01 00:00:00",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check(request: Request) -> ORJSONResponse:
    """
    Health check endpoint.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    ORJSONResponse
        `200` when the database answers a ping within the health deadline,
        `500` otherwise.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"status": "healthy", "timestamp": "2025-01-01 00:00:00"}
    """
    repo: BlogRepository = request.app.state.blog_repository
    try:
        await repo.health(timeout=settings.HEALTH_TIMEOUT)
    except DatabaseConnectionError as e:
        return ORJSONResponse(
            HealthCheckResponse(status=f"unhealthy {e.detail}", timestamp=today_str()).model_dump(),
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return ORJSONResponse(HealthCheckResponse(status="healthy", timestamp=today_str()).model_dump())
