"""FastAPI application factory and configuration.

This module provides the application factory function for creating
and configuring the FastAPI application with all middleware, routes,
and lifecycle handlers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dynadocs.core.config import get_settings
from dynadocs.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    new_correlation_id,
)
from dynadocs.domain.exceptions import (
    DocumentNotFoundError,
    DuplicateSchemaError,
    DynadocsError,
    InvalidSchemaError,
    SchemaNotFoundError,
    StoreUnavailableError,
    ValidationFailedError,
)
from dynadocs.infrastructure.persistence.database import (
    close_database,
    get_db_manager,
    init_database,
)

logger = get_logger(__name__)

# Domain error -> (HTTP status, error label)
ERROR_STATUS: dict[type[DynadocsError], tuple[int, str]] = {
    ValidationFailedError: (status.HTTP_400_BAD_REQUEST, "Validation error"),
    InvalidSchemaError: (status.HTTP_400_BAD_REQUEST, "Invalid schema"),
    DuplicateSchemaError: (status.HTTP_409_CONFLICT, "Conflict"),
    SchemaNotFoundError: (status.HTTP_404_NOT_FOUND, "Not found"),
    DocumentNotFoundError: (status.HTTP_404_NOT_FOUND, "Not found"),
    StoreUnavailableError: (status.HTTP_503_SERVICE_UNAVAILABLE, "Service unavailable"),
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events for the application.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control is yielded to the application during its lifetime.
    """
    settings = get_settings()
    configure_logging(settings)

    logger.info(
        "Starting Dynadocs",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    try:
        await init_database()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    logger.info("Shutting down Dynadocs")
    await close_database()
    logger.info("Database connection closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Schema-validated dynamic document store",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_health_check(app)
    register_routes(app)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register health check endpoints.

    Args:
        app: FastAPI application instance.
    """

    @app.get("/health", tags=["health"])
    async def health_check():
        """Basic health check endpoint.

        Returns 200 if the service is running. Does not check
        database connectivity.
        """
        return {
            "status": "healthy",
            "service": "Dynadocs",
            "version": get_settings().app_version,
        }

    @app.get("/ready", tags=["health"])
    async def readiness_check():
        """Readiness check endpoint, including a database connectivity check."""
        db_healthy = await get_db_manager().check_connection()

        if db_healthy:
            return {
                "status": "ready",
                "service": "Dynadocs",
                "version": get_settings().app_version,
                "database": "connected",
            }
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "service": "Dynadocs",
                "database": "disconnected",
            },
        )

    @app.get("/live", tags=["health"])
    async def liveness_check():
        """Liveness check endpoint."""
        return {
            "status": "alive",
            "service": "Dynadocs",
            "version": get_settings().app_version,
        }


def register_routes(app: FastAPI) -> None:
    """Register API routes.

    Args:
        app: FastAPI application instance.
    """
    from dynadocs.infrastructure.api.routes import documents_router, schemas_router

    settings = get_settings()

    app.include_router(
        schemas_router, prefix=f"{settings.api_prefix}/schemas", tags=["schemas"]
    )
    app.include_router(
        documents_router, prefix=f"{settings.api_prefix}/collections", tags=["documents"]
    )

    @app.get(settings.api_prefix, tags=["root"])
    async def api_root():
        """API root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
        }


def error_response(exc: DynadocsError) -> JSONResponse:
    """Render a domain error as a JSON response."""
    status_code, label = status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal error"
    for error_type, mapping in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            status_code, label = mapping
            break

    content: dict = {"error": label, "message": str(exc)}
    if isinstance(exc, ValidationFailedError):
        content["details"] = list(exc.violations)
    elif isinstance(exc, InvalidSchemaError):
        content["details"] = list(exc.errors)
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application instance.
    """

    @app.exception_handler(DynadocsError)
    async def domain_exception_handler(request: Request, exc: DynadocsError):
        """Map domain errors to HTTP status codes."""
        response = error_response(exc)
        log = logger.error if response.status_code >= 500 else logger.info
        log(
            "Request failed",
            path=str(request.url.path),
            method=request.method,
            status_code=response.status_code,
            exc_type=type(exc).__name__,
            error=str(exc),
        )
        return response

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(
            "Unhandled exception",
            path=str(request.url),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "detail": str(exc) if get_settings().debug else "An unexpected error occurred",
            },
        )


def register_middleware(app: FastAPI) -> None:
    """Register custom middleware.

    Args:
        app: FastAPI application instance.
    """

    @app.middleware("http")
    async def logging_middleware(request, call_next):
        """Log every request and propagate a correlation ID."""
        correlation_id = request.headers.get("X-Correlation-ID") or new_correlation_id()
        bind_correlation_id(correlation_id)

        logger.info(
            "Request started",
            method=request.method,
            path=str(request.url.path),
        )

        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=str(request.url.path),
                status_code=response.status_code,
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            clear_context()


# Create the application instance
app = create_app()
