"""
FastAPI application entry point for the GD Farms backend.

This module builds the FastAPI app with middleware, CORS, logging, error
envelopes, and registers all API routers.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from slowapi.errors import RateLimitExceeded

from gdfarms.config import Settings, settings as default_settings
from gdfarms.core.exceptions import NotFoundError, StoreError
from gdfarms.core.rate_limit import create_limiter
from gdfarms.database import Store
from gdfarms.services.user_service import UserService
from gdfarms.routers import analytics, goals, items, settings as settings_router, users

# Configure logging
logging.basicConfig(
    level=default_settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, **extra},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Translate error kinds into {success: false} envelopes."""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return _error(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error(
            f"Store error on {request.method} {request.url.path}: {exc.message}"
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        return _error(
            422,
            "Invalid request",
            errors=jsonable_encoder(exc.errors()),
        )

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        return _error(
            status.HTTP_429_TOO_MANY_REQUESTS,
            "Rate limit exceeded. Please try again later.",
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and unsupported methods both count as a missing route
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND,
            status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            return _error(status.HTTP_404_NOT_FOUND, "Endpoint not found")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Global exception: {exc}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(
    app_settings: Optional[Settings] = None, store: Optional[Store] = None
) -> FastAPI:
    """
    Build the application.

    A Store passed in by the caller is used as-is and left open on shutdown;
    otherwise one is created from the settings and disposed with the app.
    """
    app_settings = app_settings or default_settings
    owns_store = store is None
    if store is None:
        store = Store.from_settings(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for startup and shutdown events.
        """
        # Startup
        logger.info("Initializing database...")
        try:
            store.init_schema()
            now = store.ping()
            logger.info(f"Connected to database: {now}")
        except StoreError as exc:
            logger.error(f"Database connection failed: {exc.message}")

        yield

        # Shutdown
        logger.info("Shutting down application...")
        if owns_store:
            store.dispose()

    app = FastAPI(
        title="GD Farms API",
        description="Inventory, settings, goals and profit analytics",
        version="1.0.0",
        lifespan=lifespan,
    )
    limiter = create_limiter(app_settings)
    app.state.store = store
    app.state.settings = app_settings
    app.state.limiter = limiter
    app.state.user_service = UserService.from_settings(app_settings)

    register_exception_handlers(app)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add GZip compression
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Register routers
    app.include_router(
        users.create_router(limiter, app_settings.USER_INIT_RATE_LIMIT),
        prefix="/api/user",
        tags=["user"],
    )
    app.include_router(items.router, prefix="/api/items", tags=["items"])
    app.include_router(analytics.router, prefix="/api/analytics", tags=["analytics"])
    app.include_router(settings_router.router, prefix="/api/settings", tags=["settings"])
    app.include_router(goals.router, prefix="/api/goals", tags=["goals"])

    @app.get("/")
    async def root():
        """Root endpoint for health check."""
        return {"success": True, "message": "GD Farms backend is running"}

    @app.get("/api/health")
    def health():
        """Health check endpoint."""
        try:
            store.ping()
            database = "connected"
        except StoreError:
            database = "unavailable"
        return {"success": True, "status": "healthy", "database": database}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "gdfarms.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
    )
