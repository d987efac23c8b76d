"""Main FastAPI application entry point."""

import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from core.config import settings
from core.logging import setup_logging
from infrastructure.database.session import Database

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Verify the database before serving and close the pool after draining.

    Raising during startup makes uvicorn exit non-zero before it binds the
    listening socket.
    """
    database: Database | None = app.state.database
    if database is None:
        database = Database.from_settings(settings)
        app.state.database = database

    logger.info("database_check_started")
    check = await database.check_connection()
    if not check.connected:
        logger.error("database_unreachable", error=check.error)
        await database.dispose()
        raise RuntimeError(f"Database connection failed: {check.error}")
    logger.info("database_check_passed", server_time=str(check.timestamp))

    yield

    logger.info("shutdown_started")
    try:
        await database.dispose()
    except Exception:
        app.state.shutdown_failed = True
        logger.exception("shutdown_failed")
        raise
    logger.info("shutdown_completed")


def create_app(database: Database | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``database`` is created from settings during startup when not supplied.
    """
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## User Profile Service\n\n"
            "Create, read and replace user profiles.\n\n"
            "### Envelope\n"
            "Every response carries `success`. Successful responses add `data` "
            "(and `count` or `message` where relevant); failures add `error` and, "
            "for validation failures, `details`."
        ),
        version=settings.app_version,
        debug=settings.debug,
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check and service description",
            },
            {
                "name": "profiles",
                "description": "User profile operations",
            },
        ],
    )
    app.state.database = database
    app.state.shutdown_failed = False

    # Tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


def run() -> None:
    """Serve the application until SIGINT/SIGTERM, then drain and exit."""
    import uvicorn

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    if app.state.shutdown_failed:
        sys.exit(1)


if __name__ == "__main__":
    run()
