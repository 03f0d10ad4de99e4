"""
Main FastAPI application entry point.

This module initializes the FastAPI application instance, wires middleware
and exception handlers, and includes the system and vehicles routers.

Run with `python -m src.main` or the `vehicles-api` script; host, port and
reload come from Settings.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from src.core.config import settings
from src.core.container import get_logger, get_vehicle_repository
from src.presentation.routers import system_router, vehicles_router
from src.presentation.routers.api.errors import register_exception_handlers
from src.presentation.routers.api.middleware.request_logging_middleware import (
    RequestLoggingMiddleware,
)
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Configure logging, load the vehicle store from the data file
    - Shutdown: Nothing to release (the store lives in memory)

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.

    Raises:
        RuntimeError: If the configured data file cannot be loaded.
    """
    logger = get_logger()
    try:
        repository = get_vehicle_repository()
    except RuntimeError as e:
        logger.critical(
            "vehicle_store_init_failed",
            error=e,
            vehicles_file_path=str(settings.vehicles_file_path),
        )
        raise

    logger.info(
        "application_started",
        environment=settings.environment.value,
        vehicles=len(repository),
    )

    yield

    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="In-memory vehicle catalog with query and aggregation endpoints",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Middleware runs in reverse order of registration: trace first, then logging
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(TraceMiddleware)

# Register global exception handlers ({"message": ...} error envelope)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(vehicles_router)


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
