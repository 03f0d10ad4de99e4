"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_vehicle_service

The container is organized into modules by concern:
- infrastructure: Core services (logging)
- repositories: Vehicle store (loaded from the startup data file)
- services: Vehicle facade consumed by routers

All factories are application-scoped singletons (lru_cache). Routers receive
them through FastAPI Depends, so tests swap them with
app.dependency_overrides.
"""

from src.core.container.infrastructure import get_logger
from src.core.container.repositories import get_vehicle_repository
from src.core.container.services import get_vehicle_service

__all__ = [
    "get_logger",
    "get_vehicle_repository",
    "get_vehicle_service",
]
