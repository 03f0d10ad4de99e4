"""Service dependency factories."""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.container.repositories import get_vehicle_repository

if TYPE_CHECKING:
    from src.domain.protocols.vehicle_service_protocol import VehicleServiceProtocol


@lru_cache()
def get_vehicle_service() -> "VehicleServiceProtocol":
    """Get the vehicle facade singleton (app-scoped).

    Returns:
        VehicleServiceProtocol backed by the vehicle store.

    Usage:
        # Presentation Layer (FastAPI Depends)
        @router.get("")
        async def list_vehicles(
            service: VehicleServiceProtocol = Depends(get_vehicle_service),
        ): ...

        # Tests
        app.dependency_overrides[get_vehicle_service] = lambda: service
    """
    from src.application.services.vehicle_service import VehicleService

    return VehicleService(get_vehicle_repository())
