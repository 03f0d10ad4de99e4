"""Repository dependency factories.

The vehicle store is application-scoped: one instance, created on first use
(the application lifespan forces that at startup) from the configured data
file, and discarded at process exit.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings
from src.core.result import Failure

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import VehicleMapRepository


@lru_cache()
def get_vehicle_repository() -> "VehicleMapRepository":
    """Get the vehicle store singleton (app-scoped).

    Loads settings.vehicles_file_path with VehicleJSONFileLoader when set;
    starts empty otherwise.

    Returns:
        VehicleMapRepository instance.

    Raises:
        RuntimeError: If the configured data file cannot be loaded.
    """
    from src.infrastructure.loaders import VehicleJSONFileLoader
    from src.infrastructure.persistence.repositories import VehicleMapRepository

    if settings.vehicles_file_path is None:
        return VehicleMapRepository()

    result = VehicleJSONFileLoader(settings.vehicles_file_path).load()
    if isinstance(result, Failure):
        raise RuntimeError(result.error.message)
    return VehicleMapRepository(result.value)
