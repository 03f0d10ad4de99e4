"""Repository implementations.

Concrete adapters implementing the domain repository protocols.
"""

from src.infrastructure.persistence.repositories.vehicle_map_repository import (
    VehicleMapRepository,
)

__all__ = ["VehicleMapRepository"]
