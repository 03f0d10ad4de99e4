"""VehicleServiceProtocol - capability consumed by the HTTP layer.

Routers depend on this protocol rather than on a concrete store, so the
store can be substituted without touching the boundary. Signatures match
VehicleRepository one-to-one.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities.vehicle import Vehicle
from src.domain.protocols.vehicle_repository import VehicleMap


class VehicleServiceProtocol(Protocol):
    """Vehicle query and command capability."""

    def find_all(self) -> Result[VehicleMap, DomainError]: ...

    def find_by_id(self, vehicle_id: int) -> Result[Vehicle, DomainError]: ...

    def create(self, vehicle: Vehicle) -> Result[None, DomainError]: ...

    def find_by_color_and_year(
        self, color: str, year: int
    ) -> Result[VehicleMap, DomainError]: ...

    def find_by_brand_and_range_year(
        self, brand: str, start_year: int, end_year: int
    ) -> Result[VehicleMap, DomainError]: ...

    def find_average_speed_by_brand(
        self, brand: str
    ) -> Result[float, DomainError]: ...

    def find_average_capacity_by_brand(
        self, brand: str
    ) -> Result[float, DomainError]: ...

    def find_by_fuel_type(
        self, fuel_type: str
    ) -> Result[VehicleMap, DomainError]: ...

    def find_by_transmission_type(
        self, transmission_type: str
    ) -> Result[VehicleMap, DomainError]: ...

    def find_by_dimensions(
        self,
        min_length: float,
        max_length: float,
        min_width: float,
        max_width: float,
    ) -> Result[VehicleMap, DomainError]: ...

    def find_by_weight_range(
        self, min_weight: float, max_weight: float
    ) -> Result[VehicleMap, DomainError]: ...

    def update_max_speed(
        self, vehicle_id: int, max_speed: float
    ) -> Result[None, DomainError]: ...

    def update_fuel_type(
        self, vehicle_id: int, fuel_type: str
    ) -> Result[None, DomainError]: ...

    def delete(self, vehicle_id: int) -> Result[None, DomainError]: ...
