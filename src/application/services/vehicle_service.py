"""Vehicle service (facade).

Forwards every vehicle operation to the repository unchanged: same
arguments, same Result. It adds no validation and no logic; it exists so the
HTTP layer depends on VehicleServiceProtocol instead of a concrete store.
"""

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities.vehicle import Vehicle
from src.domain.protocols.vehicle_repository import VehicleMap, VehicleRepository


class VehicleService:
    """Pass-through facade over a VehicleRepository.

    Dependencies (injected via constructor):
        - VehicleRepository: Owner of the vehicle records
    """

    def __init__(self, repository: VehicleRepository) -> None:
        """Initialize service with its repository.

        Args:
            repository: Vehicle repository to forward to.
        """
        self._repository = repository

    def find_all(self) -> Result[VehicleMap, DomainError]:
        return self._repository.find_all()

    def find_by_id(self, vehicle_id: int) -> Result[Vehicle, DomainError]:
        return self._repository.find_by_id(vehicle_id)

    def create(self, vehicle: Vehicle) -> Result[None, DomainError]:
        return self._repository.create(vehicle)

    def find_by_color_and_year(
        self, color: str, year: int
    ) -> Result[VehicleMap, DomainError]:
        return self._repository.find_by_color_and_year(color, year)

    def find_by_brand_and_range_year(
        self, brand: str, start_year: int, end_year: int
    ) -> Result[VehicleMap, DomainError]:
        return self._repository.find_by_brand_and_range_year(brand, start_year, end_year)

    def find_average_speed_by_brand(self, brand: str) -> Result[float, DomainError]:
        return self._repository.find_average_speed_by_brand(brand)

    def find_average_capacity_by_brand(
        self, brand: str
    ) -> Result[float, DomainError]:
        return self._repository.find_average_capacity_by_brand(brand)

    def find_by_fuel_type(self, fuel_type: str) -> Result[VehicleMap, DomainError]:
        return self._repository.find_by_fuel_type(fuel_type)

    def find_by_transmission_type(
        self, transmission_type: str
    ) -> Result[VehicleMap, DomainError]:
        return self._repository.find_by_transmission_type(transmission_type)

    def find_by_dimensions(
        self,
        min_length: float,
        max_length: float,
        min_width: float,
        max_width: float,
    ) -> Result[VehicleMap, DomainError]:
        return self._repository.find_by_dimensions(
            min_length, max_length, min_width, max_width
        )

    def find_by_weight_range(
        self, min_weight: float, max_weight: float
    ) -> Result[VehicleMap, DomainError]:
        return self._repository.find_by_weight_range(min_weight, max_weight)

    def update_max_speed(
        self, vehicle_id: int, max_speed: float
    ) -> Result[None, DomainError]:
        return self._repository.update_max_speed(vehicle_id, max_speed)

    def update_fuel_type(
        self, vehicle_id: int, fuel_type: str
    ) -> Result[None, DomainError]:
        return self._repository.update_fuel_type(vehicle_id, fuel_type)

    def delete(self, vehicle_id: int) -> Result[None, DomainError]:
        return self._repository.delete(vehicle_id)
