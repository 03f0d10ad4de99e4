"""VehicleRepository protocol for vehicle storage.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol (in-memory map today; a
persistent store can replace it without touching the HTTP layer).

Every operation is synchronous and returns a Result: business failures
(missing vehicle, empty filter, duplicate, invalid value) travel as
DomainError values, never as exceptions.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities.vehicle import Vehicle

type VehicleMap = dict[int, Vehicle]
"""Vehicles keyed by identifier."""


class VehicleRepository(Protocol):
    """Vehicle repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_all: All vehicles
        find_by_id: One vehicle by identifier
        create: Insert a vehicle, assigning an identifier when absent
        find_by_color_and_year: Exact color and year
        find_by_brand_and_range_year: Exact brand, inclusive year range
        find_average_speed_by_brand: Mean max speed of a brand
        find_average_capacity_by_brand: Mean passenger capacity of a brand
        find_by_fuel_type: Exact fuel type
        find_by_transmission_type: Exact transmission type
        find_by_dimensions: Inclusive length and width ranges
        find_by_weight_range: Inclusive weight range
        update_max_speed: Bounded max speed update
        update_fuel_type: Canonical fuel type update
        delete: Remove a vehicle

    Example Implementation:
        >>> class VehicleMapRepository:
        ...     def find_all(self) -> Result[VehicleMap, DomainError]:
        ...         return Success(value=dict(self._db))
    """

    def find_all(self) -> Result[VehicleMap, DomainError]:
        """Return a copy of every stored vehicle.

        Returns:
            Success with a (possibly empty) mapping. Never fails.
        """
        ...

    def find_by_id(self, vehicle_id: int) -> Result[Vehicle, DomainError]:
        """Find a vehicle by identifier.

        Args:
            vehicle_id: Vehicle identifier.

        Returns:
            Success(vehicle copy), or Failure(NotFoundError).
        """
        ...

    def create(self, vehicle: Vehicle) -> Result[None, DomainError]:
        """Insert a vehicle.

        When vehicle.id is 0 a fresh identifier is assigned and written back
        to the given object.

        Args:
            vehicle: Vehicle to insert.

        Returns:
            Success(None), or Failure(ConflictError) when the identifier or
            the registration is already stored.
        """
        ...

    def find_by_color_and_year(
        self, color: str, year: int
    ) -> Result[VehicleMap, DomainError]:
        """Find vehicles with exactly this color and fabrication year.

        Returns:
            Success(mapping), or Failure(NotFoundError) when nothing matches.
        """
        ...

    def find_by_brand_and_range_year(
        self, brand: str, start_year: int, end_year: int
    ) -> Result[VehicleMap, DomainError]:
        """Find vehicles of a brand fabricated in [start_year, end_year].

        The caller is responsible for start_year <= end_year.

        Returns:
            Success(mapping), or Failure(NotFoundError) when nothing matches.
        """
        ...

    def find_average_speed_by_brand(self, brand: str) -> Result[float, DomainError]:
        """Mean max speed over the vehicles of a brand.

        Returns:
            Success(mean), or Failure(NotFoundError) when the brand has no
            vehicles.
        """
        ...

    def find_average_capacity_by_brand(
        self, brand: str
    ) -> Result[float, DomainError]:
        """Mean passenger capacity over the vehicles of a brand.

        Returns:
            Success(mean), or Failure(NotFoundError) when the brand has no
            vehicles.
        """
        ...

    def find_by_fuel_type(self, fuel_type: str) -> Result[VehicleMap, DomainError]:
        """Find vehicles with exactly this fuel type."""
        ...

    def find_by_transmission_type(
        self, transmission_type: str
    ) -> Result[VehicleMap, DomainError]:
        """Find vehicles with exactly this transmission type."""
        ...

    def find_by_dimensions(
        self,
        min_length: float,
        max_length: float,
        min_width: float,
        max_width: float,
    ) -> Result[VehicleMap, DomainError]:
        """Find vehicles whose length and width fall in the inclusive ranges.

        Returns:
            Success(mapping), or Failure(NotFoundError) when nothing matches.
        """
        ...

    def find_by_weight_range(
        self, min_weight: float, max_weight: float
    ) -> Result[VehicleMap, DomainError]:
        """Find vehicles whose weight falls in [min_weight, max_weight]."""
        ...

    def update_max_speed(
        self, vehicle_id: int, max_speed: float
    ) -> Result[None, DomainError]:
        """Overwrite the max speed of a vehicle.

        The range [0, 500] is checked before the vehicle is looked up.

        Returns:
            Success(None), Failure(ValidationError) when out of range, or
            Failure(NotFoundError) when the vehicle does not exist.
        """
        ...

    def update_fuel_type(
        self, vehicle_id: int, fuel_type: str
    ) -> Result[None, DomainError]:
        """Overwrite the fuel type of a vehicle.

        The vehicle is looked up before the value is checked against the
        canonical fuel types.

        Returns:
            Success(None), Failure(NotFoundError) when the vehicle does not
            exist, or Failure(ValidationError) for a non-canonical value.
        """
        ...

    def delete(self, vehicle_id: int) -> Result[None, DomainError]:
        """Remove a vehicle.

        Returns:
            Success(None), or Failure(NotFoundError).
        """
        ...
