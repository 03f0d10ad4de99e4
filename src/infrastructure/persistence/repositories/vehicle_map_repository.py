"""In-memory vehicle store.

Implements VehicleRepository over a dict keyed by vehicle identifier.
The store is the exclusive owner of that dict: vehicles passed in are
copied on insert and every read returns copies.

Architecture:
    - Synchronous, in-memory; every filter is a linear scan
    - One Lock guards the dict and the identifier counter (FastAPI may run
      requests on worker threads)
    - Business failures are returned as Failure(DomainError), never raised

Identifier assignment:
    A vehicle created with id 0 receives the next value of a counter seeded
    with max(existing ids) + 1. The counter only moves forward (also past
    explicitly supplied ids), so deleted identifiers are never handed out
    again.
"""

from collections.abc import Callable, Mapping
from statistics import fmean
from threading import Lock

import structlog

from src.core.constants import MAX_SPEED_LOWER_BOUND, MAX_SPEED_UPPER_BOUND
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.vehicle import Vehicle
from src.domain.enums.fuel_type import FuelType
from src.domain.protocols.vehicle_repository import VehicleMap

logger = structlog.get_logger(__name__)

_RESOURCE_TYPE = "Vehicle"
_NOT_FOUND_MESSAGE = "Vehicle(s) not found"
_ALREADY_EXISTS_MESSAGE = "Vehicle already exists"


def _not_found(resource_id: str) -> Failure[DomainError]:
    return Failure(
        error=NotFoundError(
            code=ErrorCode.VEHICLE_NOT_FOUND,
            message=_NOT_FOUND_MESSAGE,
            resource_type=_RESOURCE_TYPE,
            resource_id=resource_id,
        )
    )


class VehicleMapRepository:
    """Vehicle store backed by a dict.

    Example:
        >>> repo = VehicleMapRepository()
        >>> vehicle = Vehicle(brand="Toyota", registration="ABC-123")
        >>> repo.create(vehicle)
        Success(value=None)
        >>> vehicle.id
        1
    """

    def __init__(self, db: Mapping[int, Vehicle] | None = None) -> None:
        """Initialize the store.

        Args:
            db: Initial vehicles keyed by identifier (usually produced by the
                JSON loader). Copied; None starts an empty store.
        """
        self._db: dict[int, Vehicle] = {
            key: value.copy() for key, value in (db or {}).items()
        }
        self._next_id = max(self._db, default=0) + 1
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._db)

    # =========================================================================
    # Reads
    # =========================================================================

    def find_all(self) -> Result[VehicleMap, DomainError]:
        """Return a copy of every stored vehicle."""
        with self._lock:
            return Success(value={key: value.copy() for key, value in self._db.items()})

    def find_by_id(self, vehicle_id: int) -> Result[Vehicle, DomainError]:
        """Return a copy of one vehicle, or NotFound."""
        with self._lock:
            vehicle = self._db.get(vehicle_id)
            if vehicle is None:
                return _not_found(str(vehicle_id))
            return Success(value=vehicle.copy())

    def find_by_color_and_year(
        self, color: str, year: int
    ) -> Result[VehicleMap, DomainError]:
        """Vehicles with exactly this color and fabrication year."""
        return self._filter(
            lambda v: v.color == color and v.fabrication_year == year,
            f"color={color},year={year}",
        )

    def find_by_brand_and_range_year(
        self, brand: str, start_year: int, end_year: int
    ) -> Result[VehicleMap, DomainError]:
        """Vehicles of a brand fabricated in [start_year, end_year]."""
        return self._filter(
            lambda v: v.brand == brand and start_year <= v.fabrication_year <= end_year,
            f"brand={brand},year={start_year}..{end_year}",
        )

    def find_average_speed_by_brand(self, brand: str) -> Result[float, DomainError]:
        """Mean max speed of a brand; NotFound instead of dividing by zero."""
        return self._average_by_brand(brand, lambda v: v.max_speed)

    def find_average_capacity_by_brand(
        self, brand: str
    ) -> Result[float, DomainError]:
        """Mean passenger capacity of a brand; NotFound when it has no vehicles."""
        return self._average_by_brand(brand, lambda v: v.capacity)

    def find_by_fuel_type(self, fuel_type: str) -> Result[VehicleMap, DomainError]:
        return self._filter(lambda v: v.fuel_type == fuel_type, f"fuel_type={fuel_type}")

    def find_by_transmission_type(
        self, transmission_type: str
    ) -> Result[VehicleMap, DomainError]:
        return self._filter(
            lambda v: v.transmission == transmission_type,
            f"transmission={transmission_type}",
        )

    def find_by_dimensions(
        self,
        min_length: float,
        max_length: float,
        min_width: float,
        max_width: float,
    ) -> Result[VehicleMap, DomainError]:
        """Vehicles whose length and width both fall in the inclusive ranges."""
        return self._filter(
            lambda v: min_length <= v.length <= max_length
            and min_width <= v.width <= max_width,
            f"length={min_length}..{max_length},width={min_width}..{max_width}",
        )

    def find_by_weight_range(
        self, min_weight: float, max_weight: float
    ) -> Result[VehicleMap, DomainError]:
        return self._filter(
            lambda v: min_weight <= v.weight <= max_weight,
            f"weight={min_weight}..{max_weight}",
        )

    # =========================================================================
    # Writes
    # =========================================================================

    def create(self, vehicle: Vehicle) -> Result[None, DomainError]:
        """Insert a vehicle, assigning an identifier when vehicle.id is 0.

        The assigned identifier is written back to the given vehicle, even
        when the insert is then rejected as a duplicate.
        """
        with self._lock:
            if not vehicle.id:
                vehicle.id = self._next_id

            if vehicle.id in self._db:
                return self._conflict(vehicle, "id")
            if any(v.registration == vehicle.registration for v in self._db.values()):
                return self._conflict(vehicle, "registration")

            self._db[vehicle.id] = vehicle.copy()
            self._next_id = max(self._next_id, vehicle.id + 1)

        logger.info(
            "vehicle_created",
            vehicle_id=vehicle.id,
            registration=vehicle.registration,
        )
        return Success(value=None)

    def update_max_speed(
        self, vehicle_id: int, max_speed: float
    ) -> Result[None, DomainError]:
        """Overwrite max speed; the range is checked before the lookup."""
        if not MAX_SPEED_LOWER_BOUND <= max_speed <= MAX_SPEED_UPPER_BOUND:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_MAX_SPEED,
                    message=(
                        f"Max speed must be between {MAX_SPEED_LOWER_BOUND:g} "
                        f"and {MAX_SPEED_UPPER_BOUND:g}"
                    ),
                    field="max_speed",
                )
            )

        with self._lock:
            vehicle = self._db.get(vehicle_id)
            if vehicle is None:
                return _not_found(str(vehicle_id))
            vehicle.max_speed = max_speed

        logger.info("vehicle_max_speed_updated", vehicle_id=vehicle_id, max_speed=max_speed)
        return Success(value=None)

    def update_fuel_type(
        self, vehicle_id: int, fuel_type: str
    ) -> Result[None, DomainError]:
        """Overwrite fuel type; the lookup happens before the value check.

        Accepted values are stored in their canonical lowercase spelling.
        """
        with self._lock:
            vehicle = self._db.get(vehicle_id)
            if vehicle is None:
                return _not_found(str(vehicle_id))

            canonical = FuelType.from_string(fuel_type)
            if canonical is None:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.INVALID_FUEL_TYPE,
                        message=(
                            "Fuel type must be one of: "
                            + ", ".join(FuelType.values())
                        ),
                        field="fuel_type",
                    )
                )
            vehicle.fuel_type = canonical.value

        logger.info(
            "vehicle_fuel_type_updated",
            vehicle_id=vehicle_id,
            fuel_type=canonical.value,
        )
        return Success(value=None)

    def delete(self, vehicle_id: int) -> Result[None, DomainError]:
        with self._lock:
            if self._db.pop(vehicle_id, None) is None:
                return _not_found(str(vehicle_id))

        logger.info("vehicle_deleted", vehicle_id=vehicle_id)
        return Success(value=None)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _filter(
        self, predicate: Callable[[Vehicle], bool], description: str
    ) -> Result[VehicleMap, DomainError]:
        with self._lock:
            matches = {
                key: value.copy() for key, value in self._db.items() if predicate(value)
            }
        if not matches:
            return _not_found(description)
        return Success(value=matches)

    def _average_by_brand(
        self, brand: str, attribute: Callable[[Vehicle], float]
    ) -> Result[float, DomainError]:
        with self._lock:
            values = [attribute(v) for v in self._db.values() if v.brand == brand]
        if not values:
            return _not_found(f"brand={brand}")
        return Success(value=fmean(values))

    def _conflict(self, vehicle: Vehicle, field: str) -> Failure[DomainError]:
        logger.warning(
            "vehicle_create_conflict",
            vehicle_id=vehicle.id,
            conflicting_field=field,
        )
        return Failure(
            error=ConflictError(
                code=ErrorCode.VEHICLE_ALREADY_EXISTS,
                message=_ALREADY_EXISTS_MESSAGE,
                resource_type=_RESOURCE_TYPE,
                conflicting_field=field,
            )
        )
