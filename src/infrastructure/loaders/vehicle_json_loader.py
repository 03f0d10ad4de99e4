"""JSON file loader for the initial vehicle data set.

Reads a UTF-8 JSON array of vehicle objects (same keys as the HTTP API) and
produces the identifier -> Vehicle mapping the store is constructed with.

File format:
    [
        {"id": 1, "brand": "Toyota", "model": "Corolla",
         "registration": "ABC-123", "color": "red", "year": 2020,
         "passengers": 5, "max_speed": 180.0, "fuel_type": "gasoline",
         "transmission": "manual", "weight": 1300.0,
         "height": 1.4, "length": 4.6, "width": 1.8},
        ...
    ]

Records must carry a positive id; ids and registrations must be unique.
"""

from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.vehicle import Vehicle
from src.domain.value_objects.dimensions import Dimensions

logger = structlog.get_logger(__name__)


class VehicleRecord(BaseModel):
    """One vehicle object of the data file."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(..., gt=0)
    brand: str = ""
    model: str = ""
    registration: str = ""
    color: str = ""
    year: int = 0
    passengers: int = 0
    max_speed: float = 0.0
    fuel_type: str = ""
    transmission: str = ""
    weight: float = 0.0
    height: float = 0.0
    length: float = 0.0
    width: float = 0.0

    def to_entity(self) -> Vehicle:
        """Convert the record to a domain Vehicle."""
        return Vehicle(
            id=self.id,
            brand=self.brand,
            model=self.model,
            registration=self.registration,
            color=self.color,
            fabrication_year=self.year,
            capacity=self.passengers,
            max_speed=self.max_speed,
            fuel_type=self.fuel_type,
            transmission=self.transmission,
            weight=self.weight,
            dimensions=Dimensions(
                height=self.height,
                length=self.length,
                width=self.width,
            ),
        )


_RECORDS_ADAPTER = TypeAdapter(list[VehicleRecord])


class VehicleJSONFileLoader:
    """Load vehicles from a JSON file.

    Example:
        >>> loader = VehicleJSONFileLoader(Path("data/vehicles.json"))
        >>> match loader.load():
        ...     case Success(value=db):
        ...         repository = VehicleMapRepository(db)
        ...     case Failure(error=error):
        ...         print(error.message)
    """

    def __init__(self, path: Path | str) -> None:
        """Initialize loader.

        Args:
            path: Location of the JSON file.
        """
        self._path = Path(path)

    def load(self) -> Result[dict[int, Vehicle], DomainError]:
        """Read and validate the file.

        Returns:
            Success(mapping keyed by id), or Failure(DomainError) with
            VEHICLE_DATA_LOAD_FAILED when the file is unreadable, is not a
            JSON array of valid vehicles, or repeats an id or registration.
        """
        try:
            raw = self._path.read_bytes()
        except OSError as e:
            logger.error("vehicle_data_read_failed", path=str(self._path), error=str(e))
            return self._failure(f"Cannot read vehicle data file: {e.strerror or e}")

        try:
            records = _RECORDS_ADAPTER.validate_json(raw)
        except PydanticValidationError as e:
            logger.error(
                "vehicle_data_invalid",
                path=str(self._path),
                error_count=e.error_count(),
            )
            return self._failure(f"Invalid vehicle data file: {e.error_count()} error(s)")

        db: dict[int, Vehicle] = {}
        registrations: set[str] = set()
        for record in records:
            if record.id in db:
                return self._failure(f"Duplicate vehicle id in data file: {record.id}")
            if record.registration in registrations:
                return self._failure(
                    f"Duplicate registration in data file: {record.registration}"
                )
            db[record.id] = record.to_entity()
            registrations.add(record.registration)

        logger.info("vehicle_data_loaded", path=str(self._path), vehicle_count=len(db))
        return Success(value=db)

    def _failure(self, message: str) -> Failure[DomainError]:
        return Failure(
            error=DomainError(
                code=ErrorCode.VEHICLE_DATA_LOAD_FAILED,
                message=message,
                details={"path": str(self._path)},
            )
        )
