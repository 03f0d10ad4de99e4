"""Vehicle request and response schemas.

Pydantic schemas for the vehicle endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client), wrapped in the success envelope
- Entity-to-schema conversion methods

JSON keys follow the public vehicle shape: `year` is the fabrication year,
`passengers` the capacity, and the dimensions are flattened into `height`,
`length` and `width`.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.vehicle import Vehicle
from src.domain.protocols.vehicle_repository import VehicleMap
from src.domain.value_objects.dimensions import Dimensions
from src.schemas.common_schemas import SuccessResponse


# =============================================================================
# Request Schemas
# =============================================================================


class VehicleCreateRequest(BaseModel):
    """Request body for POST /vehicles.

    Required fields are declared first, in the order missing ones are
    reported. Parsing is strict: a string is never coerced into a number.
    """

    model_config = ConfigDict(strict=True)

    brand: str = Field(..., description="Manufacturer", examples=["Toyota"])
    model: str = Field(..., description="Model name", examples=["Corolla"])
    registration: str = Field(..., description="Unique registration", examples=["ABC-123"])
    color: str = Field(..., description="Body color", examples=["red"])
    year: int = Field(..., description="Fabrication year", examples=[2020])
    id: int | None = Field(None, ge=0, description="Identifier (assigned when 0 or absent)")
    passengers: int = Field(0, description="Passenger capacity")
    max_speed: float = Field(0.0, description="Maximum speed")
    fuel_type: str = Field("", description="Fuel type")
    transmission: str = Field("", description="Transmission type")
    weight: float = Field(0.0, description="Weight")
    height: float = Field(0.0, description="Height")
    length: float = Field(0.0, description="Length")
    width: float = Field(0.0, description="Width")

    def to_entity(self) -> Vehicle:
        """Convert request to a domain Vehicle."""
        return Vehicle(
            id=self.id or 0,
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
            dimensions=Dimensions(height=self.height, length=self.length, width=self.width),
        )


class MaxSpeedUpdateRequest(BaseModel):
    """Request body for PATCH /vehicles/{id}/update-speed."""

    model_config = ConfigDict(strict=True)

    max_speed: float = Field(..., description="New maximum speed", examples=[200.0])


class FuelTypeUpdateRequest(BaseModel):
    """Request body for PATCH /vehicles/{id}/update-fuel."""

    model_config = ConfigDict(strict=True)

    fuel_type: str = Field(..., description="New fuel type", examples=["diesel"])


# =============================================================================
# Response Schemas
# =============================================================================


class VehicleResponse(BaseModel):
    """Single vehicle in public JSON shape."""

    id: int
    brand: str
    model: str
    registration: str
    color: str
    year: int
    passengers: int
    max_speed: float
    fuel_type: str
    transmission: str
    weight: float
    height: float
    length: float
    width: float

    @classmethod
    def from_entity(cls, vehicle: Vehicle) -> "VehicleResponse":
        """Convert domain entity to response schema.

        Args:
            vehicle: Vehicle from the service.

        Returns:
            VehicleResponse for API response.
        """
        return cls(
            id=vehicle.id,
            brand=vehicle.brand,
            model=vehicle.model,
            registration=vehicle.registration,
            color=vehicle.color,
            year=vehicle.fabrication_year,
            passengers=vehicle.capacity,
            max_speed=vehicle.max_speed,
            fuel_type=vehicle.fuel_type,
            transmission=vehicle.transmission,
            weight=vehicle.weight,
            height=vehicle.height,
            length=vehicle.length,
            width=vehicle.width,
        )


class VehicleEnvelope(SuccessResponse):
    """Success envelope around one vehicle."""

    data: VehicleResponse

    @classmethod
    def from_entity(cls, vehicle: Vehicle) -> "VehicleEnvelope":
        return cls(data=VehicleResponse.from_entity(vehicle))


class VehicleMapEnvelope(SuccessResponse):
    """Success envelope around a collection of vehicles keyed by id."""

    count: int = Field(..., description="Number of vehicles in data")
    data: dict[int, VehicleResponse]

    @classmethod
    def from_map(cls, vehicles: VehicleMap) -> "VehicleMapEnvelope":
        """Convert a service mapping to the collection envelope.

        Args:
            vehicles: Vehicles keyed by identifier.

        Returns:
            VehicleMapEnvelope with count and data.
        """
        data = {key: VehicleResponse.from_entity(value) for key, value in vehicles.items()}
        return cls(count=len(data), data=data)


class AverageSpeedData(BaseModel):
    brand: str
    average_speed: float


class AverageSpeedEnvelope(SuccessResponse):
    """Success envelope for GET /vehicles/average-speed/brand/{brand}."""

    data: AverageSpeedData


class AverageCapacityData(BaseModel):
    brand: str
    average_capacity: float


class AverageCapacityEnvelope(SuccessResponse):
    """Success envelope for GET /vehicles/average-capacity/brand/{brand}."""

    data: AverageCapacityData


class MaxSpeedUpdateData(BaseModel):
    id: int
    max_speed: float


class MaxSpeedUpdateEnvelope(SuccessResponse):
    data: MaxSpeedUpdateData


class FuelTypeUpdateData(BaseModel):
    id: int
    fuel_type: str


class FuelTypeUpdateEnvelope(SuccessResponse):
    data: FuelTypeUpdateData
