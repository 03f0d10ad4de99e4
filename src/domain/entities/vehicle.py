"""Vehicle domain entity.

The only entity of the service. Vehicles are owned by the vehicle store;
every read hands out an independent copy (see Vehicle.copy), so callers
cannot change stored state through a result.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Mutable: the store assigns `id` on create and updates max speed and
      fuel type in place
    - Attribute defaults mirror an empty JSON field (0, 0.0, "")

Usage:
    from src.domain.entities import Vehicle
    from src.domain.value_objects import Dimensions

    vehicle = Vehicle(
        brand="Toyota",
        model="Corolla",
        registration="ABC-123",
        color="red",
        fabrication_year=2020,
        max_speed=180.0,
        dimensions=Dimensions(height=1.4, length=4.6, width=1.8),
    )
"""

from dataclasses import dataclass, field, replace

from src.domain.value_objects.dimensions import Dimensions


@dataclass(kw_only=True)
class Vehicle:
    """A vehicle record.

    Attributes:
        id: Unique positive identifier; 0 means "not assigned yet".
        brand: Manufacturer name.
        model: Model name.
        registration: Registration (plate) string, unique in the store.
        color: Body color.
        fabrication_year: Year of fabrication.
        capacity: Passenger capacity.
        max_speed: Maximum speed, constrained to [0, 500] on update.
        fuel_type: Fuel type text, constrained to FuelType on update.
        transmission: Transmission type.
        weight: Weight of the vehicle.
        dimensions: Height, length and width.
    """

    id: int = 0
    brand: str = ""
    model: str = ""
    registration: str = ""
    color: str = ""
    fabrication_year: int = 0
    capacity: int = 0
    max_speed: float = 0.0
    fuel_type: str = ""
    transmission: str = ""
    weight: float = 0.0
    dimensions: Dimensions = field(default_factory=Dimensions)

    @property
    def height(self) -> float:
        """Height from dimensions."""
        return self.dimensions.height

    @property
    def length(self) -> float:
        """Length from dimensions."""
        return self.dimensions.length

    @property
    def width(self) -> float:
        """Width from dimensions."""
        return self.dimensions.width

    def copy(self) -> "Vehicle":
        """Return an independent copy.

        All fields are immutable values (Dimensions is frozen), so a shallow
        replace is enough.
        """
        return replace(self)
