"""Pytest configuration and shared fixtures.

Provides:
1. Vehicle builders for domain and store tests
2. A seeded store mirroring the sample data set (Toyota, Ford, Fiat)
3. Cache cleanup for the lru_cache container singletons
"""

import pytest

from src.core.container import get_logger, get_vehicle_repository, get_vehicle_service
from src.domain.entities.vehicle import Vehicle
from src.domain.value_objects.dimensions import Dimensions
from src.infrastructure.persistence.repositories import VehicleMapRepository


def make_vehicle(
    vehicle_id: int = 0,
    *,
    brand: str = "Toyota",
    model: str = "Corolla",
    registration: str | None = None,
    color: str = "red",
    fabrication_year: int = 2020,
    capacity: int = 5,
    max_speed: float = 180.0,
    fuel_type: str = "gasoline",
    transmission: str = "manual",
    weight: float = 1300.0,
    height: float = 1.45,
    length: float = 4.6,
    width: float = 1.8,
) -> Vehicle:
    """Helper to create a Vehicle for testing.

    Registration defaults to a value derived from the identifier so that
    vehicles built with different ids never collide.

    Usage:
        vehicle = make_vehicle(3, brand="Ford", max_speed=200.0)
    """
    return Vehicle(
        id=vehicle_id,
        brand=brand,
        model=model,
        registration=registration or f"REG-{vehicle_id:03d}",
        color=color,
        fabrication_year=fabrication_year,
        capacity=capacity,
        max_speed=max_speed,
        fuel_type=fuel_type,
        transmission=transmission,
        weight=weight,
        dimensions=Dimensions(height=height, length=length, width=width),
    )


def seed_vehicles() -> dict[int, Vehicle]:
    """Three Toyotas, a Ford and a Fiat with distinct attributes."""
    vehicles = [
        make_vehicle(1, fabrication_year=2020, max_speed=180.0, capacity=5),
        make_vehicle(
            2,
            model="Hilux",
            color="white",
            fabrication_year=2022,
            max_speed=200.0,
            capacity=5,
            fuel_type="diesel",
            transmission="automatic",
            weight=2100.0,
            length=5.3,
            width=1.9,
        ),
        make_vehicle(
            3,
            model="Yaris",
            fabrication_year=2019,
            max_speed=190.0,
            capacity=4,
            weight=1100.0,
            length=3.9,
            width=1.7,
        ),
        make_vehicle(
            4,
            brand="Ford",
            model="Focus",
            color="blue",
            fabrication_year=2018,
            max_speed=195.0,
            weight=1350.0,
            length=4.4,
            width=1.8,
        ),
        make_vehicle(
            5,
            brand="Fiat",
            model="Uno",
            color="black",
            fabrication_year=2015,
            max_speed=150.0,
            capacity=4,
            fuel_type="gas",
            weight=900.0,
            length=3.8,
            width=1.6,
        ),
    ]
    return {vehicle.id: vehicle for vehicle in vehicles}


@pytest.fixture
def vehicle_factory():
    """Expose make_vehicle to tests."""
    return make_vehicle


@pytest.fixture
def seeded_repository() -> VehicleMapRepository:
    """Fresh store loaded with seed_vehicles()."""
    return VehicleMapRepository(seed_vehicles())


@pytest.fixture
def empty_repository() -> VehicleMapRepository:
    """Fresh empty store."""
    return VehicleMapRepository()


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Reset container singletons so patched settings take effect per test."""
    yield
    get_vehicle_service.cache_clear()
    get_vehicle_repository.cache_clear()
    get_logger.cache_clear()
