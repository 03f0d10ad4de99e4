"""Domain enums for business logic.

Available Enums:
    - FuelType: Canonical fuel types accepted by the fuel type update
"""

from src.domain.enums.fuel_type import FuelType

__all__ = ["FuelType"]
