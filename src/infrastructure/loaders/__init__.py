"""Startup data loaders."""

from src.infrastructure.loaders.vehicle_json_loader import (
    VehicleJSONFileLoader,
    VehicleRecord,
)

__all__ = ["VehicleJSONFileLoader", "VehicleRecord"]
