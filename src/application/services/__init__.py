"""Application services."""

from src.application.services.vehicle_service import VehicleService

__all__ = ["VehicleService"]
