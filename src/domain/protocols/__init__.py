"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import VehicleRepository, VehicleServiceProtocol
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.vehicle_repository import VehicleMap, VehicleRepository
from src.domain.protocols.vehicle_service_protocol import VehicleServiceProtocol

__all__ = [
    "LoggerProtocol",
    "VehicleMap",
    "VehicleRepository",
    "VehicleServiceProtocol",
]
