"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import VehicleCreateRequest, VehicleMapEnvelope
"""

from src.schemas.common_schemas import MessageResponse, SuccessResponse
from src.schemas.vehicle_schemas import (
    AverageCapacityEnvelope,
    AverageSpeedEnvelope,
    FuelTypeUpdateEnvelope,
    FuelTypeUpdateRequest,
    MaxSpeedUpdateEnvelope,
    MaxSpeedUpdateRequest,
    VehicleCreateRequest,
    VehicleEnvelope,
    VehicleMapEnvelope,
    VehicleResponse,
)

__all__ = [
    "AverageCapacityEnvelope",
    "AverageSpeedEnvelope",
    "FuelTypeUpdateEnvelope",
    "FuelTypeUpdateRequest",
    "MaxSpeedUpdateEnvelope",
    "MaxSpeedUpdateRequest",
    "MessageResponse",
    "SuccessResponse",
    "VehicleCreateRequest",
    "VehicleEnvelope",
    "VehicleMapEnvelope",
    "VehicleResponse",
]
