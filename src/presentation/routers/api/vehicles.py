"""Vehicles resource router.

Endpoints:
    GET    /vehicles                                               - List all vehicles
    POST   /vehicles                                               - Create a vehicle
    GET    /vehicles/brand/{brand}/between/{start_year}/{end_year} - Filter by brand and years
    GET    /vehicles/color/{color}/year/{year}                     - Filter by color and year
    GET    /vehicles/average-speed/brand/{brand}                   - Average max speed of a brand
    GET    /vehicles/average-capacity/brand/{brand}                - Average capacity of a brand
    GET    /vehicles/fuel-type/{fuel_type}                         - Filter by fuel type
    GET    /vehicles/transmission/{transmission}                   - Filter by transmission
    GET    /vehicles/dimensions?length=min-max&width=min-max       - Filter by length and width
    GET    /vehicles/weight?min=&max=                              - Filter by weight
    PATCH  /vehicles/{id}/update-speed                             - Replace max speed
    PATCH  /vehicles/{id}/update-fuel                              - Replace fuel type
    DELETE /vehicles/{id}                                          - Delete a vehicle
    GET    /vehicles/{id}                                          - Get one vehicle

Store failures arrive as DomainError values and are mapped to
ApplicationError here; ErrorResponseBuilder picks the status code.
"""

from typing import Annotated, TypeVar

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.constants import RANGE_SEPARATOR
from src.core.container import get_vehicle_service
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, NotFoundError, ValidationError
from src.core.result import Failure
from src.domain.enums.fuel_type import FuelType
from src.domain.protocols.vehicle_service_protocol import VehicleServiceProtocol
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.schemas.vehicle_schemas import (
    AverageCapacityData,
    AverageCapacityEnvelope,
    AverageSpeedData,
    AverageSpeedEnvelope,
    FuelTypeUpdateData,
    FuelTypeUpdateEnvelope,
    FuelTypeUpdateRequest,
    MaxSpeedUpdateData,
    MaxSpeedUpdateEnvelope,
    MaxSpeedUpdateRequest,
    VehicleCreateRequest,
    VehicleEnvelope,
    VehicleMapEnvelope,
)

INVALID_BODY_MESSAGE = "Invalid body request"
INVALID_DIMENSIONS_MESSAGE = "Invalid dimensions"

BodyT = TypeVar("BodyT", bound=BaseModel)

router = APIRouter(prefix="/vehicles", tags=["Vehicles"])

VehicleServiceDep = Annotated[VehicleServiceProtocol, Depends(get_vehicle_service)]
VehicleId = Annotated[int, Path(description="Vehicle identifier")]


# =============================================================================
# Error Mapping (DomainError → ApplicationError)
# =============================================================================


def _map_vehicle_error(error: DomainError) -> ApplicationError:
    """Map store DomainError to ApplicationError.

    Args:
        error: Error value returned by the service.

    Returns:
        ApplicationError with appropriate code and the original message.
    """
    if isinstance(error, NotFoundError):
        code = ApplicationErrorCode.NOT_FOUND
    elif isinstance(error, ConflictError):
        code = ApplicationErrorCode.CONFLICT
    elif isinstance(error, ValidationError):
        code = ApplicationErrorCode.COMMAND_VALIDATION_FAILED
    else:
        code = ApplicationErrorCode.COMMAND_EXECUTION_FAILED

    return ApplicationError(code=code, message=error.message, domain_error=error)


def _error_response(error: DomainError) -> JSONResponse:
    return ErrorResponseBuilder.from_application_error(_map_vehicle_error(error))


def _invalid(code: ErrorCode, message: str, field: str | None = None) -> JSONResponse:
    return _error_response(ValidationError(code=code, message=message, field=field))


# =============================================================================
# Request Parsing Helpers
# =============================================================================


async def _parse_body(
    request: Request, schema: type[BodyT]
) -> BodyT | JSONResponse:
    """Parse a JSON body, reporting the first missing field by name.

    Fields are checked in declaration order, so a body lacking several
    required fields reports the first one declared on the schema.

    Args:
        request: Incoming request.
        schema: Pydantic model for the body.

    Returns:
        Parsed model, or a 400 JSONResponse when the body is unusable.
    """
    raw = await request.body()
    try:
        return schema.model_validate_json(raw)
    except PydanticValidationError as e:
        missing = {
            err["loc"][0]
            for err in e.errors()
            if err["type"] == "missing" and len(err["loc"]) == 1
        }
        for field_name in schema.model_fields:
            if field_name in missing:
                return _invalid(
                    ErrorCode.VALIDATION_FAILED, f"{field_name} is required", field_name
                )
        return _invalid(ErrorCode.INVALID_INPUT, INVALID_BODY_MESSAGE)


def _parse_range(value: str) -> tuple[float, float] | None:
    """Parse a hyphen-joined `min-max` pair into two floats.

    Example:
        >>> _parse_range("4.5-5.2")
        (4.5, 5.2)
        >>> _parse_range("4.5") is None
        True
    """
    parts = value.split(RANGE_SEPARATOR)
    if len(parts) != 2:
        return None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None


# =============================================================================
# Collection Endpoints
# =============================================================================


@router.get(
    "",
    response_model=VehicleMapEnvelope,
    summary="List vehicles",
)
async def list_vehicles(service: VehicleServiceDep) -> VehicleMapEnvelope | JSONResponse:
    """List every stored vehicle.

    GET /vehicles → 200 OK
    """
    result = service.find_all()
    if isinstance(result, Failure):
        return _error_response(result.error)
    return VehicleMapEnvelope.from_map(result.value)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=VehicleEnvelope,
    summary="Create vehicle",
    responses={
        400: {"description": "Missing field or malformed body"},
        409: {"description": "Identifier or registration already used"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": VehicleCreateRequest.model_json_schema()}
            },
        }
    },
)
async def create_vehicle(
    request: Request,
    service: VehicleServiceDep,
) -> VehicleEnvelope | JSONResponse:
    """Create a vehicle.

    POST /vehicles → 201 Created

    The identifier is assigned by the store when absent or 0.

    Args:
        request: FastAPI request object (body parsed manually so that a
            missing field is reported by name).
        service: Vehicle service (injected).

    Returns:
        VehicleEnvelope with the stored vehicle.
        JSONResponse with error message on failure.
    """
    parsed = await _parse_body(request, VehicleCreateRequest)
    if isinstance(parsed, JSONResponse):
        return parsed

    vehicle = parsed.to_entity()
    result = service.create(vehicle)
    if isinstance(result, Failure):
        return _error_response(result.error)

    return VehicleEnvelope.from_entity(vehicle)


@router.get(
    "/brand/{brand}/between/{start_year}/{end_year}",
    response_model=VehicleMapEnvelope,
    summary="Vehicles of a brand fabricated between two years",
)
async def list_by_brand_and_years(
    service: VehicleServiceDep,
    brand: Annotated[str, Path(description="Brand (exact match)")],
    start_year: Annotated[int, Path(description="First year (inclusive)")],
    end_year: Annotated[int, Path(description="Last year (inclusive)")],
) -> VehicleMapEnvelope | JSONResponse:
    """GET /vehicles/brand/{brand}/between/{start_year}/{end_year} → 200 OK"""
    result = service.find_by_brand_and_range_year(brand, start_year, end_year)
    if isinstance(result, Failure):
        return _error_response(result.error)
    return VehicleMapEnvelope.from_map(result.value)


@router.get(
    "/color/{color}/year/{year}",
    response_model=VehicleMapEnvelope,
    summary="Vehicles of a color fabricated in a year",
)
async def list_by_color_and_year(
    service: VehicleServiceDep,
    color: Annotated[str, Path(description="Color (exact match)")],
    year: Annotated[int, Path(description="Fabrication year")],
) -> VehicleMapEnvelope | JSONResponse:
    """GET /vehicles/color/{color}/year/{year} → 200 OK"""
    result = service.find_by_color_and_year(color, year)
    if isinstance(result, Failure):
        return _error_response(result.error)
    return VehicleMapEnvelope.from_map(result.value)


@router.get(
    "/average-speed/brand/{brand}",
    response_model=AverageSpeedEnvelope,
    summary="Average max speed of a brand",
)
async def average_speed_by_brand(
    service: VehicleServiceDep,
    brand: Annotated[str, Path(description="Brand (exact match)")],
) -> AverageSpeedEnvelope | JSONResponse:
    """GET /vehicles/average-speed/brand/{brand} → 200 OK

    A brand with no vehicles answers 404 rather than dividing by zero.
    """
    result = service.find_average_speed_by_brand(brand)
    if isinstance(result, Failure):
        return _error_response(result.error)
    return AverageSpeedEnvelope(
        data=AverageSpeedData(brand=brand, average_speed=result.value)
    )


@router.get(
    "/average-capacity/brand/{brand}",
    response_model=AverageCapacityEnvelope,
    summary="Average passenger capacity of a brand",
)
async def average_capacity_by_brand(
    service: VehicleServiceDep,
    brand: Annotated[str, Path(description="Brand (exact match)")],
) -> AverageCapacityEnvelope | JSONResponse:
    """GET /vehicles/average-capacity/brand/{brand} → 200 OK"""
    result = service.find_average_capacity_by_brand(brand)
    if isinstance(result, Failure):
        return _error_response(result.error)
    return AverageCapacityEnvelope(
        data=AverageCapacityData(brand=brand, average_capacity=result.value)
    )


@router.get(
    "/fuel-type/{fuel_type}",
    response_model=VehicleMapEnvelope,
    summary="Vehicles with a fuel type",
)
async def list_by_fuel_type(
    service: VehicleServiceDep,
    fuel_type: Annotated[str, Path(description="Fuel type (exact match)")],
) -> VehicleMapEnvelope | JSONResponse:
    """GET /vehicles/fuel-type/{fuel_type} → 200 OK"""
    result = service.find_by_fuel_type(fuel_type)
    if isinstance(result, Failure):
        return _error_response(result.error)
    return VehicleMapEnvelope.from_map(result.value)


@router.get(
    "/transmission/{transmission}",
    response_model=VehicleMapEnvelope,
    summary="Vehicles with a transmission type",
)
async def list_by_transmission(
    service: VehicleServiceDep,
    transmission: Annotated[str, Path(description="Transmission (exact match)")],
) -> VehicleMapEnvelope | JSONResponse:
    """GET /vehicles/transmission/{transmission} → 200 OK"""
    result = service.find_by_transmission_type(transmission)
    if isinstance(result, Failure):
        return _error_response(result.error)
    return VehicleMapEnvelope.from_map(result.value)


@router.get(
    "/dimensions",
    response_model=VehicleMapEnvelope,
    summary="Vehicles within length and width ranges",
    responses={400: {"description": "Range is not a min-max pair of numbers"}},
)
async def list_by_dimensions(
    service: VehicleServiceDep,
    length: Annotated[str, Query(description="Length range as min-max", examples=["4.0-5.0"])],
    width: Annotated[str, Query(description="Width range as min-max", examples=["1.7-2.0"])],
) -> VehicleMapEnvelope | JSONResponse:
    """Filter by length and width, both bounds inclusive.

    GET /vehicles/dimensions?length=4.0-5.0&width=1.7-2.0 → 200 OK
    """
    length_range = _parse_range(length)
    width_range = _parse_range(width)
    if length_range is None or width_range is None:
        return _invalid(ErrorCode.INVALID_DIMENSION, INVALID_DIMENSIONS_MESSAGE)

    result = service.find_by_dimensions(*length_range, *width_range)
    if isinstance(result, Failure):
        return _error_response(result.error)
    return VehicleMapEnvelope.from_map(result.value)


@router.get(
    "/weight",
    response_model=VehicleMapEnvelope,
    summary="Vehicles within a weight range",
)
async def list_by_weight(
    service: VehicleServiceDep,
    min_weight: Annotated[float, Query(alias="min", description="Minimum weight (inclusive)")],
    max_weight: Annotated[float, Query(alias="max", description="Maximum weight (inclusive)")],
) -> VehicleMapEnvelope | JSONResponse:
    """GET /vehicles/weight?min=1000&max=1500 → 200 OK"""
    result = service.find_by_weight_range(min_weight, max_weight)
    if isinstance(result, Failure):
        return _error_response(result.error)
    return VehicleMapEnvelope.from_map(result.value)


# =============================================================================
# Single Vehicle Endpoints
# =============================================================================


@router.patch(
    "/{vehicle_id}/update-speed",
    response_model=MaxSpeedUpdateEnvelope,
    summary="Update max speed",
    responses={
        400: {"description": "Speed outside 0-500 or malformed body"},
        404: {"description": "Vehicle not found"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": MaxSpeedUpdateRequest.model_json_schema()}
            },
        }
    },
)
async def update_max_speed(
    request: Request,
    service: VehicleServiceDep,
    vehicle_id: VehicleId,
) -> MaxSpeedUpdateEnvelope | JSONResponse:
    """Replace the max speed of a vehicle.

    PATCH /vehicles/{id}/update-speed → 200 OK

    The range check runs before the lookup, so an out-of-range speed on an
    unknown vehicle answers 400, not 404.
    """
    parsed = await _parse_body(request, MaxSpeedUpdateRequest)
    if isinstance(parsed, JSONResponse):
        return parsed

    result = service.update_max_speed(vehicle_id, parsed.max_speed)
    if isinstance(result, Failure):
        return _error_response(result.error)

    return MaxSpeedUpdateEnvelope(
        data=MaxSpeedUpdateData(id=vehicle_id, max_speed=parsed.max_speed)
    )


@router.patch(
    "/{vehicle_id}/update-fuel",
    response_model=FuelTypeUpdateEnvelope,
    summary="Update fuel type",
    responses={
        400: {"description": "Fuel type not accepted or malformed body"},
        404: {"description": "Vehicle not found"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": FuelTypeUpdateRequest.model_json_schema()}
            },
        }
    },
)
async def update_fuel_type(
    request: Request,
    service: VehicleServiceDep,
    vehicle_id: VehicleId,
) -> FuelTypeUpdateEnvelope | JSONResponse:
    """Replace the fuel type of a vehicle.

    PATCH /vehicles/{id}/update-fuel → 200 OK

    Accepted values are gasoline, diesel, biodiesel and gas in any case; the
    response echoes the value as stored.
    """
    parsed = await _parse_body(request, FuelTypeUpdateRequest)
    if isinstance(parsed, JSONResponse):
        return parsed

    result = service.update_fuel_type(vehicle_id, parsed.fuel_type)
    if isinstance(result, Failure):
        return _error_response(result.error)

    # Store accepted the value, so it is canonical
    fuel_type = FuelType.from_string(parsed.fuel_type)
    return FuelTypeUpdateEnvelope(
        data=FuelTypeUpdateData(id=vehicle_id, fuel_type=fuel_type.value if fuel_type else parsed.fuel_type)
    )


@router.delete(
    "/{vehicle_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete vehicle",
    responses={404: {"description": "Vehicle not found"}},
)
async def delete_vehicle(
    service: VehicleServiceDep,
    vehicle_id: VehicleId,
) -> Response:
    """DELETE /vehicles/{id} → 204 No Content"""
    result = service.delete(vehicle_id)
    if isinstance(result, Failure):
        return _error_response(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Registered last so the literal segments above take precedence.
@router.get(
    "/{vehicle_id}",
    response_model=VehicleEnvelope,
    summary="Get vehicle",
    responses={404: {"description": "Vehicle not found"}},
)
async def get_vehicle(
    service: VehicleServiceDep,
    vehicle_id: VehicleId,
) -> VehicleEnvelope | JSONResponse:
    """GET /vehicles/{id} → 200 OK"""
    result = service.find_by_id(vehicle_id)
    if isinstance(result, Failure):
        return _error_response(result.error)
    return VehicleEnvelope.from_entity(result.value)
