"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Data loading errors (*_LOAD_FAILED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_INPUT = "invalid_input"
    INVALID_MAX_SPEED = "invalid_max_speed"
    INVALID_FUEL_TYPE = "invalid_fuel_type"
    INVALID_DIMENSION = "invalid_dimension"

    # Resource errors
    VEHICLE_NOT_FOUND = "vehicle_not_found"

    # Conflict errors
    VEHICLE_ALREADY_EXISTS = "vehicle_already_exists"

    # Data loading errors
    VEHICLE_DATA_LOAD_FAILED = "vehicle_data_load_failed"
