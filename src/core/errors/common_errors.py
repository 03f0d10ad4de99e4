"""Common error classes used across all layers.

These are generic errors that don't belong to any specific entity.
The vehicle store returns them inside Failure results; the HTTP layer maps
each class to a status code.

Error Types:
- ValidationError: Input validation failures (out-of-range speed, bad fuel type)
- NotFoundError: Resource not found, or a filter matched nothing
- ConflictError: Duplicate identifier or registration

Usage:
    from src.core.errors import ValidationError, NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_MAX_SPEED,
        message="Max speed must be between 0 and 500",
        field="max_speed",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Vehicle).
        resource_id: ID of the missing resource, or a description of the
            filter that matched nothing.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate identifier or unique field).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (id, registration).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None
