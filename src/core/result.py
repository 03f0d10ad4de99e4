"""Result types for railway-oriented programming.

Store, facade and loader operations return a Result instead of raising, so
every failure is reported once, synchronously, to the immediate caller.

Usage:
    def average(values: list[float]) -> Result[float, str]:
        if not values:
            return Failure(error="No values")
        return Success(value=sum(values) / len(values))

    match repository.find_by_id(1):
        case Success(value=vehicle):
            print(vehicle.brand)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
