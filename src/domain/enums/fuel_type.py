"""Fuel type enumeration.

Canonical fuel types accepted by the fuel type update. Creation stores
whatever text the client sends; only the dedicated update is constrained.
"""

from enum import Enum


class FuelType(str, Enum):
    """Canonical vehicle fuel types (compared case-insensitively).

    Examples:
        >>> FuelType.from_string("Diesel")
        <FuelType.DIESEL: 'diesel'>
        >>> FuelType.from_string("electric") is None
        True
    """

    GASOLINE = "gasoline"
    DIESEL = "diesel"
    BIODIESEL = "biodiesel"
    GAS = "gas"

    @classmethod
    def from_string(cls, value: str) -> "FuelType | None":
        """Return the member matching value regardless of case.

        Args:
            value: Fuel type text as sent by a client.

        Returns:
            Matching FuelType, or None when value is not canonical.
        """
        try:
            return cls(value.lower())
        except ValueError:
            return None

    @classmethod
    def values(cls) -> list[str]:
        """Canonical spellings in declaration order."""
        return [member.value for member in cls]
