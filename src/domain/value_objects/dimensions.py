"""Dimensions value object.

Immutable 3D size of a vehicle. Being frozen, a shallow copy of a Vehicle
never shares mutable state through its dimensions.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Dimensions:
    """Vehicle height, length and width.

    Attributes:
        height: Height of the vehicle.
        length: Length of the vehicle.
        width: Width of the vehicle.

    Example:
        >>> dims = Dimensions(height=1.5, length=4.6, width=1.8)
        >>> dims.length
        4.6
    """

    height: float = 0.0
    length: float = 0.0
    width: float = 0.0
