"""Domain value objects.

Immutable value objects shared by entities.
"""

from src.domain.value_objects.dimensions import Dimensions

__all__ = ["Dimensions"]
