"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.vehicle import Vehicle

__all__ = ["Vehicle"]
