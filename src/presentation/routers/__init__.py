"""HTTP routers.

System endpoints (root, health) and the vehicles resource.
"""

from src.presentation.routers.api.vehicles import router as vehicles_router
from src.presentation.routers.system import system_router

__all__ = ["system_router", "vehicles_router"]
