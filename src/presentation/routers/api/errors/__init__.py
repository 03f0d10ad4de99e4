"""Error envelope builder and exception handlers for the presentation layer.

Exports:
    ErrorResponseBuilder: Utility for building `{"message": ...}` responses
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from src.presentation.routers.api.errors.error_response_builder import ErrorResponseBuilder
from src.presentation.routers.api.errors.exception_handlers import register_exception_handlers

__all__ = [
    "ErrorResponseBuilder",
    "register_exception_handlers",
]
