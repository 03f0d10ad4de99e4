"""Request logging middleware.

Logs one structured line per request: method, path, status code, duration
and trace_id. Requests that raise are logged and the exception is re-raised
for the global exception handler.
"""

from __future__ import annotations

import time
from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from src.core.container import get_logger
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Starlette middleware logging every request with its outcome."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        logger = get_logger().bind(
            method=request.method,
            path=request.url.path,
            trace_id=get_trace_id(),
        )
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "request_failed",
                error=e,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise

        logger.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response
