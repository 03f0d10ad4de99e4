"""Unit tests for TraceMiddleware and RequestLoggingMiddleware.

Tests cover:
- Trace ID generation and propagation from X-Trace-Id
- get_trace_id() inside and outside a request
- One log line per request, errors logged and re-raised

Architecture:
- Unit tests with mocked Request/Response and call_next
"""

from unittest.mock import AsyncMock, MagicMock, patch
from uuid import UUID

import pytest

from src.presentation.routers.api.middleware.request_logging_middleware import (
    RequestLoggingMiddleware,
)
from src.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)


def make_request(headers: dict | None = None) -> MagicMock:
    request = MagicMock()
    request.headers = headers or {}
    request.method = "GET"
    request.url.path = "/vehicles"
    return request


@pytest.mark.unit
class TestTraceMiddleware:
    """Test TraceMiddleware."""

    @pytest.mark.asyncio
    async def test_generates_trace_id_when_missing(self):
        response = MagicMock()
        response.headers = {}
        middleware = TraceMiddleware(app=MagicMock())

        result = await middleware.dispatch(make_request(), AsyncMock(return_value=response))

        UUID(result.headers["X-Trace-Id"])

    @pytest.mark.asyncio
    async def test_propagates_existing_trace_id(self):
        response = MagicMock()
        response.headers = {}
        middleware = TraceMiddleware(app=MagicMock())

        result = await middleware.dispatch(
            make_request({"X-Trace-Id": "trace-123"}),
            AsyncMock(return_value=response),
        )

        assert result.headers["X-Trace-Id"] == "trace-123"

    @pytest.mark.asyncio
    async def test_stores_trace_id_on_request_state(self):
        response = MagicMock()
        response.headers = {}
        request = make_request({"X-Trace-Id": "trace-456"})
        middleware = TraceMiddleware(app=MagicMock())

        await middleware.dispatch(request, AsyncMock(return_value=response))

        assert request.state.trace_id == "trace-456"

    @pytest.mark.asyncio
    async def test_trace_id_visible_during_request_only(self):
        seen = {}

        async def call_next(request):
            seen["trace_id"] = get_trace_id()
            response = MagicMock()
            response.headers = {}
            return response

        middleware = TraceMiddleware(app=MagicMock())
        await middleware.dispatch(make_request({"X-Trace-Id": "abc"}), call_next)

        assert seen["trace_id"] == "abc"
        assert get_trace_id() is None


@pytest.mark.unit
class TestRequestLoggingMiddleware:
    """Test RequestLoggingMiddleware."""

    @pytest.mark.asyncio
    async def test_logs_completed_request(self):
        logger = MagicMock()
        response = MagicMock(status_code=200)
        middleware = RequestLoggingMiddleware(app=MagicMock())

        with patch(
            "src.presentation.routers.api.middleware.request_logging_middleware.get_logger",
            return_value=logger,
        ):
            result = await middleware.dispatch(
                make_request(), AsyncMock(return_value=response)
            )

        assert result is response
        logger.bind.assert_called_once_with(method="GET", path="/vehicles", trace_id=None)
        call = logger.bind.return_value.info.call_args
        assert call.args == ("request_completed",)
        assert call.kwargs["status_code"] == 200
        assert call.kwargs["duration_ms"] >= 0

    @pytest.mark.asyncio
    async def test_logs_and_reraises_failure(self):
        logger = MagicMock()
        middleware = RequestLoggingMiddleware(app=MagicMock())
        error = RuntimeError("boom")

        with patch(
            "src.presentation.routers.api.middleware.request_logging_middleware.get_logger",
            return_value=logger,
        ):
            with pytest.raises(RuntimeError):
                await middleware.dispatch(make_request(), AsyncMock(side_effect=error))

        call = logger.bind.return_value.error.call_args
        assert call.args == ("request_failed",)
        assert call.kwargs["error"] is error
