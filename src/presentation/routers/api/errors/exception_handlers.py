"""Global exception handlers for FastAPI application.

Every exception that escapes a route is converted to the `{"message": ...}`
error envelope.

Handlers:
    http_exception_handler: HTTPException (including routing 404/405)
    validation_exception_handler: RequestValidationError → 400
    generic_exception_handler: Anything else → 500, logged with trace_id

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.container import get_logger
from src.presentation.routers.api.errors.error_response_builder import ErrorResponseBuilder

INTERNAL_SERVER_ERROR_MESSAGE = "Internal server error"


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to the error envelope.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by routing, a handler or a dependency.

    Returns:
        JSONResponse with `{"message": detail}`.
    """
    # Type narrowing: registered only for StarletteHTTPException
    assert isinstance(exc, StarletteHTTPException)

    # Preserve any headers from HTTPException (e.g., Allow)
    headers = getattr(exc, "headers", None)

    return ErrorResponseBuilder.message_response(
        status_code=exc.status_code,
        message=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        headers=headers,
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to a 400 error envelope.

    Unparsable path segments, missing or malformed query parameters and
    malformed update bodies end up here.

    Example:
        >>> # GET /vehicles/color/red/year/abc
        >>> # {"message": "Invalid year: Input should be a valid integer, ..."}
    """
    assert isinstance(exc, RequestValidationError)

    errors = exc.errors()
    if not errors:
        return ErrorResponseBuilder.message_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Invalid request",
        )

    first = errors[0]
    # Skip the location kind ("path", "query", "body")
    field_parts = [str(p) for p in first.get("loc", [])[1:]]
    field_name = ".".join(field_parts) if field_parts else "body"

    return ErrorResponseBuilder.message_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        message=f"Invalid {field_name}: {first.get('msg', 'validation failed')}",
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the failure with the request trace_id and hides internals from the
    client. Runs in the server error middleware, outside TraceMiddleware, so
    the trace_id comes from request.state rather than the context variable.
    """
    trace_id = getattr(request.state, "trace_id", None)
    get_logger().error(
        "unhandled_exception",
        error=exc,
        method=request.method,
        path=request.url.path,
        trace_id=trace_id,
    )

    return ErrorResponseBuilder.message_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message=INTERNAL_SERVER_ERROR_MESSAGE,
        headers={"X-Trace-Id": trace_id} if trace_id else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
