"""Error response builder for the `{"message": ...}` error envelope.

This module converts application layer errors into JSON responses with the
HTTP status chosen by error category.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from fastapi import status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.schemas.common_schemas import MessageResponse


class ErrorResponseBuilder:
    """Build error envelope responses.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Vehicle(s) not found",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(error)
        >>> response.status_code
        404
    """

    @staticmethod
    def from_application_error(error: ApplicationError) -> JSONResponse:
        """Convert ApplicationError to a JSON error response.

        Args:
            error: Application layer error to convert

        Returns:
            JSONResponse with `{"message": error.message}`
        """
        return ErrorResponseBuilder.message_response(
            status_code=ErrorResponseBuilder._get_status_code(error.code),
            message=error.message,
        )

    @staticmethod
    def message_response(
        status_code: int,
        message: str,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """Build a response carrying only a message.

        Args:
            status_code: HTTP status code.
            message: Error text.
            headers: Optional extra headers (e.g. Allow on 405).

        Returns:
            JSONResponse with the error envelope.
        """
        return JSONResponse(
            status_code=status_code,
            content=MessageResponse(message=message).model_dump(),
            headers=headers,
        )

    @staticmethod
    def _get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder._get_status_code(
            ...     ApplicationErrorCode.CONFLICT
            ... )
            409
        """
        mapping = {
            ApplicationErrorCode.COMMAND_VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
            ApplicationErrorCode.COMMAND_EXECUTION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
            ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
            ApplicationErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
        }
        return mapping.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
