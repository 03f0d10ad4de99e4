"""Common schemas used across endpoints.

Every response body is an envelope with a `message`; errors carry only the
message.
"""

from pydantic import BaseModel, Field

from src.core.constants import SUCCESS_MESSAGE


class MessageResponse(BaseModel):
    """Envelope carrying only a message (error responses)."""

    message: str = Field(..., description="Human-readable message")


class SuccessResponse(BaseModel):
    """Base of every success envelope."""

    message: str = Field(SUCCESS_MESSAGE, description="Always 'Success'")
