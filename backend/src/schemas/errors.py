"""Error response schemas for API endpoints."""
from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Human-readable error message."""

    message: str


class ErrorResponse(BaseModel):
    """Body of every error response: {"error": {"message": "..."}}."""

    error: ErrorDetail

    @classmethod
    def from_message(cls, message: str) -> "ErrorResponse":
        """Build an error response from a message."""
        return cls(error=ErrorDetail(message=message))
