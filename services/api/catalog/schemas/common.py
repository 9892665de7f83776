"""Common schemas used across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Structured error detail."""

    code: str
    message: str
    detail: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Standard error response format.

    Format: { "error": { "code": str, "message": str, "detail": object } }
    """

    error: ErrorDetail


class MessageResponse(BaseModel):
    """Plain confirmation body, e.g. after a delete."""

    message: str


# Shared `responses=` entries for route decorators.
NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Entity not found"},
}
