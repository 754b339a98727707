"""API error response schemas."""

from typing import Any, Literal

from pydantic import BaseModel

ErrorCode = Literal[
    "VALIDATION_ERROR",
    "NOT_FOUND",
    "NO_AUTH",
    "INSUFFICIENT_ROLE",
    "DUPLICATE_ENTRY",
    "OPTIMISTIC_LOCK_ERROR",
    "RATE_LIMITED",
    "INTERNAL_ERROR",
]


class ErrorResponse(BaseModel):
    """Uniform admin error envelope."""

    success: Literal[False] = False
    error: str
    code: ErrorCode
    details: Any | None = None


class PublicErrorResponse(BaseModel):
    """Error body used by the public read endpoints."""

    error: str
