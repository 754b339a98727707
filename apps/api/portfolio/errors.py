"""Application exception types."""

from typing import Any

from portfolio.schemas.error import ErrorCode, ErrorResponse, PublicErrorResponse

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


class ApiError(Exception):
    """Structured admin API error rendered as the uniform error envelope."""

    def __init__(
        self,
        status_code: int,
        code: ErrorCode,
        message: str,
        details: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.payload = ErrorResponse(error=message, code=code, details=details)
        self.headers = headers
        super().__init__(message)


class PublicApiError(Exception):
    """Error raised by public read endpoints; rendered as ``{"error": message}``."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.payload = PublicErrorResponse(error=message)
        super().__init__(message)


def not_found(message: str = "Content not found") -> ApiError:
    return ApiError(status_code=404, code="NOT_FOUND", message=message)


def internal_error(message: str, *, production: bool) -> ApiError:
    return ApiError(
        status_code=500,
        code="INTERNAL_ERROR",
        message=INTERNAL_ERROR_MESSAGE if production else message,
    )


__all__ = ["ApiError", "PublicApiError", "INTERNAL_ERROR_MESSAGE", "internal_error", "not_found"]
