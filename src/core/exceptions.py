"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PROFILE_ID = "INVALID_PROFILE_ID"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class InvalidProfileIdError(AppException):
    """Path segment is not a positive integer profile ID."""

    def __init__(self, raw_id: str) -> None:
        self.raw_id = raw_id
        super().__init__(
            error_code=ErrorCode.INVALID_PROFILE_ID,
            message="Invalid profile ID",
            status_code=400,
        )


class ProfileValidationError(AppException):
    """Profile payload failed field validation."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message="Validation failed",
            status_code=400,
            details=errors,
        )


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, profile_id: int) -> None:
        self.profile_id = profile_id
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message="Profile not found",
            status_code=404,
        )


class DatabaseError(AppException):
    """Downstream database failure. The cause is logged, never returned."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message="Internal server error",
            status_code=500,
        )
