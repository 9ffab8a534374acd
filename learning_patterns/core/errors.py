"""Service error hierarchy.

The scoring engine itself never raises for bad answers; these errors belong to
the request-validation and storage layers around it.
"""

from typing import Any


class PatternServiceError(Exception):
    """Base exception for service errors."""

    code = "PATTERN_SERVICE_INTERNAL_ERROR"
    status_code = 500

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(PatternServiceError):
    """Invalid request parameters."""

    code = "PATTERN_SERVICE_INVALID_REQUEST"
    status_code = 400


class NotFoundError(PatternServiceError):
    """Resource not found."""

    code = "PATTERN_SERVICE_NOT_FOUND"
    status_code = 404


class ConflictError(PatternServiceError):
    """Resource conflict."""

    code = "PATTERN_SERVICE_CONFLICT"
    status_code = 409


class StorageError(PatternServiceError):
    """Flat-file storage could not be read or written."""

    code = "PATTERN_SERVICE_STORAGE_FAILURE"
    status_code = 503

    def __init__(
        self,
        message: str,
        path: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details={**(details or {}), "path": path})
        self.path = path


class InternalError(PatternServiceError):
    """Internal server error."""

    code = "PATTERN_SERVICE_INTERNAL_ERROR"
    status_code = 500


ERROR_STATUS_MAP: dict[type[PatternServiceError], int] = {
    ValidationError: 400,
    NotFoundError: 404,
    ConflictError: 409,
    StorageError: 503,
    InternalError: 500,
}


def get_status_code(error: PatternServiceError) -> int:
    """Get HTTP status code for error."""
    return ERROR_STATUS_MAP.get(type(error), 500)
