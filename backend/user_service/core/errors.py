"""Error Hierarchy — typed, categorized exceptions for all user service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the HTTP status the API answers with (500 when unspecified)
    - to_response() produces the REST envelope {"message": "..."}
    - Client errors (400-level) are recoverable; store errors (500-level) are critical

Design Decisions:
    - Single hierarchy with UserServiceError base: one FastAPI handler catches all
      (ADR: uniform error shape)
    - EmptyBodyError subclasses BadRequestError: listing can tolerate a missing
      filter body while every other caller still sees a plain 400
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class UserServiceError(Exception):
    """Base exception for all user service errors."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        category: ErrorCategory = ErrorCategory.INTERNAL,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class BadRequestError(UserServiceError):
    """Malformed, missing or invalid request input."""
    def __init__(self, message: str, code: str = "BAD_REQUEST"):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


class EmptyBodyError(BadRequestError):
    """Request body was empty where a JSON object was expected."""
    def __init__(self, message: str = "Request body must not be empty"):
        super().__init__(message, "EMPTY_BODY")


class InvalidInputError(BadRequestError):
    """Decoded user failed a business rule (empty required field, etc.)."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, "INVALID_INPUT")
        self.field = field


class PayloadTooLargeError(UserServiceError):
    """Request body exceeded the configured size limit."""
    def __init__(self, message: str = "Request body must not be larger than 1MB"):
        super().__init__(
            message, "PAYLOAD_TOO_LARGE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 413,
        )


class UnsupportedMediaTypeError(UserServiceError):
    """Declared Content-Type is not JSON."""
    def __init__(
        self, message: str = "Content-Type header is not application/json",
    ):
        super().__init__(
            message, "UNSUPPORTED_MEDIA_TYPE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 415,
        )


class ResourceNotFoundError(UserServiceError):
    """Requested record does not exist."""
    def __init__(self, message: str):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(UserServiceError):
    """Store operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            message, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation


class InternalError(UserServiceError):
    """Unexpected failure that is not the client's fault."""
    def __init__(self, message: str = "Internal server error"):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )
