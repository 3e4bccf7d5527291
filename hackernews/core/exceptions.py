"""
Core exceptions for the application.
"""

import enum


class APIException(Exception):
    """Base class for API exceptions."""
    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class InputValidationError(APIException):
    """Raised when an argument fails validation before reaching storage."""
    def __init__(self, message: str = "Input validation failed", field: str | None = None):
        self.field = field
        super().__init__(message)


class NotFoundError(APIException):
    """Raised when a requested resource is not found."""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


class StorageErrorKind(enum.Enum):
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    UNIQUE_VIOLATION = "unique_violation"
    NOT_NULL_VIOLATION = "not_null_violation"
    OTHER = "other"


class StorageError(APIException):
    """A constraint failure reported by the database, tagged with its kind.

    Raised by the CRUD layer so resolvers can branch on ``kind`` instead of
    inspecting driver-specific error codes.
    """
    def __init__(
        self,
        message: str = "Storage error",
        kind: StorageErrorKind = StorageErrorKind.OTHER,
    ):
        self.kind = kind
        super().__init__(message)
