from hackernews.core.config import Settings, settings
from hackernews.core.exceptions import (
    APIException,
    InputValidationError,
    NotFoundError,
    StorageError,
    StorageErrorKind,
)

__all__ = [
    "Settings",
    "settings",
    "APIException",
    "InputValidationError",
    "NotFoundError",
    "StorageError",
    "StorageErrorKind",
]
