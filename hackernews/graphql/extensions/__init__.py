from .error_handler import ErrorFormattingExtension, error_extensions

__all__ = [
    "ErrorFormattingExtension",
    "error_extensions",
]
