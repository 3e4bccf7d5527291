"""Export GraphQL components for use in the main application."""

# Schema
from .schema import (
    schema,
    Context,
    Query,
    Mutation,
    get_context,
)

# Error handling
from .extensions import ErrorFormattingExtension

# Argument parsing and validation
from .utils import (
    parse_identifier,
    validate_skip,
    validate_take,
)

__all__ = [
    # Schema
    "schema",
    "Context",
    "Query",
    "Mutation",
    "get_context",

    # Error handling
    "ErrorFormattingExtension",

    # Argument parsing and validation
    "parse_identifier",
    "validate_skip",
    "validate_take",
]
