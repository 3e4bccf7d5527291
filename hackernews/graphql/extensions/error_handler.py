import logging
from collections.abc import Iterator
from typing import Any

from graphql import GraphQLError
from sqlalchemy.exc import SQLAlchemyError
from strawberry.extensions import SchemaExtension

from hackernews.core.exceptions import InputValidationError, NotFoundError, StorageError

logger = logging.getLogger(__name__)


def error_extensions(error: GraphQLError) -> dict[str, Any]:
    """Builds the ``extensions`` entry for one outgoing error."""
    original_error = error.original_error

    if isinstance(original_error, InputValidationError):
        extensions: dict[str, Any] = {"code": "BAD_USER_INPUT"}
        if original_error.field:
            extensions["field"] = original_error.field
        return extensions
    if isinstance(original_error, NotFoundError):
        return {"code": "NOT_FOUND"}
    if isinstance(original_error, StorageError):
        return {"code": "STORAGE_ERROR", "kind": original_error.kind.value}
    if isinstance(original_error, SQLAlchemyError):
        return {"code": "STORAGE_ERROR"}
    if original_error is None and not error.path:
        # Raised by graphql-core while parsing/validating the document
        return {"code": "GRAPHQL_VALIDATION_FAILED"}
    return {"code": "INTERNAL_SERVER_ERROR"}


class ErrorFormattingExtension(SchemaExtension):
    """Logs every error of an operation and tags it with an error code.

    Messages are passed through unchanged; only ``extensions`` is added and
    the original exception is detached from the error sent to the client.
    """

    def on_operation(self) -> Iterator[None]:
        yield  # Let the operation execute first

        execution_context = self.execution_context
        result = execution_context.result
        if result is None or not getattr(result, "errors", None):
            return

        processed_errors: list[GraphQLError] = []
        for error in result.errors:
            extensions = {**(error.extensions or {}), **error_extensions(error)}
            log_props = {
                "path": error.path,
                "code": extensions["code"],
                "operation_name": execution_context.operation_name,
            }
            if extensions["code"] == "INTERNAL_SERVER_ERROR":
                logger.error(
                    f"GraphQL Error: {error.message}",
                    exc_info=error.original_error or error,
                    extra={"props": log_props},
                )
            else:
                logger.warning(
                    f"GraphQL Error: {error.message}", extra={"props": log_props}
                )

            processed_errors.append(
                GraphQLError(
                    message=error.message,
                    nodes=error.nodes,
                    source=error.source,
                    positions=error.positions,
                    path=error.path,
                    original_error=None,
                    extensions=extensions,
                )
            )

        result.errors = processed_errors
