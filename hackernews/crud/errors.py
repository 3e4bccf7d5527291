"""Maps driver-level integrity errors onto :class:`StorageErrorKind`.

PostgreSQL (asyncpg) reports a five character SQLSTATE, SQLite reports an
extended result code name (Python 3.11+) and a message. Everything above
the CRUD layer only ever sees the enum.
"""

from sqlalchemy.exc import IntegrityError

from hackernews.core.exceptions import StorageError, StorageErrorKind

PG_SQLSTATE_KINDS = {
    "23503": StorageErrorKind.FOREIGN_KEY_VIOLATION,
    "23505": StorageErrorKind.UNIQUE_VIOLATION,
    "23502": StorageErrorKind.NOT_NULL_VIOLATION,
}

SQLITE_ERRORNAME_KINDS = {
    "SQLITE_CONSTRAINT_FOREIGNKEY": StorageErrorKind.FOREIGN_KEY_VIOLATION,
    "SQLITE_CONSTRAINT_UNIQUE": StorageErrorKind.UNIQUE_VIOLATION,
    "SQLITE_CONSTRAINT_PRIMARYKEY": StorageErrorKind.UNIQUE_VIOLATION,
    "SQLITE_CONSTRAINT_NOTNULL": StorageErrorKind.NOT_NULL_VIOLATION,
}

SQLITE_MESSAGE_KINDS = {
    "FOREIGN KEY constraint failed": StorageErrorKind.FOREIGN_KEY_VIOLATION,
    "UNIQUE constraint failed": StorageErrorKind.UNIQUE_VIOLATION,
    "NOT NULL constraint failed": StorageErrorKind.NOT_NULL_VIOLATION,
}


def _error_chain(error: BaseException | None):
    # Driver adapters keep the native error as __cause__
    while error is not None:
        yield error
        error = error.__cause__


def classify_integrity_error(exc: IntegrityError) -> StorageErrorKind:
    """Returns the kind of constraint the database says was violated."""
    for error in _error_chain(exc.orig):
        for attr in ("sqlstate", "pgcode"):
            code = getattr(error, attr, None)
            if code in PG_SQLSTATE_KINDS:
                return PG_SQLSTATE_KINDS[code]

        errorname = getattr(error, "sqlite_errorname", None)
        if errorname in SQLITE_ERRORNAME_KINDS:
            return SQLITE_ERRORNAME_KINDS[errorname]

        message = str(error)
        for fragment, kind in SQLITE_MESSAGE_KINDS.items():
            if fragment in message:
                return kind

    return StorageErrorKind.OTHER


def to_storage_error(exc: IntegrityError) -> StorageError:
    return StorageError(message=str(exc.orig), kind=classify_integrity_error(exc))
