"""Domain error taxonomy.

Services raise these instead of HTTPException so the same rules hold for
any caller. The API layer renders them as ``{"error", "detail"}`` payloads.
"""

from fastapi import status
from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)


class LedgerError(Exception):
    """Base class for all domain errors."""

    category: str = "Error"
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(LedgerError):
    """Missing or malformed input, rejected before any write."""

    category = "Validation error"
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(LedgerError):
    """A referenced entity does not exist."""

    category = "Not found"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: object):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class PersistenceError(LedgerError):
    """The database failed to complete an operation."""

    category = "Persistence error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ConstraintViolationError(PersistenceError):
    """A unique or foreign-key constraint rejected the write."""

    category = "Constraint violation"
    status_code = status.HTTP_409_CONFLICT


class ConnectivityError(PersistenceError):
    """The database could not be reached."""

    category = "Database connection error"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class ColumnMissingError(PersistenceError):
    """A column added by a later migration is absent from the database."""

    category = "Column missing"

    def __init__(self, table: str, column: str):
        super().__init__(
            f"Column '{column}' does not exist on table '{table}'; "
            "run 'alembic upgrade head'"
        )
        self.table = table
        self.column = column


def classify_db_error(exc: SQLAlchemyError, action: str) -> PersistenceError:
    """Map a SQLAlchemy exception to a typed persistence error.

    Classification uses exception types only, never driver messages.

    Args:
        exc: The exception raised by SQLAlchemy.
        action: Short description of the failed operation, used in the detail.
    """
    if isinstance(exc, IntegrityError):
        return ConstraintViolationError(
            f"Failed to {action}: a referenced record is missing or still in use"
        )
    if isinstance(exc, OperationalError | InterfaceError):
        return ConnectivityError(f"Failed to {action}: database unavailable")
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return ConnectivityError(f"Failed to {action}: database connection lost")
    return PersistenceError(f"Failed to {action}")
