"""Shared service helpers: transaction control and partial updates."""

from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from src.ledger.core.errors import classify_db_error
from src.ledger.core.logging import get_logger
from src.ledger.models.base import utc_now

logger = get_logger(__name__)


class BaseService:
    """Base for services; owns commit/rollback for its session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self, action: str) -> None:
        """Commit the session, translating database failures to typed errors.

        Args:
            action: What was being done, e.g. "create client". Used in the
                error detail and in the log event.

        Raises:
            PersistenceError: Or one of its subclasses, after rolling back.
        """
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            error = classify_db_error(e, action)
            logger.warning(
                "commit_failed",
                action=action,
                category=error.category,
                error=str(e.orig) if getattr(e, "orig", None) else str(e),
            )
            raise error from e


def apply_changes(
    entity: SQLModel,
    changes: dict[str, Any],
    required: tuple[str, ...] = (),
) -> None:
    """Apply a partial update to an entity and bump ``updated_at``.

    Args:
        entity: The entity to modify.
        changes: Field values from ``model_dump(exclude_unset=True)``.
        required: Non-nullable fields; an explicit null for them is ignored.
    """
    for field, value in changes.items():
        if value is None and field in required:
            continue
        setattr(entity, field, value)

    # Explicitly set updated_at since SQLModel doesn't support onupdate callbacks
    if hasattr(entity, "updated_at"):
        entity.updated_at = utc_now()
