"""Base repository with common CRUD operations."""

from collections.abc import Sequence
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: UUID, options: Sequence[Any] = ()) -> ModelType | None:
        """Get a record by its primary key, applying optional loader options."""
        query = select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        if options:
            # Refresh identities already in the session so eager loads apply
            query = query.options(*options).execution_options(populate_existing=True)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def exists(self, id: UUID) -> bool:
        """Check whether a record with this primary key exists."""
        result = await self.session.execute(
            select(self.model.id).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.first() is not None

    async def list_all(self, *order_by: Any, options: Sequence[Any] = ()) -> list[ModelType]:
        """List every record in the given order."""
        query = select(self.model)
        if options:
            query = query.options(*options).execution_options(populate_existing=True)
        if order_by:
            query = query.order_by(*order_by)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def delete(self, entity: ModelType) -> None:
        """Mark entity for deletion, loading cascaded children as needed."""
        await self.session.delete(entity)
