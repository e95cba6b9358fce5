"""Repository for TimeEntry entity."""

from datetime import datetime
from uuid import UUID

from sqlalchemy.orm import selectinload
from sqlmodel import select

from src.ledger.models import Project, TimeEntry
from src.ledger.repositories.base import BaseRepository

TIME_ENTRY_OPTIONS = (
    selectinload(TimeEntry.project).selectinload(Project.client),  # type: ignore[arg-type]
    selectinload(TimeEntry.assignee),  # type: ignore[arg-type]
)


class TimeEntryRepository(BaseRepository[TimeEntry]):
    """Repository for TimeEntry entity."""

    model = TimeEntry

    async def get_with_relations(self, entry_id: UUID) -> TimeEntry | None:
        """Get a time entry with project, client and assignee."""
        return await self.get_by_id(entry_id, options=TIME_ENTRY_OPTIONS)

    async def list_filtered(
        self,
        project_id: UUID | None = None,
        assignee_id: UUID | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[TimeEntry]:
        """List time entries newest first, optionally filtered.

        The date filter applies only when both ``start`` and ``end`` are given.
        """
        query = select(TimeEntry).options(*TIME_ENTRY_OPTIONS)
        if project_id is not None:
            query = query.where(TimeEntry.project_id == project_id)
        if assignee_id is not None:
            query = query.where(TimeEntry.assignee_id == assignee_id)
        if start is not None and end is not None:
            query = query.where(TimeEntry.date >= start, TimeEntry.date <= end)  # type: ignore[operator]
        query = query.order_by(TimeEntry.date.desc())  # type: ignore[attr-defined]
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_in_range(self, start: datetime, end: datetime) -> list[TimeEntry]:
        """List entries with start <= date <= end, oldest first."""
        query = (
            select(TimeEntry)
            .where(TimeEntry.date >= start, TimeEntry.date <= end)  # type: ignore[operator]
            .options(*TIME_ENTRY_OPTIONS)
            .order_by(TimeEntry.date.asc())  # type: ignore[attr-defined]
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
