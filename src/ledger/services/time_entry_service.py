"""Time entry service."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.ledger.core.errors import NotFoundError, ValidationError
from src.ledger.models import TimeEntry
from src.ledger.repositories import (
    AssigneeRepository,
    ProjectRepository,
    TimeEntryRepository,
)
from src.ledger.schemas.time_entry import TimeEntryCreate, TimeEntryUpdate
from src.ledger.services.base import BaseService, apply_changes

HOURS_QUANTUM = Decimal("0.0001")


def hours_from_parts(entry_hour: int, entry_minute: int) -> Decimal:
    """Convert an hour/minute duration to decimal hours (4 places)."""
    hours = Decimal(entry_hour) + Decimal(entry_minute) / Decimal(60)
    return hours.quantize(HOURS_QUANTUM, rounding=ROUND_HALF_UP)


def resolve_hours(
    hours: Decimal | None, entry_hour: int | None, entry_minute: int | None
) -> Decimal:
    """Duration of an entry: the hour/minute pair wins when both are set."""
    if entry_hour is not None and entry_minute is not None:
        return hours_from_parts(entry_hour, entry_minute)
    return hours if hours is not None else Decimal("0")


def _reconcile_duration(entry: TimeEntry, changes: dict[str, Any]) -> None:
    """Keep ``hours`` and the hour/minute pair consistent across a partial update.

    The incoming pair fields are merged with the stored ones; a complete pair
    sets ``hours``. Setting ``hours`` alone drops the stored pair.
    """
    pair_changed = "entry_hour" in changes or "entry_minute" in changes
    if changes.get("hours") is not None and not pair_changed:
        changes["entry_hour"] = None
        changes["entry_minute"] = None
        return

    entry_hour = changes.get("entry_hour", entry.entry_hour)
    entry_minute = changes.get("entry_minute", entry.entry_minute)
    if pair_changed and entry_hour is not None and entry_minute is not None:
        changes["hours"] = hours_from_parts(entry_hour, entry_minute)


class TimeEntryService(BaseService):
    """Time entry CRUD."""

    def __init__(
        self,
        time_entry_repo: TimeEntryRepository,
        project_repo: ProjectRepository,
        assignee_repo: AssigneeRepository,
        session: AsyncSession,
    ):
        super().__init__(session)
        self.time_entry_repo = time_entry_repo
        self.project_repo = project_repo
        self.assignee_repo = assignee_repo

    async def list_time_entries(
        self,
        project_id: UUID | None = None,
        assignee_id: UUID | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[TimeEntry]:
        return await self.time_entry_repo.list_filtered(project_id, assignee_id, start, end)

    async def get_time_entry(self, entry_id: UUID) -> TimeEntry:
        entry = await self.time_entry_repo.get_with_relations(entry_id)
        if entry is None:
            raise NotFoundError("Time entry", entry_id)
        return entry

    async def create_time_entry(self, data: TimeEntryCreate) -> TimeEntry:
        await self._validate_references(data.project_id, data.assignee_id)

        values = {
            "project_id": data.project_id,
            "assignee_id": data.assignee_id,
            "date": data.date,
            "hours": resolve_hours(data.hours, data.entry_hour, data.entry_minute),
            "description": data.description,
            "entry_hour": data.entry_hour,
            "entry_minute": data.entry_minute,
        }
        entry = TimeEntry(**values)
        self.time_entry_repo.add(entry)
        await self.commit("create time entry")
        return await self.get_time_entry(entry.id)

    async def update_time_entry(self, entry_id: UUID, data: TimeEntryUpdate) -> TimeEntry:
        entry = await self.time_entry_repo.get_by_id(entry_id)
        if entry is None:
            raise NotFoundError("Time entry", entry_id)

        changes = data.model_dump(exclude_unset=True)
        await self._validate_references(changes.get("project_id"), changes.get("assignee_id"))

        _reconcile_duration(entry, changes)
        apply_changes(
            entry,
            changes,
            required=("project_id", "assignee_id", "date", "hours"),
        )
        await self.commit("update time entry")
        return await self.get_time_entry(entry_id)

    async def delete_time_entry(self, entry_id: UUID) -> None:
        entry = await self.time_entry_repo.get_by_id(entry_id)
        if entry is None:
            raise NotFoundError("Time entry", entry_id)

        await self.time_entry_repo.delete(entry)
        await self.commit("delete time entry")

    async def _validate_references(
        self, project_id: UUID | None, assignee_id: UUID | None
    ) -> None:
        if project_id is not None and not await self.project_repo.exists(project_id):
            raise ValidationError(f"Project {project_id} does not exist")
        if assignee_id is not None and not await self.assignee_repo.exists(assignee_id):
            raise ValidationError(f"Assignee {assignee_id} does not exist")
