"""Time entry schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from src.ledger.schemas.common import (
    Amount,
    OptionalEntryHour,
    OptionalEntryMinute,
    OptionalHours,
    OptionalText,
    ReadModel,
    UtcDateTime,
)


class TimeEntryCreate(BaseModel):
    """Schema for logging time.

    When both ``entry_hour`` and ``entry_minute`` are given they define the
    duration and ``hours`` is ignored.
    """

    project_id: UUID
    assignee_id: UUID
    date: UtcDateTime
    hours: OptionalHours = None
    entry_hour: OptionalEntryHour = None
    entry_minute: OptionalEntryMinute = None
    description: OptionalText = None


class TimeEntryUpdate(BaseModel):
    project_id: UUID | None = None
    assignee_id: UUID | None = None
    date: UtcDateTime | None = None
    hours: OptionalHours = None
    entry_hour: OptionalEntryHour = None
    entry_minute: OptionalEntryMinute = None
    description: OptionalText = None


class TimeEntryRead(ReadModel):
    id: UUID
    project_id: UUID
    assignee_id: UUID
    date: datetime
    hours: Amount
    entry_hour: int | None
    entry_minute: int | None
    description: str | None
    created_at: datetime
