"""Time entry model."""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Field, Relationship, SQLModel

from src.ledger.models.base import utc_now

if TYPE_CHECKING:
    from src.ledger.models.assignee import Assignee
    from src.ledger.models.project import Project


class TimeEntry(SQLModel, table=True):
    """Hours an assignee worked on a project on a given date.

    ``entry_hour``/``entry_minute`` were added later; older rows only carry
    the decimal ``hours``. When the pair is set, hours = hour + minute / 60.
    """

    __tablename__ = "time_entries"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", ondelete="CASCADE", index=True)
    assignee_id: UUID = Field(foreign_key="assignees.id", ondelete="CASCADE", index=True)
    date: datetime = Field(index=True)
    hours: Decimal = Field(default=Decimal("0"), max_digits=8, decimal_places=4)
    entry_hour: int | None = Field(default=None)
    entry_minute: int | None = Field(default=None)
    description: str | None = Field(default=None, max_length=2000)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    project: "Project" = Relationship(back_populates="time_entries")
    assignee: "Assignee" = Relationship(back_populates="time_entries")
