"""Assignee model."""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Field, Relationship, SQLModel

from src.ledger.models.base import utc_now

if TYPE_CHECKING:
    from src.ledger.models.time_entry import TimeEntry


class Assignee(SQLModel, table=True):
    """A person who logs time against projects."""

    __tablename__ = "assignees"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200, index=True)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    time_entries: list["TimeEntry"] = Relationship(
        back_populates="assignee",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
