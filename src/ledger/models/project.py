"""Project model."""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Field, Relationship, SQLModel

from src.ledger.models.base import utc_now
from src.ledger.models.enums import BillingType, ProjectStatus
from src.ledger.models.project_type import ProjectType

if TYPE_CHECKING:
    from src.ledger.models.client import Client
    from src.ledger.models.milestone import Milestone
    from src.ledger.models.time_entry import TimeEntry


class Project(SQLModel, table=True):
    """A body of work for a client, billed fixed or hourly."""

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200, index=True)
    client_id: UUID = Field(foreign_key="clients.id", ondelete="CASCADE", index=True)
    project_type_id: UUID = Field(foreign_key="project_types.id", ondelete="RESTRICT", index=True)
    budget: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    billing_type: str = Field(default=BillingType.FIXED.value, max_length=20)
    hourly_rate: Decimal | None = Field(default=None, max_digits=12, decimal_places=2)
    description: str | None = Field(default=None, max_length=2000)
    status: str = Field(default=ProjectStatus.ACTIVE.value, max_length=20)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)

    client: "Client" = Relationship(back_populates="projects")
    project_type: ProjectType = Relationship()
    milestones: list["Milestone"] = Relationship(
        back_populates="project",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "Milestone.due_date"},
    )
    time_entries: list["TimeEntry"] = Relationship(
        back_populates="project",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "TimeEntry.date"},
    )

    @property
    def billing_type_enum(self) -> BillingType:
        return BillingType(self.billing_type)
