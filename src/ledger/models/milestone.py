"""Milestone model."""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Field, Relationship, SQLModel

from src.ledger.models.base import utc_now
from src.ledger.models.enums import MilestoneStatus

if TYPE_CHECKING:
    from src.ledger.models.payment import Payment
    from src.ledger.models.project import Project


class Milestone(SQLModel, table=True):
    """A billable checkpoint within a project.

    ``status`` is derived from the payments and due date whenever the
    payment set changes; see MilestoneService.recompute_status.
    """

    __tablename__ = "milestones"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200)
    project_id: UUID = Field(foreign_key="projects.id", ondelete="CASCADE", index=True)
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    due_date: datetime = Field(index=True)
    description: str | None = Field(default=None, max_length=2000)
    status: str = Field(default=MilestoneStatus.PENDING.value, max_length=20, index=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    project: "Project" = Relationship(back_populates="milestones")
    payments: list["Payment"] = Relationship(
        back_populates="milestone",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "Payment.payment_date"},
    )

    @property
    def total_paid(self) -> Decimal:
        """Sum of payment amounts. Requires ``payments`` to be loaded."""
        return sum((payment.amount for payment in self.payments), Decimal("0"))

    @property
    def remaining(self) -> Decimal:
        return self.amount - self.total_paid
