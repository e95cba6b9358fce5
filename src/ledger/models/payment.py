"""Payment model."""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Field, Relationship, SQLModel

from src.ledger.models.base import utc_now

if TYPE_CHECKING:
    from src.ledger.models.milestone import Milestone


class Payment(SQLModel, table=True):
    """Money received against a milestone."""

    __tablename__ = "payments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    milestone_id: UUID = Field(foreign_key="milestones.id", ondelete="CASCADE", index=True)
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    payment_date: datetime = Field(default_factory=utc_now, index=True)
    notes: str | None = Field(default=None, max_length=2000)
    created_at: datetime = Field(default_factory=utc_now)

    milestone: "Milestone" = Relationship(back_populates="payments")
