"""Payment schemas for API request/response."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from src.ledger.schemas.common import Amount, Money, OptionalText, ReadModel, UtcDateTime


class PaymentCreate(BaseModel):
    """Schema for recording a payment. ``payment_date`` defaults to now."""

    milestone_id: UUID
    amount: Money = Field(gt=Decimal("0"))
    payment_date: UtcDateTime | None = None
    notes: OptionalText = None


class PaymentRead(ReadModel):
    id: UUID
    milestone_id: UUID
    amount: Amount
    payment_date: datetime
    notes: str | None
    created_at: datetime
