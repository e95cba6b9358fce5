"""Milestone schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.ledger.models.enums import MilestoneStatus
from src.ledger.schemas.common import (
    Amount,
    Money,
    OptionalText,
    ReadModel,
    UtcDateTime,
    require_name,
)


class MilestoneCreate(BaseModel):
    """Schema for creating a milestone.

    The status is stored as given; it is only recomputed when payments change.
    """

    name: str = Field(min_length=1, max_length=200)
    project_id: UUID
    amount: Money
    due_date: UtcDateTime
    description: OptionalText = None
    status: MilestoneStatus = MilestoneStatus.PENDING

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_name(v, "Milestone")


class MilestoneUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    amount: Money | None = None
    due_date: UtcDateTime | None = None
    description: OptionalText = None
    status: MilestoneStatus | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is not None:
            v = require_name(v, "Milestone")
        return v


class MilestoneRead(ReadModel):
    id: UUID
    name: str
    project_id: UUID
    amount: Amount
    due_date: datetime
    description: str | None
    status: MilestoneStatus
    created_at: datetime
    updated_at: datetime
