"""Project schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.ledger.models.enums import BillingType, ProjectStatus
from src.ledger.schemas.common import (
    Amount,
    Money,
    OptionalMoney,
    OptionalText,
    ReadModel,
    require_name,
)


class ProjectCreate(BaseModel):
    """Schema for creating a project.

    An hourly project must carry an hourly rate; the service enforces this
    because updates need the stored values to decide.
    """

    name: str = Field(min_length=1, max_length=200)
    client_id: UUID
    project_type_id: UUID
    budget: Money
    billing_type: BillingType = BillingType.FIXED
    hourly_rate: OptionalMoney = None
    description: OptionalText = None
    status: ProjectStatus = ProjectStatus.ACTIVE

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_name(v, "Project")


class ProjectUpdate(BaseModel):
    """Schema for updating a project. Only provided fields change."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    client_id: UUID | None = None
    project_type_id: UUID | None = None
    budget: Money | None = None
    billing_type: BillingType | None = None
    hourly_rate: OptionalMoney = None
    description: OptionalText = None
    status: ProjectStatus | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is not None:
            v = require_name(v, "Project")
        return v


class ProjectRead(ReadModel):
    """Schema for reading a project."""

    id: UUID
    name: str
    client_id: UUID
    project_type_id: UUID
    budget: Amount
    billing_type: BillingType
    hourly_rate: Amount | None
    description: str | None
    status: ProjectStatus
    created_at: datetime
    updated_at: datetime
