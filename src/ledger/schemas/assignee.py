"""Assignee schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.ledger.schemas.common import OptionalText, ReadModel, require_name


class AssigneeCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    email: OptionalText = None
    phone: OptionalText = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_name(v, "Assignee")


class AssigneeUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    email: OptionalText = None
    phone: OptionalText = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is not None:
            v = require_name(v, "Assignee")
        return v


class AssigneeRead(ReadModel):
    id: UUID
    name: str
    email: str | None
    phone: str | None
    created_at: datetime
