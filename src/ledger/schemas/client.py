"""Client schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.ledger.schemas.common import OptionalText, ReadModel, require_name


class ClientCreate(BaseModel):
    """Schema for creating a client."""

    name: str = Field(min_length=1, max_length=200)
    email: OptionalText = None
    phone: OptionalText = None
    address: OptionalText = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_name(v, "Client")


class ClientUpdate(BaseModel):
    """Schema for updating a client. Only provided fields change."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    email: OptionalText = None
    phone: OptionalText = None
    address: OptionalText = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is not None:
            v = require_name(v, "Client")
        return v


class ClientRead(ReadModel):
    """Schema for reading a client."""

    id: UUID
    name: str
    email: str | None
    phone: str | None
    address: str | None
    created_at: datetime
    updated_at: datetime
