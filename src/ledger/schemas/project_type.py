"""Project type schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.ledger.schemas.common import ReadModel, require_name


class ProjectTypeCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_name(v, "Project type")


class ProjectTypeUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is not None:
            v = require_name(v, "Project type")
        return v


class ProjectTypeRead(ReadModel):
    id: UUID
    name: str
    created_at: datetime
