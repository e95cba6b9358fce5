"""Project type model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.ledger.models.base import utc_now


class ProjectType(SQLModel, table=True):
    """Category used to group projects.

    Names are unique by convention only; the column carries no constraint.
    """

    __tablename__ = "project_types"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100, index=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
