"""Shared schema building blocks."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
)

from src.ledger.models.base import to_naive_utc


def _blank_to_none(value: Any) -> Any:
    """Treat empty form values ("" or whitespace) as missing."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _strip(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


# Decimal internally, JSON number on the wire
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
Money = Annotated[Amount, Field(ge=0, max_digits=12, decimal_places=2)]
Hours = Annotated[Amount, Field(ge=0, max_digits=8, decimal_places=4)]
EntryHour = Annotated[int, Field(ge=0, le=24)]
EntryMinute = Annotated[int, Field(ge=0, le=59)]

# Aware datetimes are converted to naive UTC, matching the storage convention
UtcDateTime = Annotated[datetime, AfterValidator(to_naive_utc)]

# Optional free text: blank becomes None, surrounding whitespace is dropped
OptionalText = Annotated[str | None, BeforeValidator(_blank_to_none), AfterValidator(_strip)]

# Optional values where a blank form field means "not provided"
OptionalMoney = Annotated[Money | None, BeforeValidator(_blank_to_none)]
OptionalHours = Annotated[Hours | None, BeforeValidator(_blank_to_none)]
OptionalEntryHour = Annotated[EntryHour | None, BeforeValidator(_blank_to_none)]
OptionalEntryMinute = Annotated[EntryMinute | None, BeforeValidator(_blank_to_none)]


def require_name(value: str, label: str) -> str:
    """Strip a required name and reject blanks."""
    value = value.strip()
    if not value:
        raise ValueError(f"{label} name cannot be empty or whitespace only")
    return value


class ReadModel(BaseModel):
    """Base for response schemas built from ORM objects."""

    model_config = ConfigDict(from_attributes=True)
