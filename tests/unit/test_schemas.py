"""Tests for request and response schema validation."""

from datetime import UTC, datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from src.ledger.models import BillingType
from src.ledger.schemas import (
    ClientCreate,
    MilestoneCreate,
    PaymentCreate,
    ProjectCreate,
    ProjectTypeCreate,
    TimeEntryCreate,
)
from src.ledger.schemas.summary import OverallTotalRead

pytestmark = pytest.mark.unit


def _project(**overrides) -> ProjectCreate:
    data = {
        "name": "Website",
        "client_id": uuid4(),
        "project_type_id": uuid4(),
        "budget": "1500.00",
    } | overrides
    return ProjectCreate.model_validate(data)


class TestProjectCreate:
    def test_defaults(self):
        project = _project()
        assert project.billing_type == BillingType.FIXED
        assert project.hourly_rate is None
        assert project.budget == Decimal("1500.00")

    def test_blank_hourly_rate_is_none(self):
        assert _project(hourly_rate="").hourly_rate is None
        assert _project(hourly_rate="  ").hourly_rate is None

    def test_negative_budget_rejected(self):
        with pytest.raises(ValidationError):
            _project(budget="-1")

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            _project(status="archived")

    def test_on_hold_status_accepted(self):
        assert _project(status="on-hold").status.value == "on-hold"


@given(name=st.text(alphabet=" \t\n", max_size=10))
def test_whitespace_names_rejected(name):
    with pytest.raises(ValidationError):
        ClientCreate(name=name)


def test_names_are_stripped():
    assert ProjectTypeCreate(name="  Design  ").name == "Design"


def test_payment_amount_must_be_positive():
    with pytest.raises(ValidationError):
        PaymentCreate(milestone_id=uuid4(), amount=Decimal("0"))
    assert PaymentCreate(milestone_id=uuid4(), amount=Decimal("0.01")).payment_date is None


def test_aware_due_date_normalized_to_naive_utc():
    plus_two = timezone(timedelta(hours=2))
    milestone = MilestoneCreate(
        name="Launch",
        project_id=uuid4(),
        amount=Decimal("100"),
        due_date=datetime(2024, 6, 1, 12, 0, tzinfo=plus_two),
    )
    assert milestone.due_date == datetime(2024, 6, 1, 10, 0)
    assert milestone.due_date.tzinfo is None


def test_utc_date_loses_tzinfo():
    entry = TimeEntryCreate(
        project_id=uuid4(), assignee_id=uuid4(), date=datetime(2024, 6, 1, 9, tzinfo=UTC)
    )
    assert entry.date == datetime(2024, 6, 1, 9)


def test_time_entry_minute_range():
    with pytest.raises(ValidationError):
        TimeEntryCreate(
            project_id=uuid4(), assignee_id=uuid4(), date=datetime(2024, 6, 1), entry_minute=60
        )


def test_decimals_serialize_as_json_numbers():
    total = OverallTotalRead(total_hours=Decimal("7.5000"), total_amount=Decimal("200.00"))
    assert total.model_dump(mode="json") == {"total_hours": 7.5, "total_amount": 200.0}
    assert total.model_dump()["total_hours"] == Decimal("7.5000")
