"""Tests for milestone status resolution."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from src.ledger.models import MilestoneStatus
from src.ledger.services.milestone_service import resolve_milestone_status

pytestmark = pytest.mark.unit

NOW = datetime(2024, 6, 10, 12, 0, 0)

money = st.decimals(min_value=0, max_value=100_000, places=2, allow_nan=False)
offsets = st.integers(min_value=-10_000, max_value=10_000)


class TestResolveMilestoneStatus:
    def test_full_payment_is_paid_before_due_date(self):
        status = resolve_milestone_status(
            Decimal("1000"), datetime(2024, 12, 31), [Decimal("1000")], NOW
        )
        assert status == MilestoneStatus.PAID

    def test_partial_payment_past_due_is_overdue(self):
        status = resolve_milestone_status(
            Decimal("1000"), datetime(2024, 1, 1), [Decimal("400")], NOW
        )
        assert status == MilestoneStatus.OVERDUE

    def test_overpayment_past_due_is_paid(self):
        status = resolve_milestone_status(
            Decimal("1000"), datetime(2024, 1, 1), [Decimal("600"), Decimal("600")], NOW
        )
        assert status == MilestoneStatus.PAID

    def test_no_payments_before_due_date_is_pending(self):
        status = resolve_milestone_status(Decimal("1000"), NOW + timedelta(days=1), [], NOW)
        assert status == MilestoneStatus.PENDING

    def test_due_exactly_now_is_not_overdue(self):
        status = resolve_milestone_status(Decimal("1000"), NOW, [], NOW)
        assert status == MilestoneStatus.PENDING

    def test_zero_amount_milestone_is_paid_without_payments(self):
        status = resolve_milestone_status(Decimal("0"), datetime(2024, 1, 1), [], NOW)
        assert status == MilestoneStatus.PAID

    def test_accepts_a_generator_of_amounts(self):
        payments = (Decimal(x) for x in ("250", "250", "500"))
        status = resolve_milestone_status(Decimal("1000"), datetime(2024, 1, 1), payments, NOW)
        assert status == MilestoneStatus.PAID


@given(amount=money, payments=st.lists(money, max_size=5), offset=offsets)
def test_paid_exactly_when_total_covers_amount(amount, payments, offset):
    """Payment coverage decides PAID regardless of the due date."""
    due_date = NOW + timedelta(hours=offset)
    status = resolve_milestone_status(amount, due_date, payments, NOW)
    assert (status == MilestoneStatus.PAID) == (sum(payments, Decimal("0")) >= amount)


@given(amount=money, payments=st.lists(money, max_size=5), offset=offsets)
def test_unpaid_status_follows_due_date(amount, payments, offset):
    due_date = NOW + timedelta(hours=offset)
    status = resolve_milestone_status(amount, due_date, payments, NOW)
    if status != MilestoneStatus.PAID:
        expected = MilestoneStatus.OVERDUE if NOW > due_date else MilestoneStatus.PENDING
        assert status == expected


@given(amount=money, payments=st.lists(money, max_size=5), offset=offsets)
def test_resolution_is_deterministic(amount, payments, offset):
    due_date = NOW + timedelta(hours=offset)
    first = resolve_milestone_status(amount, due_date, payments, NOW)
    assert resolve_milestone_status(amount, due_date, payments, NOW) == first


@given(amount=money, payments=st.lists(money, min_size=1, max_size=5), offset=offsets)
def test_payment_order_does_not_matter(amount, payments, offset):
    due_date = NOW + timedelta(hours=offset)
    forward = resolve_milestone_status(amount, due_date, payments, NOW)
    assert resolve_milestone_status(amount, due_date, list(reversed(payments)), NOW) == forward
