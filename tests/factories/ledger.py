"""Factories for ledger records."""

from datetime import timedelta
from decimal import Decimal
from uuid import uuid4

from polyfactory import Use

from src.ledger.models import (
    Assignee,
    BillingType,
    Client,
    Milestone,
    MilestoneStatus,
    Payment,
    Project,
    ProjectStatus,
    ProjectType,
    TimeEntry,
)
from src.ledger.models.base import utc_now
from tests.factories.base import BaseFactory


class ClientFactory(BaseFactory):
    __model__ = Client

    id = Use(uuid4)
    name = Use(lambda: f"Client {uuid4().hex[-8:]}")
    email = None
    phone = None
    address = None
    created_at = Use(utc_now)
    updated_at = Use(utc_now)


class ProjectTypeFactory(BaseFactory):
    __model__ = ProjectType

    id = Use(uuid4)
    name = Use(lambda: f"Type {uuid4().hex[-8:]}")
    created_at = Use(utc_now)
    updated_at = Use(utc_now)


class ProjectFactory(BaseFactory):
    """Fixed-price active project; pass client_id and project_type_id."""

    __model__ = Project

    id = Use(uuid4)
    name = Use(lambda: f"Project {uuid4().hex[-8:]}")
    budget = Decimal("1000.00")
    billing_type = BillingType.FIXED.value
    hourly_rate = None
    description = None
    status = ProjectStatus.ACTIVE.value
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def hourly(cls, rate: Decimal, **kwargs):
        """Build an hourly project billed at ``rate``."""
        return cls.build(billing_type=BillingType.HOURLY.value, hourly_rate=rate, **kwargs)


class MilestoneFactory(BaseFactory):
    """Pending milestone due in a week; pass project_id."""

    __model__ = Milestone

    id = Use(uuid4)
    name = Use(lambda: f"Milestone {uuid4().hex[-8:]}")
    amount = Decimal("500.00")
    due_date = Use(lambda: utc_now() + timedelta(days=7))
    description = None
    status = MilestoneStatus.PENDING.value
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def past_due(cls, **kwargs):
        """Build a still-pending milestone whose due date has passed."""
        return cls.build(due_date=utc_now() - timedelta(days=3), **kwargs)


class PaymentFactory(BaseFactory):
    __model__ = Payment

    id = Use(uuid4)
    amount = Decimal("100.00")
    payment_date = Use(utc_now)
    notes = None
    created_at = Use(utc_now)


class AssigneeFactory(BaseFactory):
    __model__ = Assignee

    id = Use(uuid4)
    name = Use(lambda: f"Assignee {uuid4().hex[-8:]}")
    email = None
    phone = None
    created_at = Use(utc_now)
    updated_at = Use(utc_now)


class TimeEntryFactory(BaseFactory):
    """One hour logged now; pass project_id and assignee_id."""

    __model__ = TimeEntry

    id = Use(uuid4)
    date = Use(utc_now)
    hours = Decimal("1.0000")
    entry_hour = None
    entry_minute = None
    description = None
    created_at = Use(utc_now)
    updated_at = Use(utc_now)
