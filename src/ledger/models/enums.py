"""Shared enums for models."""

from enum import Enum


class ProjectStatus(str, Enum):
    """Project lifecycle status."""

    ACTIVE = "active"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"


class BillingType(str, Enum):
    """How a project is billed."""

    FIXED = "fixed"
    HOURLY = "hourly"


class MilestoneStatus(str, Enum):
    """Milestone payment status."""

    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
