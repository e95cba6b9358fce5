"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import ClientFactory, ProjectFactory, ...
"""

from tests.factories.base import BaseFactory
from tests.factories.ledger import (
    AssigneeFactory,
    ClientFactory,
    MilestoneFactory,
    PaymentFactory,
    ProjectFactory,
    ProjectTypeFactory,
    TimeEntryFactory,
)

__all__ = [
    "AssigneeFactory",
    "BaseFactory",
    "ClientFactory",
    "MilestoneFactory",
    "PaymentFactory",
    "ProjectFactory",
    "ProjectTypeFactory",
    "TimeEntryFactory",
]
