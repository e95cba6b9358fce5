"""Repository layer - data access abstraction."""

from src.ledger.repositories.assignee import AssigneeRepository
from src.ledger.repositories.base import BaseRepository
from src.ledger.repositories.client import ClientRepository
from src.ledger.repositories.milestone import MilestoneRepository
from src.ledger.repositories.payment import PaymentRepository
from src.ledger.repositories.project import ProjectRepository
from src.ledger.repositories.project_type import ProjectTypeRepository
from src.ledger.repositories.time_entry import TimeEntryRepository

__all__ = [
    "AssigneeRepository",
    "BaseRepository",
    "ClientRepository",
    "MilestoneRepository",
    "PaymentRepository",
    "ProjectRepository",
    "ProjectTypeRepository",
    "TimeEntryRepository",
]
