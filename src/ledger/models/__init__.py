"""Model exports.

Import from here: `from src.ledger.models import Client, Project`
Importing this package registers every table on SQLModel.metadata.
"""

# Enums
from src.ledger.models.enums import BillingType, MilestoneStatus, ProjectStatus

# Tables
from src.ledger.models.assignee import Assignee
from src.ledger.models.client import Client
from src.ledger.models.milestone import Milestone
from src.ledger.models.payment import Payment
from src.ledger.models.project import Project
from src.ledger.models.project_type import ProjectType
from src.ledger.models.time_entry import TimeEntry

__all__ = [
    # Enums
    "BillingType",
    "MilestoneStatus",
    "ProjectStatus",
    # Tables
    "Assignee",
    "Client",
    "Milestone",
    "Payment",
    "Project",
    "ProjectType",
    "TimeEntry",
]
