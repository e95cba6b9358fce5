"""FastAPI dependency injection definitions.

Re-exports all dependencies so routers import from one place.
"""

# Database
from src.ledger.api.dependencies.db import (
    DatabaseDep,
    DBSession,
    get_database,
    get_db_session,
)

# Repositories
from src.ledger.api.dependencies.repositories import (
    AssigneeRepo,
    ClientRepo,
    MilestoneRepo,
    PaymentRepo,
    ProjectRepo,
    ProjectTypeRepo,
    TimeEntryRepo,
)

# Services
from src.ledger.api.dependencies.services import (
    AssigneeServiceDep,
    ClientServiceDep,
    MilestoneServiceDep,
    PaymentServiceDep,
    ProjectServiceDep,
    ProjectTypeServiceDep,
    TimeEntryServiceDep,
    TimeSummaryServiceDep,
)

__all__ = [
    # Database
    "DBSession",
    "DatabaseDep",
    "get_database",
    "get_db_session",
    # Repositories
    "AssigneeRepo",
    "ClientRepo",
    "MilestoneRepo",
    "PaymentRepo",
    "ProjectRepo",
    "ProjectTypeRepo",
    "TimeEntryRepo",
    # Services
    "AssigneeServiceDep",
    "ClientServiceDep",
    "MilestoneServiceDep",
    "PaymentServiceDep",
    "ProjectServiceDep",
    "ProjectTypeServiceDep",
    "TimeEntryServiceDep",
    "TimeSummaryServiceDep",
]
