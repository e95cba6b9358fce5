from src.ledger.schemas.assignee import AssigneeCreate, AssigneeRead, AssigneeUpdate
from src.ledger.schemas.client import ClientCreate, ClientRead, ClientUpdate
from src.ledger.schemas.detail import (
    ClientDetail,
    MilestoneListItem,
    MilestoneWithPayments,
    OverdueMilestone,
    PaymentCreated,
    PaymentDeleted,
    PaymentWithMilestone,
    ProjectDetail,
    ProjectSummary,
    TimeEntryDetail,
)
from src.ledger.schemas.milestone import MilestoneCreate, MilestoneRead, MilestoneUpdate
from src.ledger.schemas.payment import PaymentCreate, PaymentRead
from src.ledger.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from src.ledger.schemas.project_type import ProjectTypeCreate, ProjectTypeRead, ProjectTypeUpdate
from src.ledger.schemas.summary import PeriodSummaryRead
from src.ledger.schemas.time_entry import TimeEntryCreate, TimeEntryRead, TimeEntryUpdate

__all__ = [
    # Assignee
    "AssigneeCreate",
    "AssigneeRead",
    "AssigneeUpdate",
    # Client
    "ClientCreate",
    "ClientDetail",
    "ClientRead",
    "ClientUpdate",
    # Milestone
    "MilestoneCreate",
    "MilestoneListItem",
    "MilestoneRead",
    "MilestoneUpdate",
    "MilestoneWithPayments",
    "OverdueMilestone",
    # Payment
    "PaymentCreate",
    "PaymentCreated",
    "PaymentDeleted",
    "PaymentRead",
    "PaymentWithMilestone",
    # Project
    "ProjectCreate",
    "ProjectDetail",
    "ProjectRead",
    "ProjectSummary",
    "ProjectUpdate",
    # Project type
    "ProjectTypeCreate",
    "ProjectTypeRead",
    "ProjectTypeUpdate",
    # Summary
    "PeriodSummaryRead",
    # Time entry
    "TimeEntryCreate",
    "TimeEntryDetail",
    "TimeEntryRead",
    "TimeEntryUpdate",
]
