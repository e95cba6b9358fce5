"""Composite read schemas with related records expanded.

Each schema expects the matching relationships to be eager-loaded by the
repository that produced the object.
"""

from uuid import UUID

from pydantic import BaseModel

from src.ledger.models.enums import MilestoneStatus
from src.ledger.schemas.assignee import AssigneeRead
from src.ledger.schemas.client import ClientRead
from src.ledger.schemas.common import Amount
from src.ledger.schemas.milestone import MilestoneRead
from src.ledger.schemas.payment import PaymentRead
from src.ledger.schemas.project import ProjectRead
from src.ledger.schemas.project_type import ProjectTypeRead
from src.ledger.schemas.time_entry import TimeEntryRead


class ProjectWithClient(ProjectRead):
    client: ClientRead


class ProjectSummary(ProjectWithClient):
    project_type: ProjectTypeRead


class MilestoneWithPayments(MilestoneRead):
    """Milestone with payments and derived totals."""

    payments: list[PaymentRead]
    total_paid: Amount
    remaining: Amount


class MilestoneWithProject(MilestoneRead):
    project: ProjectWithClient


class MilestoneListItem(MilestoneWithPayments):
    project: ProjectWithClient


class OverdueMilestone(MilestoneWithPayments):
    project: ProjectSummary


class ProjectDetail(ProjectSummary):
    """Project with client, type and milestones ordered by due date."""

    milestones: list[MilestoneWithPayments]


class ClientProject(ProjectRead):
    project_type: ProjectTypeRead
    milestones: list[MilestoneWithPayments]


class ClientDetail(ClientRead):
    projects: list[ClientProject]


class PaymentWithMilestone(PaymentRead):
    milestone: MilestoneWithProject


class PaymentCreated(PaymentWithMilestone):
    """Payment creation result.

    ``milestone_status`` is the recomputed status, or None when the
    recompute failed after the payment was stored.
    """

    milestone_status: MilestoneStatus | None


class PaymentDeleted(BaseModel):
    """Payment deletion result; ``milestone_status`` as for PaymentCreated."""

    id: UUID
    milestone_id: UUID
    milestone_status: MilestoneStatus | None


class TimeEntryDetail(TimeEntryRead):
    project: ProjectWithClient
    assignee: AssigneeRead
