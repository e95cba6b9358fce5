"""Time-and-billing summary schemas."""

from datetime import datetime

from src.ledger.schemas.assignee import AssigneeRead
from src.ledger.schemas.common import Amount, ReadModel
from src.ledger.schemas.detail import ProjectWithClient, TimeEntryDetail


class ProjectTotalRead(ReadModel):
    project: ProjectWithClient
    total_hours: Amount
    total_amount: Amount
    entries: list[TimeEntryDetail]


class AssigneeTotalRead(ReadModel):
    assignee: AssigneeRead
    total_hours: Amount
    entries: list[TimeEntryDetail]


class OverallTotalRead(ReadModel):
    total_hours: Amount
    total_amount: Amount


class PeriodSummaryRead(ReadModel):
    """Totals for all time entries dated within [period_start, period_end]."""

    period_start: datetime
    period_end: datetime
    project_totals: list[ProjectTotalRead]
    assignee_totals: list[AssigneeTotalRead]
    overall_total: OverallTotalRead
    entries: list[TimeEntryDetail]
