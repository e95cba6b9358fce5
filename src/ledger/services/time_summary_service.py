"""Time-and-billing summaries over a date range."""

import calendar
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal
from uuid import UUID

from src.ledger.core.errors import ValidationError
from src.ledger.models import Assignee, Project, TimeEntry
from src.ledger.models.base import to_naive_utc, utc_now
from src.ledger.repositories import TimeEntryRepository

# Periods end on the last millisecond of their final day
_END_OF_DAY = timedelta(days=1, milliseconds=-1)


def week_range(now: datetime) -> tuple[datetime, datetime]:
    """Monday 00:00 through Sunday 23:59:59.999 of the week containing ``now``."""
    monday = (now - timedelta(days=now.weekday())).replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    return monday, monday + timedelta(days=6) + _END_OF_DAY


def month_range(now: datetime) -> tuple[datetime, datetime]:
    """First day 00:00 through last day 23:59:59.999 of the month containing ``now``."""
    first = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    last_day = calendar.monthrange(now.year, now.month)[1]
    return first, first.replace(day=last_day) + _END_OF_DAY


@dataclass
class ProjectTotal:
    project: Project
    total_hours: Decimal = Decimal("0")
    total_amount: Decimal = Decimal("0")
    entries: list[TimeEntry] = field(default_factory=list)


@dataclass
class AssigneeTotal:
    assignee: Assignee
    total_hours: Decimal = Decimal("0")
    entries: list[TimeEntry] = field(default_factory=list)


@dataclass
class OverallTotal:
    total_hours: Decimal = Decimal("0")
    total_amount: Decimal = Decimal("0")


@dataclass
class PeriodSummary:
    period_start: datetime
    period_end: datetime
    project_totals: list[ProjectTotal]
    assignee_totals: list[AssigneeTotal]
    overall_total: OverallTotal
    entries: list[TimeEntry]


def aggregate_time_entries(
    entries: Iterable[TimeEntry], period_start: datetime, period_end: datetime
) -> PeriodSummary:
    """Group entries per project and per assignee and total them.

    Each entry's project and assignee must be loaded. Groups keep the order
    in which their first entry appears. A project's amount is hours times its
    hourly rate; projects without a rate contribute hours but no amount.
    """
    entries = list(entries)
    by_project: dict[UUID, ProjectTotal] = {}
    by_assignee: dict[UUID, AssigneeTotal] = {}

    for entry in entries:
        project_total = by_project.get(entry.project_id)
        if project_total is None:
            project_total = by_project[entry.project_id] = ProjectTotal(entry.project)
        project_total.total_hours += entry.hours
        project_total.entries.append(entry)

        assignee_total = by_assignee.get(entry.assignee_id)
        if assignee_total is None:
            assignee_total = by_assignee[entry.assignee_id] = AssigneeTotal(entry.assignee)
        assignee_total.total_hours += entry.hours
        assignee_total.entries.append(entry)

    for project_total in by_project.values():
        rate = project_total.project.hourly_rate
        if rate is not None:
            project_total.total_amount = project_total.total_hours * rate

    overall = OverallTotal(
        total_hours=sum((entry.hours for entry in entries), Decimal("0")),
        total_amount=sum((p.total_amount for p in by_project.values()), Decimal("0")),
    )
    return PeriodSummary(
        period_start=period_start,
        period_end=period_end,
        project_totals=list(by_project.values()),
        assignee_totals=list(by_assignee.values()),
        overall_total=overall,
        entries=entries,
    )


class TimeSummaryService:
    """Read-only summaries; no writes, so no transaction handling."""

    def __init__(self, time_entry_repo: TimeEntryRepository):
        self.time_entry_repo = time_entry_repo

    async def summarize(self, start: datetime, end: datetime) -> PeriodSummary:
        start, end = to_naive_utc(start), to_naive_utc(end)
        if start > end:
            raise ValidationError("Start date must not be after end date")
        entries = await self.time_entry_repo.list_in_range(start, end)
        return aggregate_time_entries(entries, start, end)

    async def weekly(self, reference: datetime | None = None) -> PeriodSummary:
        return await self.summarize(*week_range(to_naive_utc(reference or utc_now())))

    async def monthly(self, reference: datetime | None = None) -> PeriodSummary:
        return await self.summarize(*month_range(to_naive_utc(reference or utc_now())))
