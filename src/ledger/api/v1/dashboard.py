"""Dashboard endpoints: overdue milestones and time summaries."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Query

from src.ledger.api.dependencies import MilestoneServiceDep, TimeSummaryServiceDep
from src.ledger.schemas import OverdueMilestone, PeriodSummaryRead

router = APIRouter(tags=["dashboard"])

ReferenceDate = Annotated[
    datetime | None,
    Query(alias="date", description="Any moment inside the period; defaults to now"),
]


@router.get(
    "/overdue",
    response_model=list[OverdueMilestone],
    summary="Overdue milestones",
    description=(
        "Milestones marked overdue, or still pending past their due date, "
        "by due date with amounts paid and remaining."
    ),
)
async def list_overdue(service: MilestoneServiceDep) -> list[OverdueMilestone]:
    return [OverdueMilestone.model_validate(m) for m in await service.list_overdue()]


@router.get(
    "/time-summary/weekly",
    response_model=PeriodSummaryRead,
    summary="Weekly time summary",
    description="Monday 00:00 through Sunday 23:59:59.999 of the week containing the date.",
)
async def weekly_summary(
    service: TimeSummaryServiceDep, reference: ReferenceDate = None
) -> PeriodSummaryRead:
    return PeriodSummaryRead.model_validate(await service.weekly(reference))


@router.get(
    "/time-summary/monthly",
    response_model=PeriodSummaryRead,
    summary="Monthly time summary",
)
async def monthly_summary(
    service: TimeSummaryServiceDep, reference: ReferenceDate = None
) -> PeriodSummaryRead:
    return PeriodSummaryRead.model_validate(await service.monthly(reference))


@router.get(
    "/time-summary",
    response_model=PeriodSummaryRead,
    summary="Time summary for a date range",
    responses={400: {"description": "start is after end"}},
)
async def range_summary(
    service: TimeSummaryServiceDep,
    start: Annotated[datetime, Query(description="Period start, inclusive")],
    end: Annotated[datetime, Query(description="Period end, inclusive")],
) -> PeriodSummaryRead:
    return PeriodSummaryRead.model_validate(await service.summarize(start, end))
