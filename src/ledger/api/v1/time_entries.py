"""Time entry endpoints."""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from src.ledger.api.dependencies import TimeEntryServiceDep
from src.ledger.models.base import to_naive_utc
from src.ledger.schemas import TimeEntryCreate, TimeEntryDetail, TimeEntryUpdate

router = APIRouter(prefix="/time-entries", tags=["time-entries"])


@router.get(
    "",
    response_model=list[TimeEntryDetail],
    summary="List time entries",
    description=(
        "Newest first. The date filter applies only when both start and end are given."
    ),
)
async def list_time_entries(
    service: TimeEntryServiceDep,
    project_id: Annotated[UUID | None, Query(description="Only this project")] = None,
    assignee_id: Annotated[UUID | None, Query(description="Only this assignee")] = None,
    start: Annotated[datetime | None, Query(description="Earliest entry date")] = None,
    end: Annotated[datetime | None, Query(description="Latest entry date")] = None,
) -> list[TimeEntryDetail]:
    entries = await service.list_time_entries(
        project_id=project_id,
        assignee_id=assignee_id,
        start=to_naive_utc(start) if start else None,
        end=to_naive_utc(end) if end else None,
    )
    return [TimeEntryDetail.model_validate(e) for e in entries]


@router.get(
    "/{entry_id}",
    response_model=TimeEntryDetail,
    summary="Get time entry",
    responses={404: {"description": "Time entry not found"}},
)
async def get_time_entry(entry_id: UUID, service: TimeEntryServiceDep) -> TimeEntryDetail:
    return TimeEntryDetail.model_validate(await service.get_time_entry(entry_id))


@router.post(
    "",
    response_model=TimeEntryDetail,
    status_code=status.HTTP_201_CREATED,
    summary="Log time",
    description="When entry_hour and entry_minute are both given they determine hours.",
    responses={400: {"description": "Unknown project or assignee"}},
)
async def create_time_entry(
    request: TimeEntryCreate, service: TimeEntryServiceDep
) -> TimeEntryDetail:
    return TimeEntryDetail.model_validate(await service.create_time_entry(request))


@router.patch(
    "/{entry_id}",
    response_model=TimeEntryDetail,
    summary="Update time entry",
    responses={
        400: {"description": "Unknown project or assignee"},
        404: {"description": "Time entry not found"},
    },
)
async def update_time_entry(
    entry_id: UUID, request: TimeEntryUpdate, service: TimeEntryServiceDep
) -> TimeEntryDetail:
    return TimeEntryDetail.model_validate(await service.update_time_entry(entry_id, request))


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete time entry",
    responses={404: {"description": "Time entry not found"}},
)
async def delete_time_entry(entry_id: UUID, service: TimeEntryServiceDep) -> None:
    await service.delete_time_entry(entry_id)
