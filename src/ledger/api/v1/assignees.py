"""Assignee endpoints."""

from uuid import UUID

from fastapi import APIRouter, status

from src.ledger.api.dependencies import AssigneeServiceDep
from src.ledger.schemas import AssigneeCreate, AssigneeRead, AssigneeUpdate

router = APIRouter(prefix="/assignees", tags=["assignees"])


@router.get("", response_model=list[AssigneeRead], summary="List assignees")
async def list_assignees(service: AssigneeServiceDep) -> list[AssigneeRead]:
    """All assignees by name."""
    return [AssigneeRead.model_validate(a) for a in await service.list_assignees()]


@router.get(
    "/{assignee_id}",
    response_model=AssigneeRead,
    summary="Get assignee",
    responses={404: {"description": "Assignee not found"}},
)
async def get_assignee(assignee_id: UUID, service: AssigneeServiceDep) -> AssigneeRead:
    return AssigneeRead.model_validate(await service.get_assignee(assignee_id))


@router.post(
    "",
    response_model=AssigneeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create assignee",
)
async def create_assignee(request: AssigneeCreate, service: AssigneeServiceDep) -> AssigneeRead:
    return AssigneeRead.model_validate(await service.create_assignee(request))


@router.patch(
    "/{assignee_id}",
    response_model=AssigneeRead,
    summary="Update assignee",
    responses={404: {"description": "Assignee not found"}},
)
async def update_assignee(
    assignee_id: UUID, request: AssigneeUpdate, service: AssigneeServiceDep
) -> AssigneeRead:
    return AssigneeRead.model_validate(await service.update_assignee(assignee_id, request))


@router.delete(
    "/{assignee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete assignee",
    description="Deletes the assignee and their time entries.",
    responses={404: {"description": "Assignee not found"}},
)
async def delete_assignee(assignee_id: UUID, service: AssigneeServiceDep) -> None:
    await service.delete_assignee(assignee_id)
