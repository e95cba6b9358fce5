"""Milestone endpoints."""

from uuid import UUID

from fastapi import APIRouter, status
from pydantic import BaseModel

from src.ledger.api.dependencies import MilestoneServiceDep
from src.ledger.models import MilestoneStatus
from src.ledger.schemas import (
    MilestoneCreate,
    MilestoneListItem,
    MilestoneUpdate,
    MilestoneWithPayments,
)

router = APIRouter(prefix="/milestones", tags=["milestones"])


class MilestoneStatusResponse(BaseModel):
    id: UUID
    status: MilestoneStatus


@router.get(
    "",
    response_model=list[MilestoneListItem],
    summary="List milestones",
    description="By due date, with project, client and payments.",
)
async def list_milestones(service: MilestoneServiceDep) -> list[MilestoneListItem]:
    return [MilestoneListItem.model_validate(m) for m in await service.list_milestones()]


@router.get(
    "/{milestone_id}",
    response_model=MilestoneWithPayments,
    summary="Get milestone",
    responses={404: {"description": "Milestone not found"}},
)
async def get_milestone(milestone_id: UUID, service: MilestoneServiceDep) -> MilestoneWithPayments:
    return MilestoneWithPayments.model_validate(await service.get_milestone(milestone_id))


@router.post(
    "",
    response_model=MilestoneWithPayments,
    status_code=status.HTTP_201_CREATED,
    summary="Create milestone",
    description="Status is stored as given (default pending); payments drive later changes.",
    responses={400: {"description": "Unknown project"}},
)
async def create_milestone(
    request: MilestoneCreate, service: MilestoneServiceDep
) -> MilestoneWithPayments:
    return MilestoneWithPayments.model_validate(await service.create_milestone(request))


@router.patch(
    "/{milestone_id}",
    response_model=MilestoneWithPayments,
    summary="Update milestone",
    responses={404: {"description": "Milestone not found"}},
)
async def update_milestone(
    milestone_id: UUID, request: MilestoneUpdate, service: MilestoneServiceDep
) -> MilestoneWithPayments:
    milestone = await service.update_milestone(milestone_id, request)
    return MilestoneWithPayments.model_validate(milestone)


@router.delete(
    "/{milestone_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete milestone",
    description="Deletes the milestone and its payments.",
    responses={404: {"description": "Milestone not found"}},
)
async def delete_milestone(milestone_id: UUID, service: MilestoneServiceDep) -> None:
    await service.delete_milestone(milestone_id)


@router.post(
    "/{milestone_id}/recompute-status",
    response_model=MilestoneStatusResponse,
    summary="Recompute milestone status",
    description="Re-derive the status from the milestone's payments and due date.",
    responses={404: {"description": "Milestone not found"}},
)
async def recompute_milestone_status(
    milestone_id: UUID, service: MilestoneServiceDep
) -> MilestoneStatusResponse:
    milestone_status = await service.recompute_status(milestone_id)
    return MilestoneStatusResponse(id=milestone_id, status=milestone_status)
