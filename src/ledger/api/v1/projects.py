"""Project endpoints."""

from uuid import UUID

from fastapi import APIRouter, status

from src.ledger.api.dependencies import ProjectServiceDep
from src.ledger.schemas import ProjectCreate, ProjectDetail, ProjectUpdate

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectDetail],
    summary="List projects",
    description="Newest first, with client, project type and milestones (with payments).",
)
async def list_projects(service: ProjectServiceDep) -> list[ProjectDetail]:
    return [ProjectDetail.model_validate(p) for p in await service.list_projects()]


@router.get(
    "/{project_id}",
    response_model=ProjectDetail,
    summary="Get project",
    description="Milestones are ordered by due date.",
    responses={404: {"description": "Project not found"}},
)
async def get_project(project_id: UUID, service: ProjectServiceDep) -> ProjectDetail:
    return ProjectDetail.model_validate(await service.get_project(project_id))


@router.post(
    "",
    response_model=ProjectDetail,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={
        400: {"description": "Unknown client or project type, or hourly project without rate"},
    },
)
async def create_project(request: ProjectCreate, service: ProjectServiceDep) -> ProjectDetail:
    return ProjectDetail.model_validate(await service.create_project(request))


@router.patch(
    "/{project_id}",
    response_model=ProjectDetail,
    summary="Update project",
    responses={
        400: {"description": "Unknown client or project type, or hourly project without rate"},
        404: {"description": "Project not found"},
    },
)
async def update_project(
    project_id: UUID, request: ProjectUpdate, service: ProjectServiceDep
) -> ProjectDetail:
    return ProjectDetail.model_validate(await service.update_project(project_id, request))


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    description="Deletes the project with its milestones, payments and time entries.",
    responses={404: {"description": "Project not found"}},
)
async def delete_project(project_id: UUID, service: ProjectServiceDep) -> None:
    await service.delete_project(project_id)
