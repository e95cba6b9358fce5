"""Project type endpoints."""

from uuid import UUID

from fastapi import APIRouter, status

from src.ledger.api.dependencies import ProjectTypeServiceDep
from src.ledger.schemas import ProjectTypeCreate, ProjectTypeRead, ProjectTypeUpdate

router = APIRouter(prefix="/project-types", tags=["project-types"])


@router.get("", response_model=list[ProjectTypeRead], summary="List project types")
async def list_project_types(service: ProjectTypeServiceDep) -> list[ProjectTypeRead]:
    """All project types by name."""
    return [ProjectTypeRead.model_validate(t) for t in await service.list_project_types()]


@router.get(
    "/{project_type_id}",
    response_model=ProjectTypeRead,
    summary="Get project type",
    responses={404: {"description": "Project type not found"}},
)
async def get_project_type(
    project_type_id: UUID, service: ProjectTypeServiceDep
) -> ProjectTypeRead:
    return ProjectTypeRead.model_validate(await service.get_project_type(project_type_id))


@router.post(
    "",
    response_model=ProjectTypeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project type",
)
async def create_project_type(
    request: ProjectTypeCreate, service: ProjectTypeServiceDep
) -> ProjectTypeRead:
    return ProjectTypeRead.model_validate(await service.create_project_type(request))


@router.patch(
    "/{project_type_id}",
    response_model=ProjectTypeRead,
    summary="Update project type",
    responses={404: {"description": "Project type not found"}},
)
async def update_project_type(
    project_type_id: UUID, request: ProjectTypeUpdate, service: ProjectTypeServiceDep
) -> ProjectTypeRead:
    project_type = await service.update_project_type(project_type_id, request)
    return ProjectTypeRead.model_validate(project_type)


@router.delete(
    "/{project_type_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project type",
    responses={
        404: {"description": "Project type not found"},
        409: {"description": "Project type is still used by projects"},
    },
)
async def delete_project_type(project_type_id: UUID, service: ProjectTypeServiceDep) -> None:
    await service.delete_project_type(project_type_id)
