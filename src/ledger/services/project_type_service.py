"""Project type management service."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.ledger.core.errors import NotFoundError
from src.ledger.models import ProjectType
from src.ledger.repositories import ProjectTypeRepository
from src.ledger.schemas.project_type import ProjectTypeCreate, ProjectTypeUpdate
from src.ledger.services.base import BaseService, apply_changes


class ProjectTypeService(BaseService):
    """Project type CRUD. Deleting a type still used by projects is a constraint violation."""

    def __init__(self, project_type_repo: ProjectTypeRepository, session: AsyncSession):
        super().__init__(session)
        self.project_type_repo = project_type_repo

    async def list_project_types(self) -> list[ProjectType]:
        return await self.project_type_repo.list_by_name()

    async def get_project_type(self, project_type_id: UUID) -> ProjectType:
        project_type = await self.project_type_repo.get_by_id(project_type_id)
        if project_type is None:
            raise NotFoundError("Project type", project_type_id)
        return project_type

    async def create_project_type(self, data: ProjectTypeCreate) -> ProjectType:
        project_type = ProjectType(name=data.name)
        self.project_type_repo.add(project_type)
        await self.commit("create project type")
        return project_type

    async def update_project_type(
        self, project_type_id: UUID, data: ProjectTypeUpdate
    ) -> ProjectType:
        project_type = await self.get_project_type(project_type_id)
        apply_changes(project_type, data.model_dump(exclude_unset=True), required=("name",))
        await self.commit("update project type")
        return project_type

    async def delete_project_type(self, project_type_id: UUID) -> None:
        project_type = await self.get_project_type(project_type_id)
        await self.project_type_repo.delete(project_type)
        await self.commit("delete project type")
