"""Project management service."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.ledger.core.errors import NotFoundError, ValidationError
from src.ledger.models import BillingType, Project
from src.ledger.repositories import ClientRepository, ProjectRepository, ProjectTypeRepository
from src.ledger.schemas.project import ProjectCreate, ProjectUpdate
from src.ledger.services.base import BaseService, apply_changes

REQUIRED_FIELDS = ("name", "client_id", "project_type_id", "budget", "billing_type", "status")


class ProjectService(BaseService):
    """Project CRUD with billing and reference validation."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        client_repo: ClientRepository,
        project_type_repo: ProjectTypeRepository,
        session: AsyncSession,
    ):
        super().__init__(session)
        self.project_repo = project_repo
        self.client_repo = client_repo
        self.project_type_repo = project_type_repo

    async def list_projects(self) -> list[Project]:
        return await self.project_repo.list_with_details()

    async def get_project(self, project_id: UUID) -> Project:
        """Get a project with client, type and milestones (with payments)."""
        project = await self.project_repo.get_with_details(project_id)
        if project is None:
            raise NotFoundError("Project", project_id)
        return project

    async def create_project(self, data: ProjectCreate) -> Project:
        await self._validate_references(data.client_id, data.project_type_id)
        _validate_billing(data.billing_type, data.hourly_rate is not None)

        project = Project(
            name=data.name,
            client_id=data.client_id,
            project_type_id=data.project_type_id,
            budget=data.budget,
            billing_type=data.billing_type.value,
            hourly_rate=data.hourly_rate,
            description=data.description,
            status=data.status.value,
        )
        self.project_repo.add(project)
        await self.commit("create project")
        return await self.get_project(project.id)

    async def update_project(self, project_id: UUID, data: ProjectUpdate) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError("Project", project_id)

        changes = data.model_dump(exclude_unset=True, mode="python")
        await self._validate_references(changes.get("client_id"), changes.get("project_type_id"))

        billing_type = data.billing_type or project.billing_type_enum
        hourly_rate = changes["hourly_rate"] if "hourly_rate" in changes else project.hourly_rate
        _validate_billing(billing_type, hourly_rate is not None)

        for key in ("billing_type", "status"):
            if changes.get(key) is not None:
                changes[key] = changes[key].value

        apply_changes(project, changes, required=REQUIRED_FIELDS)
        await self.commit("update project")
        return await self.get_project(project_id)

    async def delete_project(self, project_id: UUID) -> None:
        """Delete a project with its milestones, payments and time entries."""
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError("Project", project_id)

        await self.project_repo.delete(project)
        await self.commit("delete project")

    async def _validate_references(
        self, client_id: UUID | None, project_type_id: UUID | None
    ) -> None:
        """Reject unknown client or project type ids before any write."""
        if client_id is not None and not await self.client_repo.exists(client_id):
            raise ValidationError(f"Client {client_id} does not exist")
        if project_type_id is not None and not await self.project_type_repo.exists(
            project_type_id
        ):
            raise ValidationError(f"Project type {project_type_id} does not exist")


def _validate_billing(billing_type: BillingType, has_rate: bool) -> None:
    if billing_type == BillingType.HOURLY and not has_rate:
        raise ValidationError("Hourly rate is required for hourly projects")
