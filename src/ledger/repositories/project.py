"""Repository for Project entity."""

from uuid import UUID

from sqlalchemy.orm import selectinload

from src.ledger.models import Milestone, Project
from src.ledger.repositories.base import BaseRepository

PROJECT_DETAIL_OPTIONS = (
    selectinload(Project.client),  # type: ignore[arg-type]
    selectinload(Project.project_type),  # type: ignore[arg-type]
    selectinload(Project.milestones).selectinload(Milestone.payments),  # type: ignore[arg-type]
)


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project

    async def list_with_details(self) -> list[Project]:
        """List projects newest first with client, type, milestones and payments."""
        return await self.list_all(
            Project.created_at.desc(),  # type: ignore[attr-defined]
            options=PROJECT_DETAIL_OPTIONS,
        )

    async def get_with_details(self, project_id: UUID) -> Project | None:
        """Get a project with client, type and milestones ordered by due date."""
        return await self.get_by_id(project_id, options=PROJECT_DETAIL_OPTIONS)
