"""Repository for Client entity."""

from uuid import UUID

from sqlalchemy.orm import selectinload

from src.ledger.models import Client, Milestone, Project
from src.ledger.repositories.base import BaseRepository


def _projects_with_payments():  # type: ignore[no-untyped-def]
    return (
        selectinload(Client.projects)  # type: ignore[arg-type]
        .selectinload(Project.milestones)  # type: ignore[arg-type]
        .selectinload(Milestone.payments)  # type: ignore[arg-type]
    )


class ClientRepository(BaseRepository[Client]):
    """Repository for Client entity."""

    model = Client

    async def list_with_projects(self) -> list[Client]:
        """List clients newest first, with projects, milestones and payments."""
        return await self.list_all(
            Client.created_at.desc(),  # type: ignore[attr-defined]
            options=[_projects_with_payments()],
        )

    async def get_with_projects(self, client_id: UUID) -> Client | None:
        """Get a client with projects (and their types), milestones and payments."""
        return await self.get_by_id(
            client_id,
            options=[
                _projects_with_payments(),
                selectinload(Client.projects).selectinload(Project.project_type),  # type: ignore[arg-type]
            ],
        )
