"""Repository for ProjectType entity."""

from src.ledger.models import ProjectType
from src.ledger.repositories.base import BaseRepository


class ProjectTypeRepository(BaseRepository[ProjectType]):
    """Repository for ProjectType entity."""

    model = ProjectType

    async def list_by_name(self) -> list[ProjectType]:
        """List project types alphabetically."""
        return await self.list_all(ProjectType.name.asc())  # type: ignore[attr-defined]
