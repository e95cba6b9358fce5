"""Repository for Assignee entity."""

from src.ledger.models import Assignee
from src.ledger.repositories.base import BaseRepository


class AssigneeRepository(BaseRepository[Assignee]):
    """Repository for Assignee entity."""

    model = Assignee

    async def list_by_name(self) -> list[Assignee]:
        """List assignees alphabetically."""
        return await self.list_all(Assignee.name.asc())  # type: ignore[attr-defined]
