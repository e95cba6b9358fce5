"""Assignee management service."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.ledger.core.errors import NotFoundError
from src.ledger.models import Assignee
from src.ledger.repositories import AssigneeRepository
from src.ledger.schemas.assignee import AssigneeCreate, AssigneeUpdate
from src.ledger.services.base import BaseService, apply_changes


class AssigneeService(BaseService):
    """Assignee CRUD. Deleting an assignee removes their time entries."""

    def __init__(self, assignee_repo: AssigneeRepository, session: AsyncSession):
        super().__init__(session)
        self.assignee_repo = assignee_repo

    async def list_assignees(self) -> list[Assignee]:
        return await self.assignee_repo.list_by_name()

    async def get_assignee(self, assignee_id: UUID) -> Assignee:
        assignee = await self.assignee_repo.get_by_id(assignee_id)
        if assignee is None:
            raise NotFoundError("Assignee", assignee_id)
        return assignee

    async def create_assignee(self, data: AssigneeCreate) -> Assignee:
        assignee = Assignee(**data.model_dump())
        self.assignee_repo.add(assignee)
        await self.commit("create assignee")
        return assignee

    async def update_assignee(self, assignee_id: UUID, data: AssigneeUpdate) -> Assignee:
        assignee = await self.get_assignee(assignee_id)
        apply_changes(assignee, data.model_dump(exclude_unset=True), required=("name",))
        await self.commit("update assignee")
        return assignee

    async def delete_assignee(self, assignee_id: UUID) -> None:
        assignee = await self.get_assignee(assignee_id)
        await self.assignee_repo.delete(assignee)
        await self.commit("delete assignee")
