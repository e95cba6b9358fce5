"""Repository for Milestone entity."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import and_, or_
from sqlalchemy.orm import selectinload
from sqlmodel import select

from src.ledger.models import Milestone, MilestoneStatus, Project
from src.ledger.repositories.base import BaseRepository

MILESTONE_LIST_OPTIONS = (
    selectinload(Milestone.project).selectinload(Project.client),  # type: ignore[arg-type]
    selectinload(Milestone.payments),  # type: ignore[arg-type]
)


class MilestoneRepository(BaseRepository[Milestone]):
    """Repository for Milestone entity."""

    model = Milestone

    async def list_with_payments(self) -> list[Milestone]:
        """List milestones by due date with project, client and payments."""
        return await self.list_all(
            Milestone.due_date.asc(),  # type: ignore[attr-defined]
            options=MILESTONE_LIST_OPTIONS,
        )

    async def get_with_payments(self, milestone_id: UUID) -> Milestone | None:
        """Get a milestone with project, client and payments."""
        return await self.get_by_id(milestone_id, options=MILESTONE_LIST_OPTIONS)

    async def get_for_status_update(self, milestone_id: UUID) -> Milestone | None:
        """Get a milestone and its payments, locking the milestone row.

        The row lock serializes concurrent status recomputes for the same
        milestone. Backends without SELECT ... FOR UPDATE ignore it.
        """
        result = await self.session.execute(
            select(Milestone)
            .where(Milestone.id == milestone_id)
            .options(selectinload(Milestone.payments))  # type: ignore[arg-type]
            .with_for_update(of=Milestone)  # type: ignore[arg-type]
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_overdue(self, now: datetime) -> list[Milestone]:
        """List milestones marked overdue, or still pending past their due date."""
        query = (
            select(Milestone)
            .where(
                or_(
                    Milestone.status == MilestoneStatus.OVERDUE.value,
                    and_(
                        Milestone.status == MilestoneStatus.PENDING.value,
                        Milestone.due_date < now,  # type: ignore[operator]
                    ),
                )
            )
            .options(
                selectinload(Milestone.project).selectinload(Project.client),  # type: ignore[arg-type]
                selectinload(Milestone.project).selectinload(Project.project_type),  # type: ignore[arg-type]
                selectinload(Milestone.payments),  # type: ignore[arg-type]
            )
            .order_by(Milestone.due_date.asc())  # type: ignore[attr-defined]
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
