"""Milestone management and payment-status resolution."""

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.ledger.core.errors import NotFoundError, ValidationError
from src.ledger.core.logging import get_logger
from src.ledger.models import Milestone, MilestoneStatus
from src.ledger.models.base import utc_now
from src.ledger.repositories import MilestoneRepository, ProjectRepository
from src.ledger.schemas.milestone import MilestoneCreate, MilestoneUpdate
from src.ledger.services.base import BaseService, apply_changes

logger = get_logger(__name__)


def resolve_milestone_status(
    amount: Decimal,
    due_date: datetime,
    payment_amounts: Iterable[Decimal],
    now: datetime,
) -> MilestoneStatus:
    """Derive a milestone's status from what has been paid and when it is due.

    Rules, in priority order:
        1. paid in full (total >= amount) -> PAID, whatever the due date
        2. past due (now > due_date) -> OVERDUE
        3. otherwise -> PENDING
    """
    total_paid = sum(payment_amounts, Decimal("0"))
    if total_paid >= amount:
        return MilestoneStatus.PAID
    if now > due_date:
        return MilestoneStatus.OVERDUE
    return MilestoneStatus.PENDING


class MilestoneService(BaseService):
    """Milestone CRUD, status recompute and the overdue listing."""

    def __init__(
        self,
        milestone_repo: MilestoneRepository,
        project_repo: ProjectRepository,
        session: AsyncSession,
    ):
        super().__init__(session)
        self.milestone_repo = milestone_repo
        self.project_repo = project_repo

    async def list_milestones(self) -> list[Milestone]:
        return await self.milestone_repo.list_with_payments()

    async def get_milestone(self, milestone_id: UUID) -> Milestone:
        milestone = await self.milestone_repo.get_with_payments(milestone_id)
        if milestone is None:
            raise NotFoundError("Milestone", milestone_id)
        return milestone

    async def create_milestone(self, data: MilestoneCreate) -> Milestone:
        """Create a milestone with the status the caller supplied.

        Status is not derived here; it changes only when payments change.
        """
        if not await self.project_repo.exists(data.project_id):
            raise ValidationError(f"Project {data.project_id} does not exist")

        milestone = Milestone(
            name=data.name,
            project_id=data.project_id,
            amount=data.amount,
            due_date=data.due_date,
            description=data.description,
            status=data.status.value,
        )
        self.milestone_repo.add(milestone)
        await self.commit("create milestone")
        return await self.get_milestone(milestone.id)

    async def update_milestone(self, milestone_id: UUID, data: MilestoneUpdate) -> Milestone:
        milestone = await self.milestone_repo.get_by_id(milestone_id)
        if milestone is None:
            raise NotFoundError("Milestone", milestone_id)

        changes = data.model_dump(exclude_unset=True)
        if changes.get("status") is not None:
            changes["status"] = changes["status"].value
        apply_changes(
            milestone, changes, required=("name", "amount", "due_date", "status")
        )
        await self.commit("update milestone")
        return await self.get_milestone(milestone_id)

    async def delete_milestone(self, milestone_id: UUID) -> None:
        """Delete a milestone and its payments."""
        milestone = await self.milestone_repo.get_by_id(milestone_id)
        if milestone is None:
            raise NotFoundError("Milestone", milestone_id)

        await self.milestone_repo.delete(milestone)
        await self.commit("delete milestone")

    async def recompute_status(
        self, milestone_id: UUID, now: datetime | None = None
    ) -> MilestoneStatus:
        """Re-derive and store a milestone's status from its current payments.

        Reads the milestone with a row lock so concurrent recomputes for the
        same milestone apply one after another, each seeing committed payments.

        Args:
            milestone_id: Milestone to update.
            now: Reference time for the overdue check. Defaults to utc_now().

        Returns:
            The stored status.

        Raises:
            NotFoundError: If the milestone does not exist.
            PersistenceError: If the status write fails.
        """
        now = now or utc_now()
        milestone = await self.milestone_repo.get_for_status_update(milestone_id)
        if milestone is None:
            # End the transaction opened by the locking read
            await self.session.rollback()
            raise NotFoundError("Milestone", milestone_id)

        status = resolve_milestone_status(
            milestone.amount,
            milestone.due_date,
            (payment.amount for payment in milestone.payments),
            now,
        )
        if milestone.status != status.value:
            logger.info(
                "milestone_status_changed",
                milestone_id=str(milestone_id),
                old_status=milestone.status,
                new_status=status.value,
            )
            milestone.status = status.value
            milestone.updated_at = utc_now()

        await self.commit("update milestone status")
        return status

    async def list_overdue(self, now: datetime | None = None) -> list[Milestone]:
        """Milestones flagged overdue, or pending and already past due."""
        return await self.milestone_repo.list_overdue(now or utc_now())
