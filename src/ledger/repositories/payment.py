"""Repository for Payment entity."""

from uuid import UUID

from sqlalchemy.orm import selectinload

from src.ledger.models import Milestone, Payment, Project
from src.ledger.repositories.base import BaseRepository

PAYMENT_OPTIONS = (
    selectinload(Payment.milestone)  # type: ignore[arg-type]
    .selectinload(Milestone.project)  # type: ignore[arg-type]
    .selectinload(Project.client),  # type: ignore[arg-type]
)


class PaymentRepository(BaseRepository[Payment]):
    """Repository for Payment entity."""

    model = Payment

    async def list_with_milestones(self) -> list[Payment]:
        """List payments newest first with milestone, project and client."""
        return await self.list_all(
            Payment.payment_date.desc(),  # type: ignore[attr-defined]
            options=PAYMENT_OPTIONS,
        )

    async def get_with_milestone(self, payment_id: UUID) -> Payment | None:
        """Get a payment with milestone, project and client."""
        return await self.get_by_id(payment_id, options=PAYMENT_OPTIONS)
