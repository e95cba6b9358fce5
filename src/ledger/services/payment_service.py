"""Payment service - records payments and keeps milestone status current."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.ledger.core.errors import LedgerError, NotFoundError, ValidationError
from src.ledger.core.logging import get_logger
from src.ledger.models import MilestoneStatus, Payment
from src.ledger.models.base import utc_now
from src.ledger.repositories import MilestoneRepository, PaymentRepository
from src.ledger.schemas.payment import PaymentCreate
from src.ledger.services.base import BaseService
from src.ledger.services.milestone_service import MilestoneService

logger = get_logger(__name__)


@dataclass
class PaymentOutcome:
    """Result of a payment write.

    ``milestone_status`` is None when the follow-up status recompute failed;
    the payment write itself has been committed either way.
    """

    payment: Payment
    milestone_status: MilestoneStatus | None


@dataclass
class PaymentDeletion:
    """Result of a payment delete; ``milestone_status`` as for PaymentOutcome."""

    payment_id: UUID
    milestone_id: UUID
    milestone_status: MilestoneStatus | None


class PaymentService(BaseService):
    """Payment create/delete with milestone status recompute.

    The payment write is the primary operation and is committed first. The
    status recompute that follows is secondary: its failure is logged and
    reported through ``PaymentOutcome.milestone_status``, never raised.
    """

    def __init__(
        self,
        payment_repo: PaymentRepository,
        milestone_repo: MilestoneRepository,
        milestone_service: MilestoneService,
        session: AsyncSession,
    ):
        super().__init__(session)
        self.payment_repo = payment_repo
        self.milestone_repo = milestone_repo
        self.milestone_service = milestone_service

    async def list_payments(self) -> list[Payment]:
        return await self.payment_repo.list_with_milestones()

    async def get_payment(self, payment_id: UUID) -> Payment:
        payment = await self.payment_repo.get_with_milestone(payment_id)
        if payment is None:
            raise NotFoundError("Payment", payment_id)
        return payment

    async def create_payment(
        self, data: PaymentCreate, now: datetime | None = None
    ) -> PaymentOutcome:
        """Record a payment, then recompute its milestone's status."""
        if not await self.milestone_repo.exists(data.milestone_id):
            raise ValidationError(f"Milestone {data.milestone_id} does not exist")

        payment = Payment(
            milestone_id=data.milestone_id,
            amount=data.amount,
            payment_date=data.payment_date or utc_now(),
            notes=data.notes,
        )
        self.payment_repo.add(payment)
        await self.commit("create payment")
        logger.info(
            "payment_created",
            payment_id=str(payment.id),
            milestone_id=str(payment.milestone_id),
            amount=str(payment.amount),
        )

        status = await self._recompute_after_payment_change(payment.milestone_id, now)
        return PaymentOutcome(await self.get_payment(payment.id), status)

    async def delete_payment(
        self, payment_id: UUID, now: datetime | None = None
    ) -> PaymentDeletion:
        """Delete a payment, then recompute its milestone's status."""
        payment = await self.payment_repo.get_by_id(payment_id)
        if payment is None:
            raise NotFoundError("Payment", payment_id)

        milestone_id = payment.milestone_id
        await self.payment_repo.delete(payment)
        await self.commit("delete payment")
        logger.info("payment_deleted", payment_id=str(payment_id), milestone_id=str(milestone_id))

        status = await self._recompute_after_payment_change(milestone_id, now)
        return PaymentDeletion(payment_id, milestone_id, status)

    async def _recompute_after_payment_change(
        self, milestone_id: UUID, now: datetime | None
    ) -> MilestoneStatus | None:
        try:
            return await self.milestone_service.recompute_status(milestone_id, now=now)
        except (LedgerError, SQLAlchemyError) as e:
            await self.session.rollback()
            logger.warning(
                "milestone_status_recompute_failed",
                milestone_id=str(milestone_id),
                error_type=type(e).__name__,
                error=str(e),
            )
            return None
