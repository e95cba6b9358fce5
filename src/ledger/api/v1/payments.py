"""Payment endpoints.

Creating or deleting a payment recomputes the milestone's status. The
payment write stands even if that recompute fails; the response then
carries ``milestone_status: null``.
"""

from uuid import UUID

from fastapi import APIRouter, status

from src.ledger.api.dependencies import PaymentServiceDep
from src.ledger.schemas import (
    PaymentCreate,
    PaymentCreated,
    PaymentDeleted,
    PaymentWithMilestone,
)

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get(
    "",
    response_model=list[PaymentWithMilestone],
    summary="List payments",
    description="Newest payment date first, with milestone, project and client.",
)
async def list_payments(service: PaymentServiceDep) -> list[PaymentWithMilestone]:
    return [PaymentWithMilestone.model_validate(p) for p in await service.list_payments()]


@router.get(
    "/{payment_id}",
    response_model=PaymentWithMilestone,
    summary="Get payment",
    responses={404: {"description": "Payment not found"}},
)
async def get_payment(payment_id: UUID, service: PaymentServiceDep) -> PaymentWithMilestone:
    return PaymentWithMilestone.model_validate(await service.get_payment(payment_id))


@router.post(
    "",
    response_model=PaymentCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Record payment",
    responses={400: {"description": "Unknown milestone"}},
)
async def create_payment(request: PaymentCreate, service: PaymentServiceDep) -> PaymentCreated:
    outcome = await service.create_payment(request)
    created = PaymentWithMilestone.model_validate(outcome.payment)
    return PaymentCreated(**created.model_dump(), milestone_status=outcome.milestone_status)


@router.delete(
    "/{payment_id}",
    response_model=PaymentDeleted,
    summary="Delete payment",
    responses={404: {"description": "Payment not found"}},
)
async def delete_payment(payment_id: UUID, service: PaymentServiceDep) -> PaymentDeleted:
    deletion = await service.delete_payment(payment_id)
    return PaymentDeleted(
        id=deletion.payment_id,
        milestone_id=deletion.milestone_id,
        milestone_status=deletion.milestone_status,
    )
