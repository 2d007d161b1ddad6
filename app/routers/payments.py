"""Payments router for restaurant promotions"""

from fastapi import APIRouter, Depends

from app.models import User, UserRole
from app.schemas.payment import CreatePaymentInput, CreatePaymentOutput, GetPaymentsOutput
from app.services.auth import get_payment_service, require_role
from app.services.payments import PaymentService

router = APIRouter(prefix="/payments", tags=["Payments"])


@router.post("", response_model=CreatePaymentOutput)
async def create_payment(
    data: CreatePaymentInput,
    owner: User = Depends(require_role(UserRole.OWNER)),
    service: PaymentService = Depends(get_payment_service),
):
    """
    Record a payment and promote the restaurant for the promotion period.
    """
    return await service.create_payment(owner, data.transaction_id, data.restaurant_id)


@router.get("", response_model=GetPaymentsOutput)
async def get_payments(
    owner: User = Depends(require_role(UserRole.OWNER)),
    service: PaymentService = Depends(get_payment_service),
):
    return await service.get_payments(owner)
