"""Promotion payments made by restaurant owners"""

import logging
from datetime import datetime, timedelta

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Payment, Restaurant, User
from app.schemas.payment import CreatePaymentOutput, GetPaymentsOutput, PaymentResponse

logger = logging.getLogger(__name__)


class PaymentService:
    def __init__(self, session: AsyncSession, promotion_days: int = 7):
        self.session = session
        self.promotion_days = promotion_days

    async def create_payment(
        self,
        owner: User,
        transaction_id: str,
        restaurant_id: int,
    ) -> CreatePaymentOutput:
        """Record a payment and promote the owner's restaurant."""
        try:
            result = await self.session.execute(
                select(Restaurant).where(Restaurant.id == restaurant_id)
            )
            restaurant = result.scalar_one_or_none()

            if not restaurant:
                return CreatePaymentOutput(ok=False, error="cannot find restaurant")
            if restaurant.owner_id != owner.id:
                return CreatePaymentOutput(ok=False, error="you can not access")

            restaurant.is_promoted = True
            restaurant.promoted_until = datetime.utcnow() + timedelta(days=self.promotion_days)
            self.session.add(
                Payment(
                    transaction_id=transaction_id,
                    user_id=owner.id,
                    restaurant_id=restaurant.id,
                )
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to create payment {transaction_id}: {e}", exc_info=True)
            return CreatePaymentOutput(ok=False, error="cannot create payment")

        logger.info(
            f"Restaurant {restaurant_id} promoted until {restaurant.promoted_until.isoformat()}"
        )
        return CreatePaymentOutput(ok=True)

    async def get_payments(self, user: User) -> GetPaymentsOutput:
        try:
            result = await self.session.execute(
                select(Payment)
                .where(Payment.user_id == user.id)
                .order_by(Payment.created_at.desc())
            )
            payments = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list payments of user {user.id}: {e}", exc_info=True)
            return GetPaymentsOutput(ok=False, error="cannot get payments")

        return GetPaymentsOutput(
            ok=True,
            payments=[PaymentResponse.model_validate(p) for p in payments],
        )
