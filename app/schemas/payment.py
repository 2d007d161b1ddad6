"""Payment schemas"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.common import CoreOutput


class PaymentResponse(BaseModel):
    id: int
    transaction_id: str
    restaurant_id: int
    created_at: datetime

    class Config:
        from_attributes = True


class CreatePaymentInput(BaseModel):
    transaction_id: str = Field(min_length=1)
    restaurant_id: int


class CreatePaymentOutput(CoreOutput):
    pass


class GetPaymentsOutput(CoreOutput):
    payments: list[PaymentResponse] | None = None
