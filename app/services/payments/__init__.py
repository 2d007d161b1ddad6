"""Payment service module"""

from app.services.payments.payment_service import PaymentService

__all__ = ["PaymentService"]
