"""Pydantic schemas for request/response validation"""

from app.schemas.common import CoreOutput, ErrorResponse
from app.schemas.user import (
    UserResponse,
    CreateAccountInput,
    CreateAccountOutput,
    LoginInput,
    LoginOutput,
    UserProfileOutput,
    EditProfileInput,
    EditProfileOutput,
    VerifyEmailInput,
    VerifyEmailOutput,
)
from app.schemas.restaurant import (
    RestaurantResponse,
    CreateRestaurantInput,
    CreateRestaurantOutput,
    RestaurantOutput,
    RestaurantsOutput,
)
from app.schemas.payment import (
    PaymentResponse,
    CreatePaymentInput,
    CreatePaymentOutput,
    GetPaymentsOutput,
)

__all__ = [
    # Common
    "CoreOutput",
    "ErrorResponse",
    # User
    "UserResponse",
    "CreateAccountInput",
    "CreateAccountOutput",
    "LoginInput",
    "LoginOutput",
    "UserProfileOutput",
    "EditProfileInput",
    "EditProfileOutput",
    "VerifyEmailInput",
    "VerifyEmailOutput",
    # Restaurant
    "RestaurantResponse",
    "CreateRestaurantInput",
    "CreateRestaurantOutput",
    "RestaurantOutput",
    "RestaurantsOutput",
    # Payment
    "PaymentResponse",
    "CreatePaymentInput",
    "CreatePaymentOutput",
    "GetPaymentsOutput",
]
