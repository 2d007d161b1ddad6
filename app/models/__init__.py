from app.db.database import Base
from app.models.user import User, UserRole
from app.models.verification import Verification
from app.models.restaurant import Restaurant
from app.models.payment import Payment

__all__ = [
    "Base",
    "User",
    "UserRole",
    "Verification",
    "Restaurant",
    "Payment",
]
