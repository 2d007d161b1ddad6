"""User account service module"""

from app.services.users.password import hash_password, verify_password
from app.services.users.user_service import UserService

__all__ = [
    "UserService",
    "hash_password",
    "verify_password",
]
