"""User schemas for requests and responses"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from app.models.user import UserRole
from app.schemas.common import CoreOutput


class UserResponse(BaseModel):
    """Public view of a user; never carries the password hash"""
    id: int
    email: EmailStr
    role: UserRole
    verified: bool
    created_at: datetime

    class Config:
        from_attributes = True


class CreateAccountInput(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)
    role: UserRole = UserRole.CLIENT


class CreateAccountOutput(CoreOutput):
    pass


class LoginInput(BaseModel):
    email: EmailStr
    password: str


class LoginOutput(CoreOutput):
    token: str | None = None


class UserProfileOutput(CoreOutput):
    user: UserResponse | None = None


class EditProfileInput(BaseModel):
    """Partial update; role is fixed at creation"""
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=1)


class EditProfileOutput(CoreOutput):
    pass


class VerifyEmailInput(BaseModel):
    code: str


class VerifyEmailOutput(CoreOutput):
    pass
