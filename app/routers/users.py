"""Users router: signup, login, profile and email verification"""

from fastapi import APIRouter, Depends

from app.models import User
from app.schemas.user import (
    CreateAccountInput,
    CreateAccountOutput,
    EditProfileInput,
    EditProfileOutput,
    LoginInput,
    LoginOutput,
    UserProfileOutput,
    UserResponse,
    VerifyEmailInput,
    VerifyEmailOutput,
)
from app.services.auth import get_user_service, require_user
from app.services.users import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=CreateAccountOutput)
async def create_account(
    data: CreateAccountInput,
    service: UserService = Depends(get_user_service),
):
    """
    Create an unverified account and email its verification code.
    """
    return await service.create_account(data.email, data.password, data.role)


@router.post("/login", response_model=LoginOutput)
async def login(
    data: LoginInput,
    service: UserService = Depends(get_user_service),
):
    """
    Exchange email and password for a token to send in the x-jwt header.
    """
    return await service.login(data.email, data.password)


@router.get("/me", response_model=UserResponse)
async def me(user: User = Depends(require_user)):
    return UserResponse.model_validate(user)


@router.patch("/me", response_model=EditProfileOutput)
async def edit_profile(
    data: EditProfileInput,
    user: User = Depends(require_user),
    service: UserService = Depends(get_user_service),
):
    """
    Change email and/or password of the current user.

    A new email must be verified again.
    """
    return await service.edit_profile(user.id, email=data.email, password=data.password)


@router.post("/verify-email", response_model=VerifyEmailOutput)
async def verify_email(
    data: VerifyEmailInput,
    service: UserService = Depends(get_user_service),
):
    return await service.verify_email(data.code)


@router.get("/{user_id}", response_model=UserProfileOutput)
async def user_profile(
    user_id: int,
    user: User = Depends(require_user),
    service: UserService = Depends(get_user_service),
):
    return await service.find_by_id(user_id)
