"""
Account lifecycle: signup, login, profile edits and email verification.

Every operation answers with an output model carrying ``ok``/``error``.
Expected failures (duplicate email, wrong password, unknown code) are
normal outputs; storage errors are logged, rolled back and mapped to a
generic message.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User, UserRole
from app.schemas.user import (
    CreateAccountOutput,
    EditProfileOutput,
    LoginOutput,
    UserProfileOutput,
    UserResponse,
    VerifyEmailOutput,
)
from app.services.jwt import JwtService
from app.services.mail import MailService
from app.services.users.password import hash_password_async, verify_password_async
from app.services.verification import VerificationStore

logger = logging.getLogger(__name__)

USER_EXISTS = "There is a user with that email already"
USER_NOT_FOUND = "User Not Found"
LOGIN_USER_NOT_FOUND = "User not found"
WRONG_PASSWORD = "Wrong Password"
INVALID_CODE = "Not a valid verification code"


class UserService:
    """Manages accounts through one request-scoped session."""

    def __init__(
        self,
        session: AsyncSession,
        jwt_service: JwtService,
        mail_service: MailService,
        verification_ttl_minutes: int = 0,
    ):
        self.session = session
        self.jwt_service = jwt_service
        self.mail_service = mail_service
        self.verifications = VerificationStore(session, ttl_minutes=verification_ttl_minutes)

    async def _get_by_email(self, email: str) -> User | None:
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_user(self, user_id: int) -> User | None:
        """Raw lookup; storage errors propagate."""
        result = await self.session.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def create_account(
        self,
        email: str,
        password: str,
        role: UserRole = UserRole.CLIENT,
    ) -> CreateAccountOutput:
        try:
            if await self._get_by_email(email):
                return CreateAccountOutput(ok=False, error=USER_EXISTS)

            user = User(
                email=email,
                password=await hash_password_async(password),
                role=UserRole(role).value,
                verified=False,
            )
            self.session.add(user)
            await self.session.flush()

            verification = await self.verifications.save(self.verifications.create(user))
            code = verification.code
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to create account for {email}: {e}", exc_info=True)
            return CreateAccountOutput(ok=False, error="cannot create account")

        # Best effort; a failed send does not undo the signup
        await self.mail_service.send_verification_email(email, code)
        logger.info(f"Created account {user.id} ({user.role})")
        return CreateAccountOutput(ok=True)

    async def login(self, email: str, password: str) -> LoginOutput:
        try:
            user = await self._get_by_email(email)
            if not user:
                return LoginOutput(ok=False, error=LOGIN_USER_NOT_FOUND)

            if not await verify_password_async(password, user.password):
                return LoginOutput(ok=False, error=WRONG_PASSWORD)

            return LoginOutput(ok=True, token=self.jwt_service.sign(user.id))
        except Exception as e:
            logger.error(f"Login failed for {email}: {e}", exc_info=True)
            return LoginOutput(ok=False, error="cannot log in")

    async def find_by_id(self, user_id: int) -> UserProfileOutput:
        try:
            user = await self.get_user(user_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load user {user_id}: {e}", exc_info=True)
            return UserProfileOutput(ok=False, error="Could not load user")

        if not user:
            return UserProfileOutput(ok=False, error=USER_NOT_FOUND)
        return UserProfileOutput(ok=True, user=UserResponse.model_validate(user))

    async def edit_profile(
        self,
        user_id: int,
        email: str | None = None,
        password: str | None = None,
    ) -> EditProfileOutput:
        """Apply a partial update.

        A changed email resets ``verified`` and issues a new code; the
        verification email is sent only after the commit succeeds. The role
        is fixed at creation.
        """
        new_code = None
        try:
            user = await self.get_user(user_id)
            if not user:
                return EditProfileOutput(ok=False, error=USER_NOT_FOUND)

            if email is not None and email != user.email:
                if await self._get_by_email(email):
                    return EditProfileOutput(ok=False, error=USER_EXISTS)
                user.email = email
                user.verified = False
                verification = await self.verifications.replace_for_user(user)
                new_code = verification.code

            if password is not None:
                user.password = await hash_password_async(password)

            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to edit profile of user {user_id}: {e}", exc_info=True)
            return EditProfileOutput(ok=False, error="Could not update profile")

        if new_code:
            await self.mail_service.send_verification_email(user.email, new_code)
        return EditProfileOutput(ok=True)

    async def verify_email(self, code: str) -> VerifyEmailOutput:
        try:
            verification = await self.verifications.find_by_code(code)
            if not verification:
                return VerifyEmailOutput(ok=False, error=INVALID_CODE)

            verification.user.verified = True
            await self.verifications.delete(verification.id)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to verify email with code: {e}", exc_info=True)
            return VerifyEmailOutput(ok=False, error="Could not verify Email")

        logger.info(f"Verified email of user {verification.user_id}")
        return VerifyEmailOutput(ok=True)
