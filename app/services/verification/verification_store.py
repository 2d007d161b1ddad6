"""Persistence of email verification codes"""

from datetime import datetime, timedelta

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.user import User
from app.models.verification import Verification, generate_code


class VerificationStore:
    """Reads and writes Verification rows inside the caller's transaction.

    Nothing here commits; the caller decides the transactional boundary.
    """

    def __init__(self, session: AsyncSession, ttl_minutes: int = 0):
        self.session = session
        self.ttl_minutes = ttl_minutes

    def create(self, user: User) -> Verification:
        """Build an unsaved code for a user that already has an id."""
        return Verification(user_id=user.id, code=generate_code())

    async def save(self, verification: Verification) -> Verification:
        self.session.add(verification)
        await self.session.flush()
        return verification

    async def find_by_code(self, code: str) -> Verification | None:
        """Find a live code together with its owning user."""
        query = (
            select(Verification)
            .options(selectinload(Verification.user))
            .where(Verification.code == code)
        )
        if self.ttl_minutes > 0:
            cutoff = datetime.utcnow() - timedelta(minutes=self.ttl_minutes)
            query = query.where(Verification.created_at >= cutoff)

        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def delete(self, verification_id: int) -> None:
        await self.session.execute(
            delete(Verification).where(Verification.id == verification_id)
        )

    async def delete_for_user(self, user_id: int) -> None:
        await self.session.execute(
            delete(Verification).where(Verification.user_id == user_id)
        )

    async def replace_for_user(self, user: User) -> Verification:
        """Issue a fresh code, dropping any previous one (most recent wins)."""
        await self.delete_for_user(user.id)
        return await self.save(self.create(user))
