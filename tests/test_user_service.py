from __future__ import annotations

import asyncio
from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy import func, select, update
from sqlalchemy.exc import OperationalError

from app.models import User, UserRole, Verification
from app.services.users import UserService, verify_password

from conftest import add_user


async def count(session_factory, model) -> int:
    async with session_factory() as session:
        return await session.scalar(select(func.count()).select_from(model))


async def load_user(session_factory, email: str) -> User | None:
    async with session_factory() as session:
        result = await session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()


async def load_verification(session_factory, user_id: int) -> Verification | None:
    async with session_factory() as session:
        result = await session.execute(
            select(Verification).where(Verification.user_id == user_id)
        )
        return result.scalar_one_or_none()


def broken_session() -> MagicMock:
    """Session whose every query fails like a lost database connection."""
    session = MagicMock()
    session.execute = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("down")))
    session.rollback = AsyncMock()
    return session


# createAccount

def test_create_account_persists_user_code_and_sends_email(db, jwt_service, mail_service):
    async def scenario():
        async with db() as session:
            service = UserService(session, jwt_service, mail_service)
            result = await service.create_account("email@email.com", "password", UserRole.OWNER)

        user = await load_user(db, "email@email.com")
        verification = await load_verification(db, user.id)
        return result, user, verification, await count(db, User), await count(db, Verification)

    result, user, verification, users, verifications = asyncio.run(scenario())

    assert result.ok is True
    assert result.error is None
    assert users == 1
    assert verifications == 1
    assert user.role == "owner"
    assert user.verified is False
    assert user.password != "password"
    assert verify_password("password", user.password)
    mail_service.send_verification_email.assert_awaited_once_with(
        "email@email.com", verification.code
    )


def test_create_account_fails_if_email_exists(db, jwt_service, mail_service):
    async def scenario():
        await add_user("email@email.com")
        async with db() as session:
            service = UserService(session, jwt_service, mail_service)
            result = await service.create_account("email@email.com", "password", UserRole.CLIENT)
        return result, await count(db, User), await count(db, Verification)

    result, users, verifications = asyncio.run(scenario())

    assert result.ok is False
    assert result.error == "There is a user with that email already"
    assert users == 1
    assert verifications == 0
    mail_service.send_verification_email.assert_not_awaited()


def test_create_account_succeeds_when_email_fails(db, jwt_service, mail_service):
    mail_service.send_verification_email.return_value = False

    async def scenario():
        async with db() as session:
            service = UserService(session, jwt_service, mail_service)
            return await service.create_account("email@email.com", "password", UserRole.CLIENT)

    result = asyncio.run(scenario())

    assert result.ok is True


def test_create_account_fails_on_storage_error(jwt_service, mail_service):
    session = broken_session()
    service = UserService(session, jwt_service, mail_service)

    result = asyncio.run(service.create_account("email@email.com", "password", UserRole.CLIENT))

    assert result.ok is False
    assert result.error == "cannot create account"
    session.rollback.assert_awaited_once()
    mail_service.send_verification_email.assert_not_awaited()


# login

def test_login_fails_if_user_does_not_exist(db, jwt_service, mail_service):
    async def scenario():
        async with db() as session:
            service = UserService(session, jwt_service, mail_service)
            return await service.login("nobody@email.com", "password")

    result = asyncio.run(scenario())

    assert result.ok is False
    assert result.error == "User not found"
    assert result.token is None


def test_login_fails_on_wrong_password(db, jwt_service, mail_service):
    async def scenario():
        await add_user("email@email.com", password="password")
        async with db() as session:
            service = UserService(session, jwt_service, mail_service)
            return await service.login("email@email.com", "wrong")

    result = asyncio.run(scenario())

    assert result.ok is False
    assert result.error == "Wrong Password"
    assert result.token is None


def test_login_returns_token_for_the_user(db, jwt_service, mail_service):
    async def scenario():
        user = await add_user("email@email.com", password="password")
        async with db() as session:
            service = UserService(session, jwt_service, mail_service)
            return user, await service.login("email@email.com", "password")

    user, result = asyncio.run(scenario())

    assert result.ok is True
    assert result.error is None
    assert jwt_service.verify(result.token) == user.id


def test_login_reports_unexpected_errors(jwt_service, mail_service):
    service = UserService(broken_session(), jwt_service, mail_service)

    result = asyncio.run(service.login("email@email.com", "password"))

    assert result.ok is False
    assert isinstance(result.error, str)
    assert result.token is None


# findById

def test_find_by_id_returns_user(db, jwt_service, mail_service):
    async def scenario():
        user = await add_user("email@email.com")
        async with db() as session:
            service = UserService(session, jwt_service, mail_service)
            return user, await service.find_by_id(user.id)

    user, result = asyncio.run(scenario())

    assert result.ok is True
    assert result.user.id == user.id
    assert result.user.email == "email@email.com"


def test_find_by_id_reports_missing_user(db, jwt_service, mail_service):
    async def scenario():
        async with db() as session:
            service = UserService(session, jwt_service, mail_service)
            return await service.find_by_id(999)

    result = asyncio.run(scenario())

    assert result.ok is False
    assert result.error == "User Not Found"
    assert result.user is None


def test_find_by_id_keeps_storage_errors_apart_from_missing_user(jwt_service, mail_service):
    service = UserService(broken_session(), jwt_service, mail_service)

    result = asyncio.run(service.find_by_id(1))

    assert result.ok is False
    assert result.error == "Could not load user"


# editProfile

def test_edit_profile_changes_email_and_requires_new_verification(db, jwt_service, mail_service):
    async def scenario():
        user = await add_user("old@gmail.com", verified=True)
        async with db() as session:
            session.add(Verification(user_id=user.id, code="old-code"))
            await session.commit()

        async with db() as session:
            service = UserService(session, jwt_service, mail_service)
            result = await service.edit_profile(user.id, email="new@gmail.com")

        return (
            result,
            await load_user(db, "new@gmail.com"),
            await load_verification(db, user.id),
            await count(db, Verification),
        )

    result, user, verification, verifications = asyncio.run(scenario())

    assert result.ok is True
    assert user is not None
    assert user.verified is False
    assert verifications == 1
    assert verification.code != "old-code"
    mail_service.send_verification_email.assert_awaited_once_with(
        "new@gmail.com", verification.code
    )


def test_edit_profile_changes_only_password(db, jwt_service, mail_service):
    async def scenario():
        user = await add_user("old@gmail.com", password="old", verified=True)
        async with db() as session:
            service = UserService(session, jwt_service, mail_service)
            result = await service.edit_profile(user.id, password="changed")
        return result, await load_user(db, "old@gmail.com"), await count(db, Verification)

    result, user, verifications = asyncio.run(scenario())

    assert result.ok is True
    assert user.email == "old@gmail.com"
    assert user.verified is True
    assert verify_password("changed", user.password)
    assert not verify_password("old", user.password)
    assert verifications == 0
    mail_service.send_verification_email.assert_not_awaited()


def test_edit_profile_without_password_keeps_hash(db, jwt_service, mail_service):
    async def scenario():
        user = await add_user("old@gmail.com", password="old")
        async with db() as session:
            service = UserService(session, jwt_service, mail_service)
            await service.edit_profile(user.id, email="old@gmail.com")
        return user, await load_user(db, "old@gmail.com")

    before, after = asyncio.run(scenario())

    assert after.password == before.password
    mail_service.send_verification_email.assert_not_awaited()


def test_edit_profile_rejects_taken_email(db, jwt_service, mail_service):
    async def scenario():
        user = await add_user("me@gmail.com")
        await add_user("taken@gmail.com")
        async with db() as session:
            service = UserService(session, jwt_service, mail_service)
            return await service.edit_profile(user.id, email="taken@gmail.com")

    result = asyncio.run(scenario())

    assert result.ok is False
    assert result.error == "There is a user with that email already"


def test_edit_profile_fails_on_storage_error(jwt_service, mail_service):
    session = broken_session()
    service = UserService(session, jwt_service, mail_service)

    result = asyncio.run(service.edit_profile(1, email="new@gmail.com"))

    assert result.ok is False
    assert result.error == "Could not update profile"
    session.rollback.assert_awaited_once()


# verifyEmail

def test_verify_email_consumes_code_exactly_once(db, jwt_service, mail_service):
    async def scenario():
        user = await add_user("email@email.com")
        async with db() as session:
            session.add(Verification(user_id=user.id, code="the-code"))
            await session.commit()

        async with db() as session:
            first = await UserService(session, jwt_service, mail_service).verify_email("the-code")
        async with db() as session:
            second = await UserService(session, jwt_service, mail_service).verify_email("the-code")

        return first, second, await load_user(db, "email@email.com"), await count(db, Verification)

    first, second, user, verifications = asyncio.run(scenario())

    assert first.ok is True
    assert user.verified is True
    assert verifications == 0
    assert second.ok is False
    assert second.error == "Not a valid verification code"


def test_verify_email_rejects_unknown_code(db, jwt_service, mail_service):
    async def scenario():
        async with db() as session:
            return await UserService(session, jwt_service, mail_service).verify_email("nope")

    result = asyncio.run(scenario())

    assert result.ok is False
    assert result.error == "Not a valid verification code"


def test_verify_email_rejects_expired_code_when_ttl_is_set(db, jwt_service, mail_service):
    async def scenario():
        user = await add_user("email@email.com")
        async with db() as session:
            session.add(Verification(user_id=user.id, code="stale"))
            await session.commit()
            await session.execute(
                update(Verification).values(created_at=datetime.utcnow() - timedelta(hours=2))
            )
            await session.commit()

        async with db() as session:
            service = UserService(session, jwt_service, mail_service, verification_ttl_minutes=60)
            return await service.verify_email("stale")

    result = asyncio.run(scenario())

    assert result.ok is False
    assert result.error == "Not a valid verification code"


def test_verify_email_fails_on_storage_error(jwt_service, mail_service):
    service = UserService(broken_session(), jwt_service, mail_service)

    result = asyncio.run(service.verify_email("code"))

    assert result.ok is False
    assert result.error == "Could not verify Email"
