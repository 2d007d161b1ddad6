"""Password hashing helpers"""

import asyncio

from passlib.hash import argon2


def hash_password(plain: str) -> str:
    return argon2.using(time_cost=2, memory_cost=102400, parallelism=8).hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return argon2.verify(plain, hashed)
    except ValueError:
        # Stored value is not an argon2 hash
        return False


async def hash_password_async(plain: str) -> str:
    """Hash off the event loop."""
    return await asyncio.to_thread(hash_password, plain)


async def verify_password_async(plain: str, hashed: str) -> bool:
    return await asyncio.to_thread(verify_password, plain, hashed)
