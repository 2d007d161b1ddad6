#!/usr/bin/env python3
"""
Generate an x-jwt token for an existing user, for manual API testing.

Usage:
    ENV=staging python scripts/generate_test_token.py --email owner@example.com
    ENV=staging python scripts/generate_test_token.py --user-id 3
"""

import argparse
import asyncio
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

# Load environment-specific .env file
env = os.getenv("ENV", "local")
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)
    print(f"Loaded environment from: {env_file}")

from sqlalchemy import select

from app.db import get_db_session
from app.models import User
from app.services.auth import get_jwt_service


async def find_user(email: str | None, user_id: int | None) -> User | None:
    async with get_db_session() as db:
        if user_id is not None:
            return await db.get(User, user_id)
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()


def main():
    parser = argparse.ArgumentParser(description="Generate an x-jwt test token")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--email", help="Email of the user")
    group.add_argument("--user-id", type=int, help="Id of the user")
    args = parser.parse_args()

    user = asyncio.run(find_user(args.email, args.user_id))
    if user is None:
        print("User not found")
        sys.exit(1)

    token = get_jwt_service().sign(user.id)
    print(f"User: {user.id} <{user.email}> role={user.role} verified={user.verified}")
    print("-" * 50)
    print(f"Token:\n{token}")
    print(f"\nUsage:")
    print(f'curl -H "x-jwt: {token[:40]}..." ...')


if __name__ == "__main__":
    main()
