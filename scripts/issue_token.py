#!/usr/bin/env python3
"""
Script to provision a user and print a bearer token for it.

This script:
1. Creates the user (or reuses an existing one with the same email)
2. Signs an access token with the configured JWT settings

Usage:
  python scripts/issue_token.py --email admin@example.com --name "Ada Admin" [--role ADMIN]
"""

import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config.settings import get_settings
from src.domain.models.user import User
from src.domain.value_objects.role import Role
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


async def issue_token(email: str, full_name: str, roles: list[Role]) -> str:
    """Return an access token for `email`, creating the user when missing."""
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    jwt_service = JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
        access_token_expires_minutes=settings.jwt_access_token_expires_minutes,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )

    try:
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            user = await uow.users.get_by_email(email)
            if user:
                print(f"ℹ️  User {email} already exists (ID: {user.id})")
            else:
                user = await uow.users.add(User.create(email, full_name, roles=roles))
                await uow.commit()
                print(f"✨ Created user {user.email} (ID: {user.id})")
        return jwt_service.create_access_token(subject=user.id)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Provision a user and print an access token")
    parser.add_argument("--email", required=True, help="Email of the user")
    parser.add_argument("--name", default="", help="Full name for a new user")
    parser.add_argument(
        "--role",
        action="append",
        choices=[role.value for role in Role],
        help="Role for a new user (repeatable, defaults to USER)",
    )

    args = parser.parse_args()
    roles = [Role(value) for value in args.role or [Role.USER.value]]
    token = asyncio.run(issue_token(args.email, args.name or args.email, roles))

    print("\n🔑 Access token:")
    print(f"   {token}")
