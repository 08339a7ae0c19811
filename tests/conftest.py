from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path
from typing import cast
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.domain.value_objects.role import Role
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import (  # noqa: F401
    appointment,
    grooming_record,
    medical_record,
    pet,
    product,
    service,
    user,
    vaccination,
)
from src.infrastructure.db.orm.user import UserORM
from src.interfaces.http.main import create_app


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "jwt_secret_key": "test-secret",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
async def seeded_users(app, client) -> dict[str, UUID]:
    owner_id = uuid4()
    other_id = uuid4()
    admin_id = uuid4()
    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        async_session = cast(AsyncSession, session)
        async_session.add_all(
            [
                UserORM(
                    id=owner_id,
                    email="owner@example.com",
                    full_name="Olivia Owner",
                    roles=[Role.USER.value],
                    is_active=True,
                ),
                UserORM(
                    id=other_id,
                    email="other@example.com",
                    full_name="Oscar Other",
                    roles=[Role.USER.value],
                    is_active=True,
                ),
                UserORM(
                    id=admin_id,
                    email="admin@example.com",
                    full_name="Ada Admin",
                    roles=[Role.ADMIN.value],
                    is_active=True,
                ),
            ]
        )
        await async_session.commit()
    return {"owner": owner_id, "other": other_id, "admin": admin_id}


@pytest.fixture()
def auth_headers(app, seeded_users: dict[str, UUID]) -> dict[str, dict[str, str]]:
    jwt_service = app.state.jwt_service
    return {
        name: {"Authorization": f"Bearer {jwt_service.create_access_token(subject=user_id)}"}
        for name, user_id in seeded_users.items()
    }
