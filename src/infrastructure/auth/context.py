from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.user import User
from src.domain.value_objects.principal import Principal
from src.domain.value_objects.role import Role
from src.infrastructure.db.orm.user import UserORM


@dataclass(slots=True)
class AuthContext:
    user_id: UUID
    email: str
    full_name: str
    roles: frozenset[Role]
    claims: dict[str, Any] = field(default_factory=dict)

    @property
    def principal(self) -> Principal:
        return Principal(user_id=self.user_id, roles=self.roles)


async def fetch_user(session: AsyncSession, user_id: UUID) -> User | None:
    result = await session.execute(select(UserORM).where(UserORM.id == user_id))
    row = result.scalar_one_or_none()
    if row is None:
        return None
    return User(
        id=row.id,
        email=row.email,
        full_name=row.full_name,
        roles=sorted(Role.parse_many(row.roles), key=lambda role: role.value),
        is_active=row.is_active,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
