from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.users import UserRepository
from src.domain.models.user import User
from src.domain.value_objects.role import Role
from src.infrastructure.db.errors import translate_integrity_error
from src.infrastructure.db.orm.user import UserORM
from src.utils.datetime_tz import to_utc


class UsersSQLAlchemyRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: UserORM) -> User:
        return User(
            id=orm.id,
            email=orm.email,
            full_name=orm.full_name,
            roles=sorted(Role.parse_many(orm.roles)),
            is_active=orm.is_active,
            created_at=to_utc(orm.created_at),
            updated_at=to_utc(orm.updated_at),
        )

    async def add(self, user: User) -> User:
        orm = UserORM(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            roles=[role.value for role in user.roles],
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(
                exc, resource="user", messages={"duplicate_value": "Email already registered"}
            ) from exc
        return self._to_domain(orm)

    async def get(self, user_id: UUID) -> User | None:
        stmt = select(UserORM).where(UserORM.id == user_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserORM).where(UserORM.email == email.strip().lower())
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
