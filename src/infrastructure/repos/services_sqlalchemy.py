from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.services import ServiceRepository
from src.domain.models.service import Service
from src.infrastructure.db.errors import translate_integrity_error
from src.infrastructure.db.orm.service import ServiceORM
from src.utils.datetime_tz import to_utc, utcnow

_NAME_TAKEN = {"duplicate_value": "A service with that name already exists"}
_IN_USE = {"invalid_reference": "Service is referenced by existing appointments"}


class ServicesSQLAlchemyRepository(ServiceRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ServiceORM) -> Service:
        return Service(
            id=orm.id,
            name=orm.name,
            description=orm.description,
            price=orm.price,
            duration_minutes=orm.duration_minutes,
            type=orm.type,
            image=orm.image,
            is_active=orm.is_active,
            created_by_id=orm.created_by_id,
            created_at=to_utc(orm.created_at),
            updated_at=to_utc(orm.updated_at),
        )

    async def add(self, service: Service) -> Service:
        orm = ServiceORM(
            id=service.id,
            name=service.name,
            description=service.description,
            price=service.price,
            duration_minutes=service.duration_minutes,
            type=service.type,
            image=service.image,
            is_active=service.is_active,
            created_by_id=service.created_by_id,
            created_at=service.created_at,
            updated_at=service.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, resource="service", messages=_NAME_TAKEN) from exc
        return self._to_domain(orm)

    async def get(self, service_id: UUID) -> Service | None:
        result = await self.session.execute(select(ServiceORM).where(ServiceORM.id == service_id))
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_by_name(self, name: str) -> Service | None:
        stmt = select(ServiceORM).where(func.lower(ServiceORM.name) == name.strip().lower())
        result = await self.session.execute(stmt)
        orm = result.scalars().first()
        return self._to_domain(orm) if orm else None

    async def list(
        self, *, active_only: bool = True, limit: int | None = None, offset: int = 0
    ) -> list[Service]:
        stmt = select(ServiceORM)
        if active_only:
            stmt = stmt.where(ServiceORM.is_active.is_(True))
        stmt = stmt.order_by(ServiceORM.name).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count(self, *, active_only: bool = True) -> int:
        stmt = select(func.count(ServiceORM.id))
        if active_only:
            stmt = stmt.where(ServiceORM.is_active.is_(True))
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)

    async def update(self, service_id: UUID, data: dict) -> Service | None:
        values = {**data, "updated_at": utcnow()}
        stmt = (
            update(ServiceORM)
            .where(ServiceORM.id == service_id)
            .values(**values)
            .returning(ServiceORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise translate_integrity_error(exc, resource="service", messages=_NAME_TAKEN) from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def delete(self, service_id: UUID) -> bool:
        stmt = delete(ServiceORM).where(ServiceORM.id == service_id).returning(ServiceORM.id)
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise translate_integrity_error(exc, resource="service", messages=_IN_USE) from exc
        return result.scalar_one_or_none() is not None
