from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.grooming_records import GroomingRecordRepository
from src.domain.models.grooming_record import GroomingRecord
from src.infrastructure.db.errors import translate_integrity_error
from src.infrastructure.db.orm.grooming_record import GroomingRecordORM
from src.infrastructure.db.queries import owned_by
from src.utils.datetime_tz import to_utc, utcnow


class GroomingRecordsSQLAlchemyRepository(GroomingRecordRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: GroomingRecordORM) -> GroomingRecord:
        return GroomingRecord(
            id=orm.id,
            pet_id=orm.pet_id,
            groomer_id=orm.groomer_id,
            session_date=orm.session_date,
            services_performed=list(orm.services_performed or []),
            products_used=list(orm.products_used or []),
            hair_style=orm.hair_style,
            skin_condition=orm.skin_condition,
            coat_condition=orm.coat_condition,
            behavior_during_session=orm.behavior_during_session,
            observations=orm.observations,
            recommendations=orm.recommendations,
            duration_minutes=orm.duration_minutes,
            service_cost=orm.service_cost,
            created_at=to_utc(orm.created_at),
            updated_at=to_utc(orm.updated_at),
        )

    async def add(self, record: GroomingRecord) -> GroomingRecord:
        orm = GroomingRecordORM(
            id=record.id,
            pet_id=record.pet_id,
            groomer_id=record.groomer_id,
            session_date=record.session_date,
            services_performed=record.services_performed,
            products_used=record.products_used,
            hair_style=record.hair_style,
            skin_condition=record.skin_condition,
            coat_condition=record.coat_condition,
            behavior_during_session=record.behavior_during_session,
            observations=record.observations,
            recommendations=record.recommendations,
            duration_minutes=record.duration_minutes,
            service_cost=record.service_cost,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, resource="grooming record") from exc
        return self._to_domain(orm)

    async def get(self, record_id: UUID) -> GroomingRecord | None:
        stmt = select(GroomingRecordORM).where(GroomingRecordORM.id == record_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list_by_pet(self, pet_id: UUID, *, limit: int | None = None) -> list[GroomingRecord]:
        stmt = (
            select(GroomingRecordORM)
            .where(GroomingRecordORM.pet_id == pet_id)
            .order_by(GroomingRecordORM.session_date.desc(), GroomingRecordORM.created_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count_by_pet(self, pet_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(GroomingRecordORM)
            .where(GroomingRecordORM.pet_id == pet_id)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)

    async def list_costs_by_pet(self, pet_id: UUID) -> list[Decimal | None]:
        stmt = select(GroomingRecordORM.service_cost).where(GroomingRecordORM.pet_id == pet_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_between(
        self, start: date, end: date, *, owner_id: UUID | None = None
    ) -> list[GroomingRecord]:
        stmt = select(GroomingRecordORM).where(
            GroomingRecordORM.session_date >= start,
            GroomingRecordORM.session_date <= end,
        )
        stmt = owned_by(stmt, owner_id, GroomingRecordORM.pet_id)
        stmt = stmt.order_by(GroomingRecordORM.session_date, GroomingRecordORM.created_at)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count_between(
        self,
        *,
        start: date | None = None,
        end: date | None = None,
        owner_id: UUID | None = None,
    ) -> int:
        stmt = select(func.count(GroomingRecordORM.id))
        if start is not None:
            stmt = stmt.where(GroomingRecordORM.session_date >= start)
        if end is not None:
            stmt = stmt.where(GroomingRecordORM.session_date <= end)
        stmt = owned_by(stmt, owner_id, GroomingRecordORM.pet_id)
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)

    async def totals(
        self, *, owner_id: UUID | None = None
    ) -> tuple[Decimal | None, float | None]:
        """Sum of service costs and average session duration."""
        stmt = select(
            func.sum(GroomingRecordORM.service_cost),
            func.avg(GroomingRecordORM.duration_minutes),
        )
        stmt = owned_by(stmt, owner_id, GroomingRecordORM.pet_id)
        result = await self.session.execute(stmt)
        revenue, average = result.one()
        return (
            Decimal(str(revenue)) if revenue is not None else None,
            float(average) if average is not None else None,
        )

    async def update(self, record_id: UUID, data: dict) -> GroomingRecord | None:
        values = {**data, "updated_at": utcnow()}
        stmt = (
            update(GroomingRecordORM)
            .where(GroomingRecordORM.id == record_id)
            .values(**values)
            .returning(GroomingRecordORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise translate_integrity_error(exc, resource="grooming record") from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
