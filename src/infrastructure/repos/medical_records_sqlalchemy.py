from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.medical_records import MedicalRecordRepository
from src.domain.models.medical_record import MedicalRecord, WeightReading
from src.infrastructure.db.errors import translate_integrity_error
from src.infrastructure.db.orm.medical_record import MedicalRecordORM
from src.utils.datetime_tz import to_utc, utcnow


class MedicalRecordsSQLAlchemyRepository(MedicalRecordRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: MedicalRecordORM) -> MedicalRecord:
        return MedicalRecord(
            id=orm.id,
            pet_id=orm.pet_id,
            veterinarian_id=orm.veterinarian_id,
            visit_date=orm.visit_date,
            visit_type=orm.visit_type,
            reason=orm.reason,
            diagnosis=orm.diagnosis,
            treatment=orm.treatment,
            notes=orm.notes,
            prescriptions=list(orm.prescriptions or []),
            follow_up_date=orm.follow_up_date,
            weight_at_visit=orm.weight_at_visit,
            temperature=orm.temperature,
            service_cost=orm.service_cost,
            created_at=to_utc(orm.created_at),
            updated_at=to_utc(orm.updated_at),
        )

    async def add(self, record: MedicalRecord) -> MedicalRecord:
        orm = MedicalRecordORM(
            id=record.id,
            pet_id=record.pet_id,
            veterinarian_id=record.veterinarian_id,
            visit_date=record.visit_date,
            visit_type=record.visit_type,
            reason=record.reason,
            diagnosis=record.diagnosis,
            treatment=record.treatment,
            notes=record.notes,
            prescriptions=record.prescriptions,
            follow_up_date=record.follow_up_date,
            weight_at_visit=record.weight_at_visit,
            temperature=record.temperature,
            service_cost=record.service_cost,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, resource="medical record") from exc
        return self._to_domain(orm)

    async def get(self, record_id: UUID) -> MedicalRecord | None:
        stmt = select(MedicalRecordORM).where(MedicalRecordORM.id == record_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list_by_pet(self, pet_id: UUID, *, limit: int | None = None) -> list[MedicalRecord]:
        stmt = (
            select(MedicalRecordORM)
            .where(MedicalRecordORM.pet_id == pet_id)
            .order_by(MedicalRecordORM.visit_date.desc(), MedicalRecordORM.created_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count_by_pet(self, pet_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(MedicalRecordORM)
            .where(MedicalRecordORM.pet_id == pet_id)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)

    async def list_weights_by_pet(self, pet_id: UUID) -> list[WeightReading]:
        stmt = (
            select(MedicalRecordORM.visit_date, MedicalRecordORM.weight_at_visit)
            .where(MedicalRecordORM.pet_id == pet_id)
            .where(MedicalRecordORM.weight_at_visit.is_not(None))
            .order_by(MedicalRecordORM.visit_date.desc())
        )
        result = await self.session.execute(stmt)
        return [WeightReading(visit_date=row[0], weight=row[1]) for row in result.all()]

    async def list_costs_by_pet(self, pet_id: UUID) -> list[Decimal | None]:
        stmt = select(MedicalRecordORM.service_cost).where(MedicalRecordORM.pet_id == pet_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, record_id: UUID, data: dict) -> MedicalRecord | None:
        values = {**data, "updated_at": utcnow()}
        stmt = (
            update(MedicalRecordORM)
            .where(MedicalRecordORM.id == record_id)
            .values(**values)
            .returning(MedicalRecordORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise translate_integrity_error(exc, resource="medical record") from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
