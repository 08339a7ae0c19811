from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.vaccinations import VaccinationRepository
from src.domain.models.vaccination import Vaccination
from src.infrastructure.db.errors import translate_integrity_error
from src.infrastructure.db.orm.pet import PetORM
from src.infrastructure.db.orm.vaccination import VaccinationORM
from src.infrastructure.db.queries import active_only
from src.utils.datetime_tz import to_utc, utcnow


class VaccinationsSQLAlchemyRepository(VaccinationRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: VaccinationORM) -> Vaccination:
        return Vaccination(
            id=orm.id,
            pet_id=orm.pet_id,
            veterinarian_id=orm.veterinarian_id,
            vaccine_name=orm.vaccine_name,
            administered_date=orm.administered_date,
            next_due_date=orm.next_due_date,
            batch_number=orm.batch_number,
            notes=orm.notes,
            created_at=to_utc(orm.created_at),
            updated_at=to_utc(orm.updated_at),
        )

    async def add(self, vaccination: Vaccination) -> Vaccination:
        orm = VaccinationORM(
            id=vaccination.id,
            pet_id=vaccination.pet_id,
            veterinarian_id=vaccination.veterinarian_id,
            vaccine_name=vaccination.vaccine_name,
            administered_date=vaccination.administered_date,
            next_due_date=vaccination.next_due_date,
            batch_number=vaccination.batch_number,
            notes=vaccination.notes,
            created_at=vaccination.created_at,
            updated_at=vaccination.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, resource="vaccination") from exc
        return self._to_domain(orm)

    async def get(self, vaccination_id: UUID) -> Vaccination | None:
        stmt = select(VaccinationORM).where(VaccinationORM.id == vaccination_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list_by_pet(self, pet_id: UUID) -> list[Vaccination]:
        stmt = (
            select(VaccinationORM)
            .where(VaccinationORM.pet_id == pet_id)
            .order_by(VaccinationORM.administered_date.desc(), VaccinationORM.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count_by_pet(self, pet_id: UUID) -> int:
        stmt = (
            select(func.count()).select_from(VaccinationORM).where(VaccinationORM.pet_id == pet_id)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)

    async def list_due_between(
        self, start: date, end: date, *, owner_id: UUID | None = None
    ) -> list[Vaccination]:
        """Vaccinations of active pets whose next dose falls within [start, end]."""
        stmt = (
            select(VaccinationORM)
            .join(PetORM, PetORM.id == VaccinationORM.pet_id)
            .where(VaccinationORM.next_due_date.is_not(None))
            .where(VaccinationORM.next_due_date >= start)
            .where(VaccinationORM.next_due_date <= end)
            .order_by(VaccinationORM.next_due_date)
        )
        stmt = active_only(stmt)
        if owner_id is not None:
            stmt = stmt.where(PetORM.owner_id == owner_id)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, vaccination_id: UUID, data: dict) -> Vaccination | None:
        values = {**data, "updated_at": utcnow()}
        stmt = (
            update(VaccinationORM)
            .where(VaccinationORM.id == vaccination_id)
            .values(**values)
            .returning(VaccinationORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise translate_integrity_error(exc, resource="vaccination") from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
