from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.appointments import AppointmentRepository
from src.domain.models.appointment import Appointment
from src.domain.value_objects.appointment_status import AppointmentStatus
from src.infrastructure.db.errors import translate_integrity_error
from src.infrastructure.db.orm.appointment import AppointmentORM
from src.infrastructure.db.orm.service import ServiceORM
from src.utils.datetime_tz import to_utc, utcnow


class AppointmentsSQLAlchemyRepository(AppointmentRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AppointmentORM, service_name: str | None = None) -> Appointment:
        return Appointment(
            id=orm.id,
            pet_id=orm.pet_id,
            service_id=orm.service_id,
            customer_id=orm.customer_id,
            date=to_utc(orm.date),
            status=orm.status,
            notes=orm.notes,
            created_at=to_utc(orm.created_at),
            updated_at=to_utc(orm.updated_at),
            service_name=service_name,
        )

    async def add(self, appointment: Appointment) -> Appointment:
        orm = AppointmentORM(
            id=appointment.id,
            pet_id=appointment.pet_id,
            service_id=appointment.service_id,
            customer_id=appointment.customer_id,
            date=appointment.date,
            status=appointment.status,
            notes=appointment.notes,
            created_at=appointment.created_at,
            updated_at=appointment.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, resource="appointment") from exc
        return self._to_domain(orm)

    async def get(self, appointment_id: UUID) -> Appointment | None:
        stmt = select(AppointmentORM).where(AppointmentORM.id == appointment_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        customer_id: UUID | None = None,
        status: AppointmentStatus | None = None,
        service_id: UUID | None = None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Appointment], int]:
        filters = []
        if customer_id is not None:
            filters.append(AppointmentORM.customer_id == customer_id)
        if status is not None:
            filters.append(AppointmentORM.status == status)
        if service_id is not None:
            filters.append(AppointmentORM.service_id == service_id)
        if date_from is not None:
            filters.append(AppointmentORM.date >= date_from)
        if date_to is not None:
            filters.append(AppointmentORM.date <= date_to)

        count_stmt = select(func.count(AppointmentORM.id)).where(*filters)
        total = int((await self.session.execute(count_stmt)).scalar() or 0)

        stmt = (
            select(AppointmentORM)
            .where(*filters)
            .order_by(AppointmentORM.date, AppointmentORM.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()], total

    async def list_by_pet(
        self,
        pet_id: UUID,
        *,
        date_from: datetime | None = None,
        date_before: datetime | None = None,
        descending: bool = False,
        limit: int | None = None,
        load_service: bool = False,
    ) -> list[Appointment]:
        """Appointments of a pet with ``date_from <= date < date_before``."""
        if load_service:
            stmt = select(AppointmentORM, ServiceORM.name).join(
                ServiceORM, ServiceORM.id == AppointmentORM.service_id
            )
        else:
            stmt = select(AppointmentORM)
        stmt = stmt.where(AppointmentORM.pet_id == pet_id)
        if date_from is not None:
            stmt = stmt.where(AppointmentORM.date >= date_from)
        if date_before is not None:
            stmt = stmt.where(AppointmentORM.date < date_before)
        order = AppointmentORM.date.desc() if descending else AppointmentORM.date.asc()
        stmt = stmt.order_by(order, AppointmentORM.id)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        if load_service:
            return [self._to_domain(orm, name) for orm, name in result.all()]
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count_by_pet(self, pet_id: UUID) -> int:
        stmt = (
            select(func.count()).select_from(AppointmentORM).where(AppointmentORM.pet_id == pet_id)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)

    async def update(self, appointment_id: UUID, data: dict) -> Appointment | None:
        values = {**data, "updated_at": utcnow()}
        stmt = (
            update(AppointmentORM)
            .where(AppointmentORM.id == appointment_id)
            .values(**values)
            .returning(AppointmentORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise translate_integrity_error(exc, resource="appointment") from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def delete(self, appointment_id: UUID) -> bool:
        stmt = (
            delete(AppointmentORM)
            .where(AppointmentORM.id == appointment_id)
            .returning(AppointmentORM.id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
