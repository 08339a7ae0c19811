from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import ensure_admin
from src.application.use_cases.appointments.create_appointment import (
    load_bookable_service,
    load_own_active_pet,
)
from src.application.use_cases.appointments.get_appointment import load_appointment
from src.application.validation import ensure_future, parse_uuid
from src.domain.models.appointment import Appointment
from src.domain.value_objects.appointment_status import AppointmentStatus
from src.domain.value_objects.principal import Principal


@dataclass(slots=True)
class UpdateAppointmentInput:
    pet_id: str | UUID | None = None
    service_id: str | UUID | None = None
    date: datetime | None = None
    status: AppointmentStatus | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    principal: Principal,
    appointment_id: str | UUID,
    payload: UpdateAppointmentInput,
) -> Appointment:
    appointment_uuid = parse_uuid(appointment_id, "appointment_id")
    data: dict = {}
    if payload.date is not None:
        data["date"] = ensure_future(payload.date, "date")
    pet_id = parse_uuid(payload.pet_id, "pet_id") if payload.pet_id else None
    service_id = parse_uuid(payload.service_id, "service_id") if payload.service_id else None

    existing = await load_appointment(uow, principal, appointment_uuid)
    if payload.status is not None:
        ensure_admin(principal, "change appointment status")
    if pet_id is not None:
        await load_own_active_pet(uow, principal, pet_id)
        data["pet_id"] = pet_id
    if service_id is not None:
        await load_bookable_service(uow, service_id)
        data["service_id"] = service_id
    if payload.status is not None:
        data["status"] = payload.status
    if payload.notes is not None:
        data["notes"] = payload.notes
    if not data:
        return existing
    updated = await uow.appointments.update(appointment_uuid, data)
    if updated is None:
        raise NotFound("Appointment not found")
    await uow.commit()
    return updated
