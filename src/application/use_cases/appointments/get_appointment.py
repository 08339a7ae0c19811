from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import ensure_owner_or_admin
from src.application.validation import parse_uuid
from src.domain.models.appointment import Appointment
from src.domain.value_objects.principal import Principal


async def load_appointment(
    uow: UnitOfWork, principal: Principal, appointment_id: UUID
) -> Appointment:
    appointment = await uow.appointments.get(appointment_id)
    if appointment is None:
        raise NotFound("Appointment not found")
    ensure_owner_or_admin(appointment.customer_id, principal, "appointment")
    return appointment


async def execute(
    uow: UnitOfWork, principal: Principal, appointment_id: str | UUID
) -> Appointment:
    return await load_appointment(uow, principal, parse_uuid(appointment_id, "appointment_id"))
