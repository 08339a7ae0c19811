from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.appointments.get_appointment import load_appointment
from src.application.validation import parse_uuid
from src.domain.value_objects.principal import Principal


async def execute(uow: UnitOfWork, principal: Principal, appointment_id: str | UUID) -> None:
    appointment_uuid = parse_uuid(appointment_id, "appointment_id")
    await load_appointment(uow, principal, appointment_uuid)
    if not await uow.appointments.delete(appointment_uuid):
        raise NotFound("Appointment not found")
    await uow.commit()
