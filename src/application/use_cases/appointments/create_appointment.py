from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.validation import ensure_future, parse_uuid
from src.domain.models.appointment import Appointment
from src.domain.models.pet import Pet
from src.domain.models.service import Service
from src.domain.value_objects.principal import Principal


@dataclass(slots=True)
class CreateAppointmentInput:
    pet_id: str | UUID
    service_id: str | UUID
    date: datetime
    notes: str | None = None


async def load_own_active_pet(uow: UnitOfWork, principal: Principal, pet_id: UUID) -> Pet:
    """Appointments may only be booked for the principal's own active pets."""
    pet = await uow.pets.get(pet_id)
    if pet is None:
        raise NotFound("Pet not found")
    if pet.owner_id != principal.user_id:
        raise PermissionDenied("You can only book appointments for your own pets")
    return pet


async def load_bookable_service(uow: UnitOfWork, service_id: UUID) -> Service:
    service = await uow.services.get(service_id)
    if service is None:
        raise NotFound("Service not found")
    if not service.is_active:
        raise ValidationError("Service is not currently offered")
    return service


async def execute(
    uow: UnitOfWork, principal: Principal, payload: CreateAppointmentInput
) -> Appointment:
    pet_id = parse_uuid(payload.pet_id, "pet_id")
    service_id = parse_uuid(payload.service_id, "service_id")
    when = ensure_future(payload.date, "date")
    await load_own_active_pet(uow, principal, pet_id)
    service = await load_bookable_service(uow, service_id)
    appointment = Appointment.create(
        pet_id=pet_id,
        service_id=service_id,
        customer_id=principal.user_id,
        date=when,
        notes=payload.notes,
    )
    created = await uow.appointments.add(appointment)
    await uow.commit()
    created.service_name = service.name
    return created
