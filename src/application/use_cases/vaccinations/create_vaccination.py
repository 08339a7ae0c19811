from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import ensure_admin
from src.application.policies.pet_access import load_accessible_pet
from src.application.validation import ensure_not_future, parse_uuid
from src.domain.models.vaccination import Vaccination
from src.domain.value_objects.principal import Principal


@dataclass(slots=True)
class CreateVaccinationInput:
    pet_id: str | UUID
    vaccine_name: str
    administered_date: date
    next_due_date: date | None = None
    batch_number: str | None = None
    notes: str | None = None


def ensure_due_after_administered(administered: date, next_due: date | None) -> None:
    if next_due is not None and next_due <= administered:
        raise ValidationError("next_due_date must be after administered_date")


async def execute(
    uow: UnitOfWork, principal: Principal, payload: CreateVaccinationInput
) -> Vaccination:
    ensure_admin(principal, "record vaccinations")
    pet_id = parse_uuid(payload.pet_id, "pet_id")
    ensure_not_future(payload.administered_date, "administered_date")
    ensure_due_after_administered(payload.administered_date, payload.next_due_date)
    await load_accessible_pet(uow, principal, pet_id, resource="pet's vaccinations")
    vaccination = Vaccination.create(
        pet_id=pet_id,
        vaccine_name=payload.vaccine_name.strip(),
        administered_date=payload.administered_date,
        next_due_date=payload.next_due_date,
        veterinarian_id=principal.user_id,
        batch_number=payload.batch_number,
        notes=payload.notes,
    )
    created = await uow.vaccinations.add(vaccination)
    await uow.commit()
    return created
