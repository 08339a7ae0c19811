from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import ensure_admin
from src.application.policies.pet_access import load_accessible_pet
from src.application.use_cases.vaccinations.create_vaccination import (
    ensure_due_after_administered,
)
from src.application.validation import ensure_not_future, parse_uuid
from src.domain.models.vaccination import Vaccination
from src.domain.value_objects.principal import Principal


@dataclass(slots=True)
class UpdateVaccinationInput:
    vaccine_name: str | None = None
    administered_date: date | None = None
    next_due_date: date | None = None
    batch_number: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    principal: Principal,
    vaccination_id: str | UUID,
    payload: UpdateVaccinationInput,
) -> Vaccination:
    ensure_admin(principal, "amend vaccinations")
    vaccination_uuid = parse_uuid(vaccination_id, "vaccination_id")
    if payload.administered_date is not None:
        ensure_not_future(payload.administered_date, "administered_date")
    existing = await uow.vaccinations.get(vaccination_uuid)
    if existing is None:
        raise NotFound("Vaccination not found")
    await load_accessible_pet(
        uow, principal, existing.pet_id, resource="vaccination", include_inactive=True
    )
    ensure_due_after_administered(
        payload.administered_date or existing.administered_date,
        payload.next_due_date or existing.next_due_date,
    )
    data = {
        f.name: getattr(payload, f.name)
        for f in fields(payload)
        if getattr(payload, f.name) is not None
    }
    if not data:
        return existing
    updated = await uow.vaccinations.update(vaccination_uuid, data)
    if updated is None:
        raise NotFound("Vaccination not found")
    await uow.commit()
    return updated
