from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.pet_access import load_accessible_pet
from src.application.validation import ensure_non_negative, parse_uuid
from src.domain.models.pet import Pet
from src.domain.value_objects.pet_traits import PetGender, PetSpecies, PetTemperament
from src.domain.value_objects.principal import Principal


@dataclass(slots=True)
class UpdatePetInput:
    name: str | None = None
    species: PetSpecies | None = None
    breed: str | None = None
    birth_date: date | None = None
    gender: PetGender | None = None
    color: str | None = None
    weight: Decimal | None = None
    microchip_number: str | None = None
    temperament: PetTemperament | None = None
    behavior_notes: list[str] | None = None
    general_notes: str | None = None


async def execute(
    uow: UnitOfWork,
    principal: Principal,
    pet_id: str | UUID,
    payload: UpdatePetInput,
) -> Pet:
    pet_uuid = parse_uuid(pet_id, "pet_id")
    ensure_non_negative(payload.weight, "weight")
    existing = await load_accessible_pet(uow, principal, pet_uuid)
    data = {
        f.name: getattr(payload, f.name)
        for f in fields(payload)
        if getattr(payload, f.name) is not None
    }
    if not data:
        return existing
    updated = await uow.pets.update(pet_uuid, data)
    if updated is None:
        raise NotFound("Pet not found")
    await uow.commit()
    return updated
