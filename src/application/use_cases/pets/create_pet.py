from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.validation import ensure_non_negative
from src.domain.models.pet import Pet
from src.domain.value_objects.pet_traits import PetGender, PetSpecies, PetTemperament
from src.domain.value_objects.principal import Principal


@dataclass(slots=True)
class CreatePetInput:
    name: str
    species: PetSpecies
    breed: str | None = None
    birth_date: date | None = None
    gender: PetGender = PetGender.UNKNOWN
    color: str | None = None
    weight: Decimal | None = None
    microchip_number: str | None = None
    temperament: PetTemperament = PetTemperament.UNKNOWN
    behavior_notes: list[str] = field(default_factory=list)
    general_notes: str | None = None


async def execute(uow: UnitOfWork, principal: Principal, payload: CreatePetInput) -> Pet:
    ensure_non_negative(payload.weight, "weight")
    pet = Pet.create(
        owner_id=principal.user_id,
        name=payload.name.strip(),
        species=payload.species,
        breed=payload.breed,
        birth_date=payload.birth_date,
        gender=payload.gender,
        color=payload.color,
        weight=payload.weight,
        microchip_number=payload.microchip_number,
        temperament=payload.temperament,
        behavior_notes=payload.behavior_notes,
        general_notes=payload.general_notes,
    )
    created = await uow.pets.add(pet)
    await uow.commit()
    return created
