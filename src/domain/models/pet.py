from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from src.domain.models.user import OwnerSummary
from src.domain.value_objects.pet_traits import PetGender, PetSpecies, PetTemperament


@dataclass(slots=True)
class Pet:
    id: UUID
    owner_id: UUID
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
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    # Populated only when the repository is asked to load the owner
    owner: OwnerSummary | None = None

    @classmethod
    def create(
        cls,
        owner_id: UUID,
        name: str,
        species: PetSpecies,
        breed: str | None = None,
        birth_date: date | None = None,
        gender: PetGender = PetGender.UNKNOWN,
        color: str | None = None,
        weight: Decimal | None = None,
        microchip_number: str | None = None,
        temperament: PetTemperament = PetTemperament.UNKNOWN,
        behavior_notes: list[str] | None = None,
        general_notes: str | None = None,
    ) -> Pet:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            owner_id=owner_id,
            name=name,
            species=species,
            breed=breed,
            birth_date=birth_date,
            gender=gender,
            color=color,
            weight=weight,
            microchip_number=microchip_number,
            temperament=temperament,
            behavior_notes=list(behavior_notes or []),
            general_notes=general_notes,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
