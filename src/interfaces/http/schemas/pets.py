from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.domain.value_objects.pet_traits import PetGender, PetSpecies, PetTemperament


class PetCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    species: PetSpecies
    breed: str | None = Field(default=None, max_length=100)
    birth_date: date | None = None
    gender: PetGender = PetGender.UNKNOWN
    color: str | None = Field(default=None, max_length=50)
    weight: Decimal | None = Field(default=None, max_digits=5, decimal_places=2)
    microchip_number: str | None = Field(default=None, max_length=50)
    temperament: PetTemperament = PetTemperament.UNKNOWN
    behavior_notes: list[str] = Field(default_factory=list)
    general_notes: str | None = None


class PetUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    species: PetSpecies | None = None
    breed: str | None = Field(default=None, max_length=100)
    birth_date: date | None = None
    gender: PetGender | None = None
    color: str | None = Field(default=None, max_length=50)
    weight: Decimal | None = Field(default=None, max_digits=5, decimal_places=2)
    microchip_number: str | None = Field(default=None, max_length=50)
    temperament: PetTemperament | None = None
    behavior_notes: list[str] | None = None
    general_notes: str | None = None


class OwnerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: EmailStr
    full_name: str


class PetResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    owner_id: UUID
    name: str
    species: PetSpecies
    breed: str | None = None
    birth_date: date | None = None
    gender: PetGender
    color: str | None = None
    weight: Decimal | None = None
    microchip_number: str | None = None
    temperament: PetTemperament
    behavior_notes: list[str]
    general_notes: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    owner: OwnerResponse | None = None


class PetsListResponse(BaseModel):
    items: list[PetResponse]
    total: int
    limit: int
    offset: int
    pages: int
