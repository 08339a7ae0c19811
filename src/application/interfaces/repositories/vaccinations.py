from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.vaccination import Vaccination


class VaccinationRepository(Protocol):
    async def add(self, vaccination: Vaccination) -> Vaccination: ...

    async def get(self, vaccination_id: UUID) -> Vaccination | None: ...

    async def list_by_pet(self, pet_id: UUID) -> list[Vaccination]: ...

    async def count_by_pet(self, pet_id: UUID) -> int: ...

    async def list_due_between(
        self, start: date, end: date, *, owner_id: UUID | None = None
    ) -> list[Vaccination]: ...

    async def update(self, vaccination_id: UUID, data: dict) -> Vaccination | None: ...
