from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.pet import Pet


class PetRepository(Protocol):
    async def add(self, pet: Pet) -> Pet: ...

    async def get(
        self,
        pet_id: UUID,
        *,
        load_owner: bool = False,
        include_inactive: bool = False,
    ) -> Pet | None: ...

    async def list(
        self,
        *,
        owner_id: UUID | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Pet]: ...

    async def count(self, *, owner_id: UUID | None = None) -> int: ...

    async def update(self, pet_id: UUID, data: dict) -> Pet | None: ...

    async def deactivate(self, pet_id: UUID) -> bool: ...
