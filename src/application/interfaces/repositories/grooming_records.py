from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Protocol
from uuid import UUID

from src.domain.models.grooming_record import GroomingRecord


class GroomingRecordRepository(Protocol):
    async def add(self, record: GroomingRecord) -> GroomingRecord: ...

    async def get(self, record_id: UUID) -> GroomingRecord | None: ...

    async def list_by_pet(
        self, pet_id: UUID, *, limit: int | None = None
    ) -> list[GroomingRecord]: ...

    async def count_by_pet(self, pet_id: UUID) -> int: ...

    async def list_costs_by_pet(self, pet_id: UUID) -> list[Decimal | None]: ...

    async def list_between(
        self, start: date, end: date, *, owner_id: UUID | None = None
    ) -> list[GroomingRecord]: ...

    async def count_between(
        self,
        *,
        start: date | None = None,
        end: date | None = None,
        owner_id: UUID | None = None,
    ) -> int: ...

    async def totals(
        self, *, owner_id: UUID | None = None
    ) -> tuple[Decimal | None, float | None]: ...

    async def update(self, record_id: UUID, data: dict) -> GroomingRecord | None: ...
