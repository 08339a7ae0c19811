from __future__ import annotations

from decimal import Decimal
from typing import Protocol
from uuid import UUID

from src.domain.models.medical_record import MedicalRecord, WeightReading


class MedicalRecordRepository(Protocol):
    async def add(self, record: MedicalRecord) -> MedicalRecord: ...

    async def get(self, record_id: UUID) -> MedicalRecord | None: ...

    async def list_by_pet(
        self, pet_id: UUID, *, limit: int | None = None
    ) -> list[MedicalRecord]: ...

    async def count_by_pet(self, pet_id: UUID) -> int: ...

    async def list_weights_by_pet(self, pet_id: UUID) -> list[WeightReading]: ...

    async def list_costs_by_pet(self, pet_id: UUID) -> list[Decimal | None]: ...

    async def update(self, record_id: UUID, data: dict) -> MedicalRecord | None: ...
