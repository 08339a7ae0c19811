from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.models.appointment import Appointment
from src.domain.value_objects.appointment_status import AppointmentStatus


class AppointmentRepository(Protocol):
    async def add(self, appointment: Appointment) -> Appointment: ...

    async def get(self, appointment_id: UUID) -> Appointment | None: ...

    async def list(
        self,
        *,
        customer_id: UUID | None = None,
        status: AppointmentStatus | None = None,
        service_id: UUID | None = None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Appointment], int]: ...

    async def list_by_pet(
        self,
        pet_id: UUID,
        *,
        date_from: datetime | None = None,
        date_before: datetime | None = None,
        descending: bool = False,
        limit: int | None = None,
        load_service: bool = False,
    ) -> list[Appointment]: ...

    async def count_by_pet(self, pet_id: UUID) -> int: ...

    async def update(self, appointment_id: UUID, data: dict) -> Appointment | None: ...

    async def delete(self, appointment_id: UUID) -> bool: ...
