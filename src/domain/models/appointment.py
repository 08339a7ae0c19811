from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from src.domain.value_objects.appointment_status import AppointmentStatus


@dataclass(slots=True)
class Appointment:
    id: UUID
    pet_id: UUID
    service_id: UUID
    customer_id: UUID
    date: datetime
    status: AppointmentStatus = AppointmentStatus.PENDING
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    # Populated only when the repository is asked to load the service
    service_name: str | None = None

    @classmethod
    def create(
        cls,
        pet_id: UUID,
        service_id: UUID,
        customer_id: UUID,
        date: datetime,
        notes: str | None = None,
    ) -> Appointment:
        now = datetime.now(timezone.utc)
        # Store the appointment date as timezone-aware UTC
        if date.tzinfo is None or date.tzinfo.utcoffset(date) is None:
            date = date.replace(tzinfo=timezone.utc)
        else:
            date = date.astimezone(timezone.utc)
        return cls(
            id=uuid4(),
            pet_id=pet_id,
            service_id=service_id,
            customer_id=customer_id,
            date=date,
            status=AppointmentStatus.PENDING,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
