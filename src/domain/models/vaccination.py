from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from uuid import UUID, uuid4

from src.domain.value_objects.vaccination_status import VaccinationStatus

DUE_SOON_DAYS = 30


@dataclass(slots=True)
class Vaccination:
    id: UUID
    pet_id: UUID
    vaccine_name: str
    administered_date: date
    next_due_date: date | None = None
    veterinarian_id: UUID | None = None
    batch_number: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        pet_id: UUID,
        vaccine_name: str,
        administered_date: date,
        next_due_date: date | None = None,
        veterinarian_id: UUID | None = None,
        batch_number: str | None = None,
        notes: str | None = None,
    ) -> Vaccination:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            pet_id=pet_id,
            vaccine_name=vaccine_name,
            administered_date=administered_date,
            next_due_date=next_due_date,
            veterinarian_id=veterinarian_id,
            batch_number=batch_number,
            notes=notes,
            created_at=now,
            updated_at=now,
        )

    def status_at(self, now: datetime, due_soon_days: int = DUE_SOON_DAYS) -> VaccinationStatus:
        if self.next_due_date is None:
            return VaccinationStatus.UP_TO_DATE
        today = now.date()
        if self.next_due_date < today:
            return VaccinationStatus.OVERDUE
        if self.next_due_date <= today + timedelta(days=due_soon_days):
            return VaccinationStatus.DUE_SOON
        return VaccinationStatus.UP_TO_DATE
