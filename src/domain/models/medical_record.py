from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from src.domain.value_objects.visit_type import VisitType


@dataclass(slots=True)
class MedicalRecord:
    id: UUID
    pet_id: UUID
    visit_date: date
    visit_type: VisitType
    reason: str
    veterinarian_id: UUID | None = None
    diagnosis: str | None = None
    treatment: str | None = None
    notes: str | None = None
    prescriptions: list[str] = field(default_factory=list)
    follow_up_date: date | None = None
    weight_at_visit: Decimal | None = None
    temperature: Decimal | None = None
    service_cost: Decimal | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        pet_id: UUID,
        visit_date: date,
        visit_type: VisitType,
        reason: str,
        veterinarian_id: UUID | None = None,
        diagnosis: str | None = None,
        treatment: str | None = None,
        notes: str | None = None,
        prescriptions: list[str] | None = None,
        follow_up_date: date | None = None,
        weight_at_visit: Decimal | None = None,
        temperature: Decimal | None = None,
        service_cost: Decimal | None = None,
    ) -> MedicalRecord:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            pet_id=pet_id,
            visit_date=visit_date,
            visit_type=visit_type,
            reason=reason,
            veterinarian_id=veterinarian_id,
            diagnosis=diagnosis,
            treatment=treatment,
            notes=notes,
            prescriptions=list(prescriptions or []),
            follow_up_date=follow_up_date,
            weight_at_visit=weight_at_visit,
            temperature=temperature,
            service_cost=service_cost,
            created_at=now,
            updated_at=now,
        )


@dataclass(frozen=True, slots=True)
class WeightReading:
    """A weight measured during a visit."""

    visit_date: date
    weight: Decimal
