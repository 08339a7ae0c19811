from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import ensure_admin
from src.application.policies.pet_access import load_accessible_pet
from src.application.validation import ensure_non_negative, ensure_not_future, parse_uuid
from src.domain.models.medical_record import MedicalRecord
from src.domain.value_objects.principal import Principal
from src.domain.value_objects.visit_type import VisitType


@dataclass(slots=True)
class CreateMedicalRecordInput:
    pet_id: str | UUID
    visit_date: date
    visit_type: VisitType
    reason: str
    diagnosis: str | None = None
    treatment: str | None = None
    notes: str | None = None
    prescriptions: list[str] = field(default_factory=list)
    follow_up_date: date | None = None
    weight_at_visit: Decimal | None = None
    temperature: Decimal | None = None
    service_cost: Decimal | None = None


async def execute(
    uow: UnitOfWork, principal: Principal, payload: CreateMedicalRecordInput
) -> MedicalRecord:
    ensure_admin(principal, "create medical records")
    pet_id = parse_uuid(payload.pet_id, "pet_id")
    ensure_not_future(payload.visit_date, "visit_date")
    ensure_non_negative(payload.weight_at_visit, "weight_at_visit")
    ensure_non_negative(payload.service_cost, "service_cost")
    await load_accessible_pet(uow, principal, pet_id, resource="pet's medical records")
    record = MedicalRecord.create(
        pet_id=pet_id,
        visit_date=payload.visit_date,
        visit_type=payload.visit_type,
        reason=payload.reason,
        veterinarian_id=principal.user_id,
        diagnosis=payload.diagnosis,
        treatment=payload.treatment,
        notes=payload.notes,
        prescriptions=payload.prescriptions,
        follow_up_date=payload.follow_up_date,
        weight_at_visit=payload.weight_at_visit,
        temperature=payload.temperature,
        service_cost=payload.service_cost,
    )
    created = await uow.medical_records.add(record)
    await uow.commit()
    return created
