from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import ensure_admin
from src.application.policies.pet_access import load_accessible_pet
from src.application.validation import ensure_non_negative, ensure_not_future, parse_uuid
from src.domain.models.medical_record import MedicalRecord
from src.domain.value_objects.principal import Principal
from src.domain.value_objects.visit_type import VisitType


@dataclass(slots=True)
class UpdateMedicalRecordInput:
    visit_date: date | None = None
    visit_type: VisitType | None = None
    reason: str | None = None
    diagnosis: str | None = None
    treatment: str | None = None
    notes: str | None = None
    prescriptions: list[str] | None = None
    follow_up_date: date | None = None
    weight_at_visit: Decimal | None = None
    temperature: Decimal | None = None
    service_cost: Decimal | None = None


async def execute(
    uow: UnitOfWork,
    principal: Principal,
    record_id: str | UUID,
    payload: UpdateMedicalRecordInput,
) -> MedicalRecord:
    ensure_admin(principal, "amend medical records")
    record_uuid = parse_uuid(record_id, "record_id")
    if payload.visit_date is not None:
        ensure_not_future(payload.visit_date, "visit_date")
    ensure_non_negative(payload.weight_at_visit, "weight_at_visit")
    ensure_non_negative(payload.service_cost, "service_cost")
    existing = await uow.medical_records.get(record_uuid)
    if existing is None:
        raise NotFound("Medical record not found")
    await load_accessible_pet(
        uow, principal, existing.pet_id, resource="medical record", include_inactive=True
    )
    data = {
        f.name: getattr(payload, f.name)
        for f in fields(payload)
        if getattr(payload, f.name) is not None
    }
    if not data:
        return existing
    updated = await uow.medical_records.update(record_uuid, data)
    if updated is None:
        raise NotFound("Medical record not found")
    await uow.commit()
    return updated
