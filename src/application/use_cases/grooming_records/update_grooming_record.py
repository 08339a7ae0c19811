from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import ensure_admin
from src.application.policies.pet_access import load_accessible_pet
from src.application.use_cases.grooming_records.create_grooming_record import (
    ensure_services_listed,
)
from src.application.validation import ensure_non_negative, parse_uuid
from src.domain.models.grooming_record import GroomingRecord
from src.domain.value_objects.principal import Principal


@dataclass(slots=True)
class UpdateGroomingRecordInput:
    session_date: date | None = None
    services_performed: list[str] | None = None
    products_used: list[str] | None = None
    hair_style: str | None = None
    skin_condition: str | None = None
    coat_condition: str | None = None
    behavior_during_session: str | None = None
    observations: str | None = None
    recommendations: str | None = None
    duration_minutes: int | None = None
    service_cost: Decimal | None = None


async def execute(
    uow: UnitOfWork,
    principal: Principal,
    record_id: str | UUID,
    payload: UpdateGroomingRecordInput,
) -> GroomingRecord:
    ensure_admin(principal, "amend grooming records")
    record_uuid = parse_uuid(record_id, "record_id")
    ensure_non_negative(payload.duration_minutes, "duration_minutes")
    ensure_non_negative(payload.service_cost, "service_cost")
    if payload.services_performed is not None:
        payload.services_performed = ensure_services_listed(payload.services_performed)
    existing = await uow.grooming_records.get(record_uuid)
    if existing is None:
        raise NotFound("Grooming record not found")
    await load_accessible_pet(
        uow, principal, existing.pet_id, resource="grooming record", include_inactive=True
    )
    data = {
        f.name: getattr(payload, f.name)
        for f in fields(payload)
        if getattr(payload, f.name) is not None
    }
    if not data:
        return existing
    updated = await uow.grooming_records.update(record_uuid, data)
    if updated is None:
        raise NotFound("Grooming record not found")
    await uow.commit()
    return updated
