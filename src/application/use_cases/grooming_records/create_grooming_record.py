from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import ensure_admin
from src.application.policies.pet_access import load_accessible_pet
from src.application.validation import ensure_non_negative, parse_uuid
from src.domain.models.grooming_record import GroomingRecord
from src.domain.value_objects.principal import Principal


@dataclass(slots=True)
class CreateGroomingRecordInput:
    pet_id: str | UUID
    session_date: date
    services_performed: list[str]
    products_used: list[str] = field(default_factory=list)
    hair_style: str | None = None
    skin_condition: str | None = None
    coat_condition: str | None = None
    behavior_during_session: str | None = None
    observations: str | None = None
    recommendations: str | None = None
    duration_minutes: int | None = None
    service_cost: Decimal | None = None


def ensure_services_listed(services: list[str]) -> list[str]:
    cleaned = [service.strip() for service in services if service and service.strip()]
    if not cleaned:
        raise ValidationError("services_performed must list at least one service")
    return cleaned


async def execute(
    uow: UnitOfWork, principal: Principal, payload: CreateGroomingRecordInput
) -> GroomingRecord:
    ensure_admin(principal, "create grooming records")
    pet_id = parse_uuid(payload.pet_id, "pet_id")
    services = ensure_services_listed(payload.services_performed)
    ensure_non_negative(payload.duration_minutes, "duration_minutes")
    ensure_non_negative(payload.service_cost, "service_cost")
    await load_accessible_pet(uow, principal, pet_id, resource="pet's grooming records")
    record = GroomingRecord.create(
        pet_id=pet_id,
        session_date=payload.session_date,
        services_performed=services,
        groomer_id=principal.user_id,
        products_used=payload.products_used,
        hair_style=payload.hair_style,
        skin_condition=payload.skin_condition,
        coat_condition=payload.coat_condition,
        behavior_during_session=payload.behavior_during_session,
        observations=payload.observations,
        recommendations=payload.recommendations,
        duration_minutes=payload.duration_minutes,
        service_cost=payload.service_cost,
    )
    created = await uow.grooming_records.add(record)
    await uow.commit()
    return created
