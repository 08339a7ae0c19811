from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import ensure_admin
from src.application.use_cases.services.create_service import ensure_positive_duration
from src.application.validation import ensure_non_negative, parse_uuid
from src.domain.models.service import Service
from src.domain.value_objects.principal import Principal
from src.domain.value_objects.service_type import ServiceType


@dataclass(slots=True)
class UpdateServiceInput:
    name: str | None = None
    description: str | None = None
    price: Decimal | None = None
    duration_minutes: int | None = None
    type: ServiceType | None = None
    image: str | None = None
    is_active: bool | None = None


async def execute(
    uow: UnitOfWork,
    principal: Principal,
    service_id: str | UUID,
    payload: UpdateServiceInput,
) -> Service:
    ensure_admin(principal, "update services")
    service_uuid = parse_uuid(service_id, "service_id")
    ensure_non_negative(payload.price, "price")
    ensure_positive_duration(payload.duration_minutes)
    data = {
        f.name: getattr(payload, f.name)
        for f in fields(payload)
        if getattr(payload, f.name) is not None
    }
    if "name" in data:
        data["name"] = data["name"].strip()
    if not data:
        existing = await uow.services.get(service_uuid)
        if existing is None:
            raise NotFound("Service not found")
        return existing
    updated = await uow.services.update(service_uuid, data)
    if updated is None:
        raise NotFound("Service not found")
    await uow.commit()
    return updated
