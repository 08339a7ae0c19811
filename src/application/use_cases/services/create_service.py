from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import ensure_admin
from src.application.validation import ensure_non_negative
from src.domain.models.service import Service
from src.domain.value_objects.principal import Principal
from src.domain.value_objects.service_type import ServiceType


@dataclass(slots=True)
class CreateServiceInput:
    name: str
    description: str
    price: Decimal
    duration_minutes: int
    type: ServiceType
    image: str | None = None
    is_active: bool = True


def ensure_positive_duration(duration_minutes: int | None) -> None:
    if duration_minutes is not None and duration_minutes <= 0:
        raise ValidationError("duration_minutes must be positive")


async def execute(uow: UnitOfWork, principal: Principal, payload: CreateServiceInput) -> Service:
    ensure_admin(principal, "create services")
    ensure_non_negative(payload.price, "price")
    ensure_positive_duration(payload.duration_minutes)
    service = Service.create(
        name=payload.name,
        description=payload.description,
        price=payload.price,
        duration_minutes=payload.duration_minutes,
        type=payload.type,
        image=payload.image,
        is_active=payload.is_active,
        created_by_id=principal.user_id,
    )
    created = await uow.services.add(service)
    await uow.commit()
    return created
