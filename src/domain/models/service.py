from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from src.domain.value_objects.service_type import ServiceType


@dataclass(slots=True)
class Service:
    id: UUID
    name: str
    description: str
    price: Decimal
    duration_minutes: int
    type: ServiceType
    image: str | None = None
    is_active: bool = True
    created_by_id: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        price: Decimal,
        duration_minutes: int,
        type: ServiceType,
        image: str | None = None,
        is_active: bool = True,
        created_by_id: UUID | None = None,
    ) -> Service:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            name=name.strip(),
            description=description,
            price=price,
            duration_minutes=duration_minutes,
            type=type,
            image=image,
            is_active=is_active,
            created_by_id=created_by_id,
            created_at=now,
            updated_at=now,
        )
