from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(slots=True)
class GroomingRecord:
    id: UUID
    pet_id: UUID
    session_date: date
    services_performed: list[str]
    groomer_id: UUID | None = None
    products_used: list[str] = field(default_factory=list)
    hair_style: str | None = None
    skin_condition: str | None = None
    coat_condition: str | None = None
    behavior_during_session: str | None = None
    observations: str | None = None
    recommendations: str | None = None
    duration_minutes: int | None = None
    service_cost: Decimal | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        pet_id: UUID,
        session_date: date,
        services_performed: list[str],
        groomer_id: UUID | None = None,
        products_used: list[str] | None = None,
        hair_style: str | None = None,
        skin_condition: str | None = None,
        coat_condition: str | None = None,
        behavior_during_session: str | None = None,
        observations: str | None = None,
        recommendations: str | None = None,
        duration_minutes: int | None = None,
        service_cost: Decimal | None = None,
    ) -> GroomingRecord:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            pet_id=pet_id,
            session_date=session_date,
            services_performed=list(services_performed),
            groomer_id=groomer_id,
            products_used=list(products_used or []),
            hair_style=hair_style,
            skin_condition=skin_condition,
            coat_condition=coat_condition,
            behavior_during_session=behavior_during_session,
            observations=observations,
            recommendations=recommendations,
            duration_minutes=duration_minutes,
            service_cost=service_cost,
            created_at=now,
            updated_at=now,
        )


@dataclass(frozen=True, slots=True)
class GroomingStats:
    total_sessions: int
    total_revenue: float
    average_duration_minutes: float
    sessions_today: int
    sessions_this_month: int
