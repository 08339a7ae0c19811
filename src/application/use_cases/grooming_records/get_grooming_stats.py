from __future__ import annotations

import calendar
from datetime import datetime, timezone

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import owner_scope
from src.domain.models.grooming_record import GroomingStats
from src.domain.value_objects.principal import Principal


async def execute(
    uow: UnitOfWork, principal: Principal, *, now: datetime | None = None
) -> GroomingStats:
    """Session counts, revenue and average duration over the principal's scope."""
    today = (now or datetime.now(timezone.utc)).date()
    owner_id = owner_scope(principal)
    month_end = today.replace(day=calendar.monthrange(today.year, today.month)[1])
    repo = uow.grooming_records

    total_sessions = await repo.count_between(owner_id=owner_id)
    revenue, average_duration = await repo.totals(owner_id=owner_id)
    sessions_today = await repo.count_between(start=today, end=today, owner_id=owner_id)
    sessions_this_month = await repo.count_between(
        start=today.replace(day=1), end=month_end, owner_id=owner_id
    )
    return GroomingStats(
        total_sessions=total_sessions,
        total_revenue=round(float(revenue or 0), 2),
        average_duration_minutes=round(average_duration or 0.0, 1),
        sessions_today=sessions_today,
        sessions_this_month=sessions_this_month,
    )
