from __future__ import annotations

from datetime import datetime, timezone

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import owner_scope
from src.domain.models.grooming_record import GroomingRecord
from src.domain.value_objects.principal import Principal


async def execute(
    uow: UnitOfWork, principal: Principal, *, now: datetime | None = None
) -> list[GroomingRecord]:
    today = (now or datetime.now(timezone.utc)).date()
    return await uow.grooming_records.list_between(
        today, today, owner_id=owner_scope(principal)
    )
