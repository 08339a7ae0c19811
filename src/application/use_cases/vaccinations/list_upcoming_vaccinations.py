from __future__ import annotations

from datetime import datetime, timezone

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import owner_scope
from src.domain.models.pet_profile import VaccinationView
from src.domain.services.profile_metrics import describe_vaccinations, due_soon_window
from src.domain.value_objects.principal import Principal


async def execute(
    uow: UnitOfWork,
    principal: Principal,
    *,
    now: datetime | None = None,
    due_soon_days: int = 30,
) -> list[VaccinationView]:
    """Vaccines falling due within the window, across the principal's pets."""
    now = now or datetime.now(timezone.utc)
    start, end = due_soon_window(now, due_soon_days)
    vaccinations = await uow.vaccinations.list_due_between(
        start, end, owner_id=owner_scope(principal)
    )
    return describe_vaccinations(vaccinations, now, due_soon_days)
