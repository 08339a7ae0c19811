from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.pet_access import load_accessible_pet
from src.application.validation import parse_uuid
from src.domain.models.pet_profile import VaccinationView
from src.domain.services.profile_metrics import describe_vaccinations
from src.domain.value_objects.principal import Principal


async def execute(
    uow: UnitOfWork,
    principal: Principal,
    pet_id: str | UUID,
    *,
    now: datetime | None = None,
    due_soon_days: int = 30,
) -> list[VaccinationView]:
    pet_uuid = parse_uuid(pet_id, "pet_id")
    await load_accessible_pet(uow, principal, pet_uuid, resource="pet's vaccinations")
    vaccinations = await uow.vaccinations.list_by_pet(pet_uuid)
    return describe_vaccinations(vaccinations, now or datetime.now(timezone.utc), due_soon_days)
