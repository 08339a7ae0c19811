from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.pet_access import load_accessible_pet
from src.application.validation import parse_uuid
from src.domain.models.pet import Pet
from src.domain.value_objects.principal import Principal


async def execute(uow: UnitOfWork, principal: Principal, pet_id: str | UUID) -> Pet:
    return await load_accessible_pet(
        uow, principal, parse_uuid(pet_id, "pet_id"), load_owner=True
    )
