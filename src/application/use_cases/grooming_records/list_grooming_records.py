from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.pet_access import load_accessible_pet
from src.application.validation import parse_uuid
from src.domain.models.grooming_record import GroomingRecord
from src.domain.value_objects.principal import Principal


async def execute(
    uow: UnitOfWork, principal: Principal, pet_id: str | UUID
) -> list[GroomingRecord]:
    pet_uuid = parse_uuid(pet_id, "pet_id")
    await load_accessible_pet(uow, principal, pet_uuid, resource="pet's grooming records")
    return await uow.grooming_records.list_by_pet(pet_uuid)
