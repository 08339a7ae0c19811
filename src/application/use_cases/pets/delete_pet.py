from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.pet_access import load_accessible_pet
from src.application.validation import parse_uuid
from src.domain.value_objects.principal import Principal


async def execute(uow: UnitOfWork, principal: Principal, pet_id: str | UUID) -> None:
    """Soft delete: the pet disappears from queries, its records stay."""
    pet_uuid = parse_uuid(pet_id, "pet_id")
    await load_accessible_pet(uow, principal, pet_uuid)
    if not await uow.pets.deactivate(pet_uuid):
        raise NotFound("Pet not found")
    await uow.commit()
