from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import ensure_owner_or_admin
from src.domain.models.pet import Pet
from src.domain.value_objects.principal import Principal


async def load_accessible_pet(
    uow: UnitOfWork,
    principal: Principal,
    pet_id: UUID,
    *,
    resource: str = "pet",
    load_owner: bool = False,
    include_inactive: bool = False,
) -> Pet:
    """Fetch a pet and apply the ownership rule to it.

    Absence is reported before ownership, so a missing pet is always NotFound.
    """
    pet = await uow.pets.get(pet_id, load_owner=load_owner, include_inactive=include_inactive)
    if pet is None:
        raise NotFound("Pet not found")
    ensure_owner_or_admin(pet.owner_id, principal, resource)
    return pet
