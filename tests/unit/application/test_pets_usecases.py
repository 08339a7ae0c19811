from __future__ import annotations

from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.use_cases.pets import create_pet, delete_pet, list_pets, update_pet
from src.domain.models.pet import Pet
from src.domain.value_objects.pet_traits import PetSpecies
from src.domain.value_objects.principal import Principal
from src.domain.value_objects.role import Role


class StubPetsRepo:
    def __init__(self) -> None:
        self.pets: dict = {}
        self.list_kwargs = None
        self.updated_with = None
        self.deactivated = []

    async def add(self, pet: Pet) -> Pet:
        self.pets[pet.id] = pet
        return pet

    async def get(self, pet_id, *, load_owner=False, include_inactive=False):
        pet = self.pets.get(pet_id)
        if pet is None or not (pet.is_active or include_inactive):
            return None
        return pet

    async def list(self, *, owner_id=None, limit=10, offset=0):
        self.list_kwargs = {"owner_id": owner_id, "limit": limit, "offset": offset}
        return [p for p in self.pets.values() if owner_id is None or p.owner_id == owner_id]

    async def count(self, *, owner_id=None):
        return len([p for p in self.pets.values() if owner_id is None or p.owner_id == owner_id])

    async def update(self, pet_id, data):
        self.updated_with = data
        pet = self.pets[pet_id]
        for key, value in data.items():
            setattr(pet, key, value)
        return pet

    async def deactivate(self, pet_id):
        self.deactivated.append(pet_id)
        self.pets[pet_id].is_active = False
        return True


def make_uow(repo: StubPetsRepo):
    state = {"commits": 0}

    async def commit():
        state["commits"] += 1

    async def rollback():
        return None

    return SimpleNamespace(pets=repo, commit=commit, rollback=rollback, state=state)


def _seed(repo: StubPetsRepo, owner: Principal) -> Pet:
    pet = Pet.create(owner_id=owner.user_id, name="Milo", species=PetSpecies.CAT)
    repo.pets[pet.id] = pet
    return pet


@pytest.mark.asyncio
async def test_create_pet_assigns_principal_as_owner():
    repo = StubPetsRepo()
    uow = make_uow(repo)
    owner = Principal(user_id=uuid4())

    pet = await create_pet.execute(
        uow,
        owner,
        create_pet.CreatePetInput(name="  Milo ", species=PetSpecies.CAT, weight=Decimal("4.2")),
    )

    assert pet.owner_id == owner.user_id
    assert pet.name == "Milo"
    assert pet.is_active
    assert uow.state["commits"] == 1


@pytest.mark.asyncio
async def test_create_pet_rejects_negative_weight():
    uow = make_uow(StubPetsRepo())
    with pytest.raises(ValidationError):
        await create_pet.execute(
            uow,
            Principal(user_id=uuid4()),
            create_pet.CreatePetInput(name="Milo", species=PetSpecies.CAT, weight=Decimal("-1")),
        )


@pytest.mark.asyncio
async def test_list_pets_scopes_users_but_not_admins():
    repo = StubPetsRepo()
    uow = make_uow(repo)
    owner = Principal(user_id=uuid4())
    _seed(repo, owner)
    _seed(repo, Principal(user_id=uuid4()))

    page = await list_pets.execute(uow, owner, limit=10, offset=0)
    assert page.total == 1
    assert repo.list_kwargs["owner_id"] == owner.user_id

    admin = Principal(user_id=uuid4(), roles=frozenset({Role.ADMIN}))
    page = await list_pets.execute(uow, admin, limit=10, offset=0)
    assert page.total == 2
    assert repo.list_kwargs["owner_id"] is None


@pytest.mark.asyncio
async def test_update_pet_sends_only_supplied_fields():
    repo = StubPetsRepo()
    uow = make_uow(repo)
    owner = Principal(user_id=uuid4())
    pet = _seed(repo, owner)

    updated = await update_pet.execute(
        uow, owner, str(pet.id), update_pet.UpdatePetInput(name="Milo II")
    )

    assert repo.updated_with == {"name": "Milo II"}
    assert updated.name == "Milo II"


@pytest.mark.asyncio
async def test_update_pet_by_stranger_is_forbidden():
    repo = StubPetsRepo()
    pet = _seed(repo, Principal(user_id=uuid4()))
    with pytest.raises(PermissionDenied):
        await update_pet.execute(
            make_uow(repo),
            Principal(user_id=uuid4()),
            pet.id,
            update_pet.UpdatePetInput(name="Nope"),
        )
    assert repo.updated_with is None


@pytest.mark.asyncio
async def test_delete_pet_is_soft_and_hides_the_pet():
    repo = StubPetsRepo()
    uow = make_uow(repo)
    owner = Principal(user_id=uuid4())
    pet = _seed(repo, owner)

    await delete_pet.execute(uow, owner, str(pet.id))

    assert repo.deactivated == [pet.id]
    assert pet.id in repo.pets
    with pytest.raises(NotFound):
        await delete_pet.execute(uow, owner, str(pet.id))


@pytest.mark.asyncio
async def test_delete_pet_rejects_malformed_id():
    with pytest.raises(ValidationError):
        await delete_pet.execute(make_uow(StubPetsRepo()), Principal(user_id=uuid4()), "abc")
