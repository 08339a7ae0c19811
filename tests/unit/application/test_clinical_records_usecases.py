from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import PermissionDenied
from src.application.use_cases.grooming_records import (
    create_grooming_record,
    update_grooming_record,
)
from src.application.use_cases.medical_records import (
    create_medical_record,
    update_medical_record,
)
from src.application.use_cases.vaccinations import create_vaccination, update_vaccination
from src.domain.models.pet import Pet
from src.domain.value_objects.pet_traits import PetSpecies
from src.domain.value_objects.principal import Principal
from src.domain.value_objects.role import Role
from src.domain.value_objects.visit_type import VisitType
from src.utils.datetime_tz import utcnow

TODAY = utcnow().date()


class RecordingRepo:
    """Accepts writes and remembers every call made against it."""

    def __init__(self, pet: Pet | None = None) -> None:
        self.pet = pet
        self.calls: list[str] = []

    async def get(self, entity_id, **_kwargs):
        self.calls.append("get")
        return self.pet

    async def add(self, entity):
        self.calls.append("add")
        return entity

    async def update(self, entity_id, data):
        self.calls.append("update")
        return None


def make_uow(pet: Pet | None = None):
    state = {"commits": 0}

    async def commit():
        state["commits"] += 1

    return SimpleNamespace(
        pets=RecordingRepo(pet),
        medical_records=RecordingRepo(),
        vaccinations=RecordingRepo(),
        grooming_records=RecordingRepo(),
        commit=commit,
        state=state,
    )


def _all_calls(uow) -> list[str]:
    repos = (uow.pets, uow.medical_records, uow.vaccinations, uow.grooming_records)
    return [call for repo in repos for call in repo.calls]


def _owned_pet() -> tuple[Principal, Pet]:
    owner = Principal(user_id=uuid4())
    pet = Pet.create(owner_id=owner.user_id, name="Nala", species=PetSpecies.DOG)
    return owner, pet


WRITES = [
    pytest.param(
        create_medical_record.execute,
        lambda pet_id: create_medical_record.CreateMedicalRecordInput(
            pet_id=pet_id,
            visit_date=TODAY,
            visit_type=VisitType.SURGERY,
            reason="Self reported",
            service_cost=Decimal("0.01"),
        ),
        id="create-medical-record",
    ),
    pytest.param(
        create_vaccination.execute,
        lambda pet_id: create_vaccination.CreateVaccinationInput(
            pet_id=pet_id,
            vaccine_name="Rabies",
            administered_date=TODAY,
            next_due_date=TODAY + timedelta(days=365),
        ),
        id="create-vaccination",
    ),
    pytest.param(
        create_grooming_record.execute,
        lambda pet_id: create_grooming_record.CreateGroomingRecordInput(
            pet_id=pet_id,
            session_date=TODAY,
            services_performed=["bath"],
            service_cost=Decimal("0.00"),
        ),
        id="create-grooming-record",
    ),
]

AMENDMENTS = [
    pytest.param(
        update_medical_record.execute,
        update_medical_record.UpdateMedicalRecordInput(service_cost=Decimal("0.01")),
        id="amend-medical-record",
    ),
    pytest.param(
        update_vaccination.execute,
        update_vaccination.UpdateVaccinationInput(
            next_due_date=TODAY + timedelta(days=300)
        ),
        id="amend-vaccination",
    ),
    pytest.param(
        update_grooming_record.execute,
        update_grooming_record.UpdateGroomingRecordInput(service_cost=Decimal("0.00")),
        id="amend-grooming-record",
    ),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("execute, build_input", WRITES)
async def test_owner_cannot_create_clinical_records(execute, build_input):
    owner, pet = _owned_pet()
    uow = make_uow(pet)

    with pytest.raises(PermissionDenied):
        await execute(uow, owner, build_input(pet.id))

    assert _all_calls(uow) == []
    assert uow.state["commits"] == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("execute, payload", AMENDMENTS)
async def test_owner_cannot_amend_clinical_records(execute, payload):
    owner, pet = _owned_pet()
    uow = make_uow(pet)

    with pytest.raises(PermissionDenied):
        await execute(uow, owner, uuid4(), payload)

    assert _all_calls(uow) == []


@pytest.mark.asyncio
@pytest.mark.parametrize("execute, build_input", WRITES)
async def test_admin_records_clinical_data_as_author(execute, build_input):
    _, pet = _owned_pet()
    admin = Principal(user_id=uuid4(), roles=frozenset({Role.ADMIN}))
    uow = make_uow(pet)

    created = await execute(uow, admin, build_input(pet.id))

    author = getattr(created, "veterinarian_id", None) or getattr(created, "groomer_id", None)
    assert author == admin.user_id
    assert created.pet_id == pet.id
    assert uow.state["commits"] == 1
