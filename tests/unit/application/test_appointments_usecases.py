from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.use_cases.appointments import (
    create_appointment,
    delete_appointment,
    list_appointments,
    update_appointment,
)
from src.domain.models.appointment import Appointment
from src.domain.models.pet import Pet
from src.domain.models.service import Service
from src.domain.value_objects.appointment_status import AppointmentStatus
from src.domain.value_objects.pet_traits import PetSpecies
from src.domain.value_objects.principal import Principal
from src.domain.value_objects.role import Role
from src.domain.value_objects.service_type import ServiceType


class StubPets:
    def __init__(self, pets) -> None:
        self.pets = {p.id: p for p in pets}

    async def get(self, pet_id, *, load_owner=False, include_inactive=False):
        pet = self.pets.get(pet_id)
        return pet if pet and (pet.is_active or include_inactive) else None


class StubServices:
    def __init__(self, services) -> None:
        self.services = {s.id: s for s in services}

    async def get(self, service_id):
        return self.services.get(service_id)


class StubAppointments:
    def __init__(self) -> None:
        self.items: dict = {}
        self.list_kwargs = None

    async def add(self, appointment):
        self.items[appointment.id] = appointment
        return appointment

    async def get(self, appointment_id):
        return self.items.get(appointment_id)

    async def list(self, **kwargs):
        self.list_kwargs = kwargs
        return list(self.items.values()), len(self.items)

    async def update(self, appointment_id, data):
        appointment = self.items[appointment_id]
        for key, value in data.items():
            setattr(appointment, key, value)
        return appointment

    async def delete(self, appointment_id):
        return self.items.pop(appointment_id, None) is not None


def _service(active: bool = True) -> Service:
    return Service.create(
        name="Bath",
        description="Full bath",
        price=Decimal("20"),
        duration_minutes=45,
        type=ServiceType.GROOMING,
        is_active=active,
    )


def make_uow(pets, services, appointments=None):
    async def commit():
        return None

    return SimpleNamespace(
        pets=StubPets(pets),
        services=StubServices(services),
        appointments=appointments or StubAppointments(),
        commit=commit,
    )


def _future(days: int = 3) -> datetime:
    return datetime.now(timezone.utc) + timedelta(days=days)


@pytest.mark.asyncio
async def test_create_appointment_for_own_pet():
    owner = Principal(user_id=uuid4())
    pet = Pet.create(owner_id=owner.user_id, name="Rex", species=PetSpecies.DOG)
    service = _service()
    uow = make_uow([pet], [service])

    created = await create_appointment.execute(
        uow,
        owner,
        create_appointment.CreateAppointmentInput(
            pet_id=str(pet.id), service_id=str(service.id), date=_future()
        ),
    )

    assert created.customer_id == owner.user_id
    assert created.status is AppointmentStatus.PENDING
    assert created.service_name == "Bath"


@pytest.mark.asyncio
async def test_create_appointment_rejects_past_date():
    owner = Principal(user_id=uuid4())
    pet = Pet.create(owner_id=owner.user_id, name="Rex", species=PetSpecies.DOG)
    service = _service()
    with pytest.raises(ValidationError):
        await create_appointment.execute(
            make_uow([pet], [service]),
            owner,
            create_appointment.CreateAppointmentInput(
                pet_id=pet.id, service_id=service.id, date=_future(-1)
            ),
        )


@pytest.mark.asyncio
async def test_create_appointment_for_someone_elses_pet_is_forbidden():
    pet = Pet.create(owner_id=uuid4(), name="Rex", species=PetSpecies.DOG)
    service = _service()
    with pytest.raises(PermissionDenied):
        await create_appointment.execute(
            make_uow([pet], [service]),
            Principal(user_id=uuid4()),
            create_appointment.CreateAppointmentInput(
                pet_id=pet.id, service_id=service.id, date=_future()
            ),
        )


@pytest.mark.asyncio
async def test_create_appointment_requires_active_service():
    owner = Principal(user_id=uuid4())
    pet = Pet.create(owner_id=owner.user_id, name="Rex", species=PetSpecies.DOG)
    inactive = _service(active=False)
    with pytest.raises(ValidationError):
        await create_appointment.execute(
            make_uow([pet], [inactive]),
            owner,
            create_appointment.CreateAppointmentInput(
                pet_id=pet.id, service_id=inactive.id, date=_future()
            ),
        )
    with pytest.raises(NotFound):
        await create_appointment.execute(
            make_uow([pet], []),
            owner,
            create_appointment.CreateAppointmentInput(
                pet_id=pet.id, service_id=uuid4(), date=_future()
            ),
        )


@pytest.mark.asyncio
async def test_only_admins_change_status():
    owner = Principal(user_id=uuid4())
    appointments = StubAppointments()
    appointment = Appointment.create(
        pet_id=uuid4(), service_id=uuid4(), customer_id=owner.user_id, date=_future()
    )
    appointments.items[appointment.id] = appointment
    uow = make_uow([], [], appointments)

    with pytest.raises(PermissionDenied):
        await update_appointment.execute(
            uow,
            owner,
            appointment.id,
            update_appointment.UpdateAppointmentInput(status=AppointmentStatus.CONFIRMED),
        )

    admin = Principal(user_id=uuid4(), roles=frozenset({Role.ADMIN}))
    updated = await update_appointment.execute(
        uow,
        admin,
        appointment.id,
        update_appointment.UpdateAppointmentInput(status=AppointmentStatus.CONFIRMED),
    )
    assert updated.status is AppointmentStatus.CONFIRMED


@pytest.mark.asyncio
async def test_owner_can_reschedule_and_delete():
    owner = Principal(user_id=uuid4())
    appointments = StubAppointments()
    appointment = Appointment.create(
        pet_id=uuid4(), service_id=uuid4(), customer_id=owner.user_id, date=_future()
    )
    appointments.items[appointment.id] = appointment
    uow = make_uow([], [], appointments)
    new_date = _future(7)

    updated = await update_appointment.execute(
        uow, owner, str(appointment.id), update_appointment.UpdateAppointmentInput(date=new_date)
    )
    assert updated.date == new_date

    await delete_appointment.execute(uow, owner, str(appointment.id))
    assert appointment.id not in appointments.items
    with pytest.raises(NotFound):
        await delete_appointment.execute(uow, owner, str(appointment.id))


@pytest.mark.asyncio
async def test_list_appointments_scopes_customers():
    owner = Principal(user_id=uuid4())
    appointments = StubAppointments()
    uow = make_uow([], [], appointments)

    await list_appointments.execute(uow, owner, status=AppointmentStatus.PENDING)
    assert appointments.list_kwargs["customer_id"] == owner.user_id
    assert appointments.list_kwargs["status"] is AppointmentStatus.PENDING

    admin = Principal(user_id=uuid4(), roles=frozenset({Role.SUPER_USER}))
    await list_appointments.execute(uow, admin)
    assert appointments.list_kwargs["customer_id"] is None
