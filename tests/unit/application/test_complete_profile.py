from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.use_cases.pets import get_complete_profile
from src.domain.models.appointment import Appointment
from src.domain.models.grooming_record import GroomingRecord
from src.domain.models.medical_record import MedicalRecord, WeightReading
from src.domain.models.pet import Pet
from src.domain.models.pet_profile import WeightSource
from src.domain.models.user import OwnerSummary
from src.domain.models.vaccination import Vaccination
from src.domain.value_objects.appointment_status import AppointmentStatus
from src.domain.value_objects.pet_traits import PetSpecies
from src.domain.value_objects.principal import Principal
from src.domain.value_objects.role import Role
from src.domain.value_objects.visit_type import VisitType

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


class Store:
    def __init__(self) -> None:
        self.pets: dict[UUID, Pet] = {}
        self.medical: list[MedicalRecord] = []
        self.vaccinations: list[Vaccination] = []
        self.grooming: list[GroomingRecord] = []
        self.appointments: list[Appointment] = []
        self.opened = 0
        self.calls: list[str] = []


class StubPets:
    def __init__(self, store: Store) -> None:
        self.store = store

    async def get(self, pet_id, *, load_owner=False, include_inactive=False):
        self.store.calls.append("pets.get")
        pet = self.store.pets.get(pet_id)
        if pet is None or not (pet.is_active or include_inactive):
            return None
        if load_owner:
            return replace(
                pet, owner=OwnerSummary(id=pet.owner_id, email="o@example.com", full_name="O")
            )
        return pet


class StubMedical:
    def __init__(self, store: Store) -> None:
        self.store = store

    def _for(self, pet_id):
        rows = [r for r in self.store.medical if r.pet_id == pet_id]
        return sorted(rows, key=lambda r: r.visit_date, reverse=True)

    async def list_by_pet(self, pet_id, *, limit=None):
        self.store.calls.append("medical.list")
        rows = self._for(pet_id)
        return rows[:limit] if limit is not None else rows

    async def count_by_pet(self, pet_id):
        self.store.calls.append("medical.count")
        return len(self._for(pet_id))

    async def list_weights_by_pet(self, pet_id):
        return [
            WeightReading(visit_date=r.visit_date, weight=r.weight_at_visit)
            for r in self._for(pet_id)
            if r.weight_at_visit is not None
        ]

    async def list_costs_by_pet(self, pet_id):
        return [r.service_cost for r in self._for(pet_id)]


class StubVaccinations:
    def __init__(self, store: Store) -> None:
        self.store = store

    async def list_by_pet(self, pet_id):
        self.store.calls.append("vaccinations.list")
        rows = [v for v in self.store.vaccinations if v.pet_id == pet_id]
        return sorted(rows, key=lambda v: v.administered_date, reverse=True)

    async def count_by_pet(self, pet_id):
        return len([v for v in self.store.vaccinations if v.pet_id == pet_id])


class StubGrooming:
    def __init__(self, store: Store) -> None:
        self.store = store

    def _for(self, pet_id):
        rows = [r for r in self.store.grooming if r.pet_id == pet_id]
        return sorted(rows, key=lambda r: r.session_date, reverse=True)

    async def list_by_pet(self, pet_id, *, limit=None):
        self.store.calls.append("grooming.list")
        rows = self._for(pet_id)
        return rows[:limit] if limit is not None else rows

    async def count_by_pet(self, pet_id):
        return len(self._for(pet_id))

    async def list_costs_by_pet(self, pet_id):
        return [r.service_cost for r in self._for(pet_id)]


class StubAppointments:
    def __init__(self, store: Store) -> None:
        self.store = store

    async def list_by_pet(
        self,
        pet_id,
        *,
        date_from=None,
        date_before=None,
        descending=False,
        limit=None,
        load_service=False,
    ):
        self.store.calls.append("appointments.list")
        rows = [a for a in self.store.appointments if a.pet_id == pet_id]
        if date_from is not None:
            rows = [a for a in rows if a.date >= date_from]
        if date_before is not None:
            rows = [a for a in rows if a.date < date_before]
        rows.sort(key=lambda a: a.date, reverse=descending)
        return rows[:limit] if limit is not None else rows

    async def count_by_pet(self, pet_id):
        return len([a for a in self.store.appointments if a.pet_id == pet_id])


class StubUnitOfWork:
    def __init__(self, store: Store) -> None:
        self.store = store
        self.pets = StubPets(store)
        self.medical_records = StubMedical(store)
        self.vaccinations = StubVaccinations(store)
        self.grooming_records = StubGrooming(store)
        self.appointments = StubAppointments(store)

    async def __aenter__(self):
        self.store.opened += 1
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return None


def make_factory(store: Store):
    return lambda: StubUnitOfWork(store)


def _owner() -> Principal:
    return Principal(user_id=uuid4())


def _add_pet(store: Store, owner: Principal, **overrides) -> Pet:
    pet = Pet.create(owner_id=owner.user_id, name="Rex", species=PetSpecies.DOG)
    for key, value in overrides.items():
        setattr(pet, key, value)
    store.pets[pet.id] = pet
    return pet


def _medical(pet: Pet, visit_date: date, **kwargs) -> MedicalRecord:
    return MedicalRecord.create(
        pet_id=pet.id,
        visit_date=visit_date,
        visit_type=VisitType.CHECKUP,
        reason="Routine",
        **kwargs,
    )


def _appointment(pet: Pet, when: datetime, status=AppointmentStatus.PENDING) -> Appointment:
    appointment = Appointment.create(
        pet_id=pet.id, service_id=uuid4(), customer_id=pet.owner_id, date=when
    )
    appointment.status = status
    return appointment


@pytest.mark.asyncio
async def test_profile_scenario_weights_vaccines_and_spend():
    store = Store()
    owner = _owner()
    pet = _add_pet(
        store,
        owner,
        birth_date=date(2020, 12, 15),
        weight=Decimal("10.00"),
        updated_at=NOW - timedelta(days=1),
    )
    store.medical.append(
        _medical(
            pet,
            date(2024, 5, 1),
            weight_at_visit=Decimal("9.50"),
            service_cost=Decimal("35.00"),
        )
    )
    store.vaccinations.append(
        Vaccination.create(
            pet_id=pet.id,
            vaccine_name="Rabies",
            administered_date=date(2023, 6, 25),
            next_due_date=NOW.date() + timedelta(days=10),
        )
    )

    profile = await get_complete_profile.execute(
        make_factory(store), owner, str(pet.id), now=NOW
    )

    assert profile.summary.age == 3.5
    assert [(e.source, e.weight) for e in profile.weight_history] == [
        (WeightSource.MANUAL, 10.0),
        (WeightSource.MEDICAL, 9.5),
    ]
    assert len(profile.vaccinations.upcoming_vaccines) == 1
    assert profile.summary.total_spent_medical == 35.0
    assert profile.summary.total_spent_grooming == 0.0
    assert profile.summary.next_vaccination_due == NOW.date() + timedelta(days=10)
    assert profile.summary.last_visit_date == date(2024, 5, 1)
    assert profile.pet.owner is not None
    assert profile.grooming_history.last_session_date is None


@pytest.mark.asyncio
async def test_other_user_is_forbidden_before_any_fan_out():
    store = Store()
    pet = _add_pet(store, _owner())
    stranger = _owner()

    with pytest.raises(PermissionDenied):
        await get_complete_profile.execute(make_factory(store), stranger, pet.id, now=NOW)
    assert store.calls == ["pets.get"]


@pytest.mark.asyncio
async def test_admin_can_read_any_profile():
    store = Store()
    pet = _add_pet(store, _owner())
    admin = Principal(user_id=uuid4(), roles=frozenset({Role.ADMIN}))

    profile = await get_complete_profile.execute(make_factory(store), admin, pet.id, now=NOW)
    assert profile.pet.id == pet.id


@pytest.mark.asyncio
async def test_malformed_id_fails_before_storage_access():
    store = Store()
    with pytest.raises(ValidationError):
        await get_complete_profile.execute(make_factory(store), _owner(), "not-a-uuid", now=NOW)
    assert store.opened == 0
    assert store.calls == []


@pytest.mark.asyncio
async def test_soft_deleted_pet_is_not_found():
    store = Store()
    owner = _owner()
    pet = _add_pet(store, owner, is_active=False)

    with pytest.raises(NotFound):
        await get_complete_profile.execute(make_factory(store), owner, pet.id, now=NOW)
    assert store.calls == ["pets.get"]


@pytest.mark.asyncio
async def test_missing_pet_is_not_found_even_for_strangers():
    store = Store()
    with pytest.raises(NotFound):
        await get_complete_profile.execute(make_factory(store), _owner(), uuid4(), now=NOW)


@pytest.mark.asyncio
async def test_each_group_reads_through_its_own_unit_of_work():
    store = Store()
    owner = _owner()
    pet = _add_pet(store, owner)

    await get_complete_profile.execute(make_factory(store), owner, pet.id, now=NOW)

    # one for the pet lookup, one per record group
    assert store.opened == 5


@pytest.mark.asyncio
async def test_appointments_partitioned_by_date_only():
    store = Store()
    owner = _owner()
    pet = _add_pet(store, owner)
    exactly_now = _appointment(pet, NOW)
    cancelled_future = _appointment(pet, NOW + timedelta(days=2), AppointmentStatus.CANCELLED)
    later = _appointment(pet, NOW + timedelta(days=9))
    pending_past = _appointment(pet, NOW - timedelta(days=1))
    store.appointments.extend([later, pending_past, cancelled_future, exactly_now])
    for offset in range(2, 30):
        store.appointments.append(_appointment(pet, NOW - timedelta(days=offset)))

    profile = await get_complete_profile.execute(make_factory(store), owner, pet.id, now=NOW)
    history = profile.appointments

    assert [a.id for a in history.upcoming] == [exactly_now.id, cancelled_future.id, later.id]
    assert history.past[0].id == pending_past.id
    assert len(history.past) == 20
    assert all(a.date < NOW for a in history.past)
    assert history.total_appointments == 32
    upcoming_ids = {a.id for a in history.upcoming}
    assert not upcoming_ids & {a.id for a in history.past}


@pytest.mark.asyncio
async def test_totals_do_not_depend_on_recent_caps():
    store = Store()
    owner = _owner()
    pet = _add_pet(store, owner)
    for offset in range(12):
        store.medical.append(_medical(pet, date(2024, 1, 1) + timedelta(days=offset)))
        store.grooming.append(
            GroomingRecord.create(
                pet_id=pet.id,
                session_date=date(2024, 2, 1) + timedelta(days=offset),
                services_performed=["bath"],
            )
        )
    factory = make_factory(store)

    default = await get_complete_profile.execute(factory, owner, pet.id, now=NOW)
    narrow = await get_complete_profile.execute(
        factory,
        owner,
        pet.id,
        now=NOW,
        limits=get_complete_profile.ProfileLimits(recent_visits=5, recent_sessions=3),
    )

    assert len(default.medical_history.recent_visits) == 10
    assert len(narrow.medical_history.recent_visits) == 5
    assert default.medical_history.total_visits == narrow.medical_history.total_visits == 12
    assert len(narrow.grooming_history.recent_sessions) == 3
    assert narrow.grooming_history.total_sessions == 12
    assert narrow.grooming_history.last_session_date == date(2024, 2, 12)
    recent = default.medical_history.recent_visits
    assert recent[0].visit_date > recent[-1].visit_date


@pytest.mark.asyncio
async def test_repeated_reads_report_identical_totals():
    store = Store()
    owner = _owner()
    pet = _add_pet(store, owner)
    store.medical.append(_medical(pet, date(2024, 3, 3)))
    store.appointments.append(_appointment(pet, NOW + timedelta(hours=3)))
    factory = make_factory(store)

    first = await get_complete_profile.execute(factory, owner, pet.id, now=NOW)
    second = await get_complete_profile.execute(factory, owner, pet.id, now=NOW)

    def totals(profile):
        return (
            profile.medical_history.total_visits,
            profile.vaccinations.total_vaccines,
            profile.grooming_history.total_sessions,
            profile.appointments.total_appointments,
        )

    assert totals(first) == totals(second) == (1, 0, 0, 1)


@pytest.mark.asyncio
async def test_failure_in_one_group_fails_the_whole_profile():
    store = Store()
    owner = _owner()
    pet = _add_pet(store, owner)

    class BrokenGrooming(StubGrooming):
        async def count_by_pet(self, pet_id):
            raise RuntimeError("connection lost")

    def factory():
        uow = StubUnitOfWork(store)
        uow.grooming_records = BrokenGrooming(store)
        return uow

    with pytest.raises(RuntimeError, match="connection lost"):
        await get_complete_profile.execute(factory, owner, pet.id, now=NOW)


@pytest.mark.asyncio
async def test_empty_profile_has_no_weights_and_zero_spend():
    store = Store()
    owner = _owner()
    pet = _add_pet(store, owner, weight=None, birth_date=None)

    profile = await get_complete_profile.execute(make_factory(store), owner, pet.id, now=NOW)

    assert profile.weight_history == []
    assert profile.summary.age is None
    assert profile.summary.next_vaccination_due is None
    assert profile.summary.last_visit_date is None
    assert profile.summary.total_spent_medical == 0.0
