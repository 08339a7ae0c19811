"""Consolidated pet profile.

The pet is loaded and authorized first; the four record groups are then read
concurrently, each through its own unit of work since a single session cannot
run statements in parallel. A failure in any group fails the whole profile.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.pet_access import load_accessible_pet
from src.application.validation import parse_uuid
from src.domain.models.pet_profile import (
    AppointmentHistory,
    CompleteProfile,
    GroomingHistory,
    MedicalHistory,
    ProfileSummary,
    VaccinationHistory,
)
from src.domain.services.profile_metrics import (
    calculate_age,
    describe_vaccinations,
    merge_weight_history,
    next_vaccination_due,
    total_spent,
    upcoming_vaccines,
)
from src.domain.value_objects.principal import Principal

logger = logging.getLogger(__name__)

UnitOfWorkFactory = Callable[[], UnitOfWork]


@dataclass(frozen=True, slots=True)
class ProfileLimits:
    recent_visits: int = 10
    recent_sessions: int = 10
    past_appointments: int = 20
    due_soon_days: int = 30


async def _medical_group(uow_factory: UnitOfWorkFactory, pet_id: UUID, limit: int):
    async with uow_factory() as uow:
        recent = await uow.medical_records.list_by_pet(pet_id, limit=limit)
        total = await uow.medical_records.count_by_pet(pet_id)
        weights = await uow.medical_records.list_weights_by_pet(pet_id)
        costs = await uow.medical_records.list_costs_by_pet(pet_id)
    return recent, total, weights, costs


async def _vaccination_group(uow_factory: UnitOfWorkFactory, pet_id: UUID):
    async with uow_factory() as uow:
        vaccinations = await uow.vaccinations.list_by_pet(pet_id)
        total = await uow.vaccinations.count_by_pet(pet_id)
    return vaccinations, total


async def _grooming_group(uow_factory: UnitOfWorkFactory, pet_id: UUID, limit: int):
    async with uow_factory() as uow:
        recent = await uow.grooming_records.list_by_pet(pet_id, limit=limit)
        total = await uow.grooming_records.count_by_pet(pet_id)
        costs = await uow.grooming_records.list_costs_by_pet(pet_id)
    return recent, total, costs


async def _appointment_group(
    uow_factory: UnitOfWorkFactory, pet_id: UUID, now: datetime, past_limit: int
):
    async with uow_factory() as uow:
        upcoming = await uow.appointments.list_by_pet(
            pet_id, date_from=now, load_service=True
        )
        past = await uow.appointments.list_by_pet(
            pet_id, date_before=now, descending=True, limit=past_limit, load_service=True
        )
        total = await uow.appointments.count_by_pet(pet_id)
    return upcoming, past, total


async def execute(
    uow_factory: UnitOfWorkFactory,
    principal: Principal,
    pet_id: str | UUID,
    *,
    now: datetime | None = None,
    limits: ProfileLimits | None = None,
) -> CompleteProfile:
    pet_uuid = parse_uuid(pet_id, "pet_id")
    limits = limits or ProfileLimits()
    now = now or datetime.now(timezone.utc)

    async with uow_factory() as uow:
        pet = await load_accessible_pet(uow, principal, pet_uuid, load_owner=True)

    medical, vaccination, grooming, appointment = await asyncio.gather(
        _medical_group(uow_factory, pet_uuid, limits.recent_visits),
        _vaccination_group(uow_factory, pet_uuid),
        _grooming_group(uow_factory, pet_uuid, limits.recent_sessions),
        _appointment_group(uow_factory, pet_uuid, now, limits.past_appointments),
    )
    recent_visits, total_visits, weights, medical_costs = medical
    vaccinations, total_vaccines = vaccination
    recent_sessions, total_sessions, grooming_costs = grooming
    upcoming, past, total_appointments = appointment

    views = describe_vaccinations(vaccinations, now, limits.due_soon_days)
    profile = CompleteProfile(
        pet=pet,
        medical_history=MedicalHistory(recent_visits=recent_visits, total_visits=total_visits),
        vaccinations=VaccinationHistory(
            active_vaccines=views,
            upcoming_vaccines=upcoming_vaccines(views),
            total_vaccines=total_vaccines,
        ),
        weight_history=merge_weight_history(pet, weights),
        grooming_history=GroomingHistory(
            recent_sessions=recent_sessions,
            total_sessions=total_sessions,
            last_session_date=recent_sessions[0].session_date if recent_sessions else None,
        ),
        appointments=AppointmentHistory(
            upcoming=upcoming, past=past, total_appointments=total_appointments
        ),
        summary=ProfileSummary(
            age=calculate_age(pet.birth_date, now),
            last_visit_date=recent_visits[0].visit_date if recent_visits else None,
            next_vaccination_due=next_vaccination_due(vaccinations, now),
            total_spent_medical=total_spent(medical_costs),
            total_spent_grooming=total_spent(grooming_costs),
        ),
    )
    logger.debug(
        "Assembled profile for pet %s: visits=%d vaccines=%d sessions=%d appointments=%d",
        pet_uuid,
        total_visits,
        total_vaccines,
        total_sessions,
        total_appointments,
    )
    return profile
