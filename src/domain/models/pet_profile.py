from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from src.domain.models.appointment import Appointment
from src.domain.models.grooming_record import GroomingRecord
from src.domain.models.medical_record import MedicalRecord
from src.domain.models.pet import Pet
from src.domain.models.vaccination import Vaccination
from src.domain.value_objects.vaccination_status import VaccinationStatus


class WeightSource(str, Enum):
    MEDICAL = "medical"
    MANUAL = "manual"


@dataclass(frozen=True, slots=True)
class WeightEntry:
    date: datetime
    weight: float
    source: WeightSource


@dataclass(frozen=True, slots=True)
class VaccinationView:
    vaccination: Vaccination
    status: VaccinationStatus


@dataclass(slots=True)
class MedicalHistory:
    recent_visits: list[MedicalRecord]
    total_visits: int


@dataclass(slots=True)
class VaccinationHistory:
    active_vaccines: list[VaccinationView]
    upcoming_vaccines: list[VaccinationView]
    total_vaccines: int


@dataclass(slots=True)
class GroomingHistory:
    recent_sessions: list[GroomingRecord]
    total_sessions: int
    last_session_date: date | None = None


@dataclass(slots=True)
class AppointmentHistory:
    upcoming: list[Appointment]
    past: list[Appointment]
    total_appointments: int


@dataclass(slots=True)
class ProfileSummary:
    age: float | None
    last_visit_date: date | None
    next_vaccination_due: date | None
    total_spent_medical: float
    total_spent_grooming: float


@dataclass(slots=True)
class CompleteProfile:
    pet: Pet
    medical_history: MedicalHistory
    vaccinations: VaccinationHistory
    weight_history: list[WeightEntry] = field(default_factory=list)
    grooming_history: GroomingHistory | None = None
    appointments: AppointmentHistory | None = None
    summary: ProfileSummary | None = None
