from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, model_serializer

from src.domain.models.pet_profile import CompleteProfile, WeightSource
from src.interfaces.http.schemas.appointments import AppointmentResponse
from src.interfaces.http.schemas.grooming_records import GroomingRecordResponse
from src.interfaces.http.schemas.medical_records import (
    MedicalRecordResponse,
    VaccinationResponse,
)
from src.interfaces.http.schemas.pets import PetResponse


class MedicalHistoryResponse(BaseModel):
    recent_visits: list[MedicalRecordResponse]
    total_visits: int


class VaccinationHistoryResponse(BaseModel):
    active_vaccines: list[VaccinationResponse]
    upcoming_vaccines: list[VaccinationResponse]
    total_vaccines: int


class WeightEntryResponse(BaseModel):
    date: datetime
    weight: float
    source: WeightSource


class GroomingHistoryResponse(BaseModel):
    recent_sessions: list[GroomingRecordResponse]
    total_sessions: int
    last_session_date: date | None = None


class AppointmentHistoryResponse(BaseModel):
    upcoming: list[AppointmentResponse]
    past: list[AppointmentResponse]
    total_appointments: int


class ProfileSummaryResponse(BaseModel):
    age: float | None = None
    last_visit_date: date | None = None
    next_vaccination_due: date | None = None
    total_spent_medical: float
    total_spent_grooming: float

    @model_serializer(mode="wrap")
    def _omit_unknown(self, handler):
        # Age and next due date are left out entirely when they cannot be derived.
        data = handler(self)
        for key in ("age", "next_vaccination_due"):
            if data.get(key) is None:
                data.pop(key, None)
        return data


class CompleteProfileResponse(BaseModel):
    pet: PetResponse
    medical_history: MedicalHistoryResponse
    vaccinations: VaccinationHistoryResponse
    weight_history: list[WeightEntryResponse]
    grooming_history: GroomingHistoryResponse
    appointments: AppointmentHistoryResponse
    summary: ProfileSummaryResponse

    @classmethod
    def from_domain(cls, profile: CompleteProfile) -> CompleteProfileResponse:
        def dump(items, schema):
            return [schema.model_validate(item) for item in items]

        vaccinations = profile.vaccinations
        grooming = profile.grooming_history
        appointments = profile.appointments
        summary = profile.summary
        return cls(
            pet=PetResponse.model_validate(profile.pet),
            medical_history=MedicalHistoryResponse(
                recent_visits=dump(profile.medical_history.recent_visits, MedicalRecordResponse),
                total_visits=profile.medical_history.total_visits,
            ),
            vaccinations=VaccinationHistoryResponse(
                active_vaccines=[
                    VaccinationResponse.from_view(v) for v in vaccinations.active_vaccines
                ],
                upcoming_vaccines=[
                    VaccinationResponse.from_view(v) for v in vaccinations.upcoming_vaccines
                ],
                total_vaccines=vaccinations.total_vaccines,
            ),
            weight_history=[
                WeightEntryResponse(date=e.date, weight=e.weight, source=e.source)
                for e in profile.weight_history
            ],
            grooming_history=GroomingHistoryResponse(
                recent_sessions=dump(grooming.recent_sessions, GroomingRecordResponse),
                total_sessions=grooming.total_sessions,
                last_session_date=grooming.last_session_date,
            ),
            appointments=AppointmentHistoryResponse(
                upcoming=dump(appointments.upcoming, AppointmentResponse),
                past=dump(appointments.past, AppointmentResponse),
                total_appointments=appointments.total_appointments,
            ),
            summary=ProfileSummaryResponse(
                age=summary.age,
                last_visit_date=summary.last_visit_date,
                next_vaccination_due=summary.next_vaccination_due,
                total_spent_medical=summary.total_spent_medical,
                total_spent_grooming=summary.total_spent_grooming,
            ),
        )
