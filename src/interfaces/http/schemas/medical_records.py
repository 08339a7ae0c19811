from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.pet_profile import VaccinationView
from src.domain.value_objects.vaccination_status import VaccinationStatus
from src.domain.value_objects.visit_type import VisitType


class MedicalRecordCreate(BaseModel):
    pet_id: str
    visit_date: date
    visit_type: VisitType
    reason: str = Field(min_length=1)
    diagnosis: str | None = None
    treatment: str | None = None
    notes: str | None = None
    prescriptions: list[str] = Field(default_factory=list)
    follow_up_date: date | None = None
    weight_at_visit: Decimal | None = Field(default=None, max_digits=5, decimal_places=2)
    temperature: Decimal | None = Field(default=None, max_digits=4, decimal_places=1)
    service_cost: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)


class MedicalRecordUpdate(BaseModel):
    visit_date: date | None = None
    visit_type: VisitType | None = None
    reason: str | None = Field(default=None, min_length=1)
    diagnosis: str | None = None
    treatment: str | None = None
    notes: str | None = None
    prescriptions: list[str] | None = None
    follow_up_date: date | None = None
    weight_at_visit: Decimal | None = Field(default=None, max_digits=5, decimal_places=2)
    temperature: Decimal | None = Field(default=None, max_digits=4, decimal_places=1)
    service_cost: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)


class MedicalRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    pet_id: UUID
    veterinarian_id: UUID | None = None
    visit_date: date
    visit_type: VisitType
    reason: str
    diagnosis: str | None = None
    treatment: str | None = None
    notes: str | None = None
    prescriptions: list[str]
    follow_up_date: date | None = None
    weight_at_visit: Decimal | None = None
    temperature: Decimal | None = None
    service_cost: Decimal | None = None
    created_at: datetime
    updated_at: datetime


class VaccinationCreate(BaseModel):
    pet_id: str
    vaccine_name: str = Field(min_length=1, max_length=100)
    administered_date: date
    next_due_date: date | None = None
    batch_number: str | None = Field(default=None, max_length=50)
    notes: str | None = None


class VaccinationUpdate(BaseModel):
    vaccine_name: str | None = Field(default=None, min_length=1, max_length=100)
    administered_date: date | None = None
    next_due_date: date | None = None
    batch_number: str | None = Field(default=None, max_length=50)
    notes: str | None = None


class VaccinationResponse(BaseModel):
    id: UUID
    pet_id: UUID
    veterinarian_id: UUID | None = None
    vaccine_name: str
    administered_date: date
    next_due_date: date | None = None
    batch_number: str | None = None
    notes: str | None = None
    status: VaccinationStatus | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_view(cls, view: VaccinationView) -> VaccinationResponse:
        v = view.vaccination
        return cls(
            id=v.id,
            pet_id=v.pet_id,
            veterinarian_id=v.veterinarian_id,
            vaccine_name=v.vaccine_name,
            administered_date=v.administered_date,
            next_due_date=v.next_due_date,
            batch_number=v.batch_number,
            notes=v.notes,
            status=view.status,
            created_at=v.created_at,
            updated_at=v.updated_at,
        )
