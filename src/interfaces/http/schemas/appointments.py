from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from src.domain.value_objects.appointment_status import AppointmentStatus


def _as_utc(v: datetime | None) -> datetime | None:
    if v is None:
        return None
    if v.tzinfo is None or v.tzinfo.utcoffset(v) is None:
        return v.replace(tzinfo=timezone.utc)
    return v.astimezone(timezone.utc)


class AppointmentCreate(BaseModel):
    pet_id: str
    service_id: str
    date: datetime
    notes: str | None = None

    @field_validator("date")
    def ensure_aware_utc(cls, v: datetime) -> datetime:
        """Naive datetimes are taken as UTC."""
        return _as_utc(v)


class AppointmentUpdate(BaseModel):
    pet_id: str | None = None
    service_id: str | None = None
    date: datetime | None = None
    status: AppointmentStatus | None = None
    notes: str | None = None

    @field_validator("date")
    def ensure_aware_utc(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)


class AppointmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    pet_id: UUID
    service_id: UUID
    service_name: str | None = None
    customer_id: UUID
    date: datetime
    status: AppointmentStatus
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class AppointmentsListResponse(BaseModel):
    items: list[AppointmentResponse]
    total: int
    limit: int
    offset: int
    pages: int
