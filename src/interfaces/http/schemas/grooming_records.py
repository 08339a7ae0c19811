from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class GroomingRecordCreate(BaseModel):
    pet_id: str
    session_date: date
    services_performed: list[str] = Field(min_length=1)
    products_used: list[str] = Field(default_factory=list)
    hair_style: str | None = Field(default=None, max_length=255)
    skin_condition: str | None = None
    coat_condition: str | None = None
    behavior_during_session: str | None = None
    observations: str | None = None
    recommendations: str | None = None
    duration_minutes: int | None = None
    service_cost: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)


class GroomingRecordUpdate(BaseModel):
    session_date: date | None = None
    services_performed: list[str] | None = None
    products_used: list[str] | None = None
    hair_style: str | None = Field(default=None, max_length=255)
    skin_condition: str | None = None
    coat_condition: str | None = None
    behavior_during_session: str | None = None
    observations: str | None = None
    recommendations: str | None = None
    duration_minutes: int | None = None
    service_cost: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)


class GroomingRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    pet_id: UUID
    groomer_id: UUID | None = None
    session_date: date
    services_performed: list[str]
    products_used: list[str]
    hair_style: str | None = None
    skin_condition: str | None = None
    coat_condition: str | None = None
    behavior_during_session: str | None = None
    observations: str | None = None
    recommendations: str | None = None
    duration_minutes: int | None = None
    service_cost: Decimal | None = None
    created_at: datetime
    updated_at: datetime


class GroomingStatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_sessions: int
    total_revenue: float
    average_duration_minutes: float
    sessions_today: int
    sessions_this_month: int
