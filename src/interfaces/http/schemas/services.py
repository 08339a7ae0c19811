from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.value_objects.service_type import ServiceType


class ServiceCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    price: Decimal = Field(max_digits=10, decimal_places=2)
    duration_minutes: int
    type: ServiceType
    image: str | None = None
    is_active: bool = True


class ServiceUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    price: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    duration_minutes: int | None = None
    type: ServiceType | None = None
    image: str | None = None
    is_active: bool | None = None


class ServiceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str
    price: Decimal
    duration_minutes: int
    type: ServiceType
    image: str | None = None
    is_active: bool
    created_by_id: UUID | None = None
    created_at: datetime
    updated_at: datetime


class ServicesListResponse(BaseModel):
    items: list[ServiceResponse]
    total: int
    limit: int
    offset: int
    pages: int
