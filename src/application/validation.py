from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Generic, TypeVar
from uuid import UUID

from src.application.errors import ValidationError

T = TypeVar("T")

MAX_PAGE_LIMIT = 100


def parse_uuid(value: str | UUID, field_name: str = "id") -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name} '{value}' is not a valid UUID") from exc


def ensure_page_window(limit: int, offset: int) -> None:
    if limit <= 0 or limit > MAX_PAGE_LIMIT:
        raise ValidationError(f"limit must be between 1 and {MAX_PAGE_LIMIT}")
    if offset < 0:
        raise ValidationError("offset cannot be negative")


def ensure_future(moment: datetime, field_name: str = "date") -> datetime:
    if moment.tzinfo is None or moment.tzinfo.utcoffset(moment) is None:
        moment = moment.replace(tzinfo=timezone.utc)
    if moment <= datetime.now(timezone.utc):
        raise ValidationError(f"{field_name} must be in the future")
    return moment


def ensure_not_future(day: date, field_name: str = "date") -> None:
    if day > datetime.now(timezone.utc).date():
        raise ValidationError(f"{field_name} cannot be in the future")


def ensure_non_negative(value, field_name: str) -> None:
    if value is not None and value < 0:
        raise ValidationError(f"{field_name} cannot be negative")


@dataclass(slots=True)
class Page(Generic[T]):
    items: list[T]
    total: int
    limit: int
    offset: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0
