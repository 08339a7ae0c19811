"""Derived fields of the consolidated pet profile.

Everything here is computed at read time from stored data and is kept free of
I/O so the rules can be exercised directly.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal

from src.domain.models.medical_record import WeightReading
from src.domain.models.pet import Pet
from src.domain.models.pet_profile import VaccinationView, WeightEntry, WeightSource
from src.domain.models.vaccination import DUE_SOON_DAYS, Vaccination
from src.domain.value_objects.vaccination_status import VaccinationStatus

DAYS_PER_YEAR = 365.25


def as_utc_datetime(value: date | datetime) -> datetime:
    """Promote a date to midnight UTC; normalize datetimes to UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def calculate_age(birth_date: date | None, now: datetime) -> float | None:
    """Age in fractional years, rounded to one decimal."""
    if birth_date is None:
        return None
    elapsed = as_utc_datetime(now) - as_utc_datetime(birth_date)
    days = elapsed.total_seconds() / 86400
    return round(days / DAYS_PER_YEAR, 1)


def describe_vaccinations(
    vaccinations: Iterable[Vaccination],
    now: datetime,
    due_soon_days: int = DUE_SOON_DAYS,
) -> list[VaccinationView]:
    return [
        VaccinationView(vaccination=v, status=v.status_at(now, due_soon_days))
        for v in vaccinations
    ]


def upcoming_vaccines(views: Iterable[VaccinationView]) -> list[VaccinationView]:
    """Vaccines due within the due-soon window, nearest first."""
    due_soon = [view for view in views if view.status is VaccinationStatus.DUE_SOON]
    return sorted(due_soon, key=lambda view: view.vaccination.next_due_date)


def next_vaccination_due(vaccinations: Iterable[Vaccination], now: datetime) -> date | None:
    # Forward-looking only: overdue vaccines never qualify.
    today = now.date()
    candidates = [
        v.next_due_date
        for v in vaccinations
        if v.next_due_date is not None and v.next_due_date >= today
    ]
    return min(candidates) if candidates else None


def merge_weight_history(pet: Pet, readings: Iterable[WeightReading]) -> list[WeightEntry]:
    """Merge visit weights with the pet's own weight, newest first.

    Entries from both sources are kept even when they share a date.
    """
    entries = [
        WeightEntry(
            date=as_utc_datetime(reading.visit_date),
            weight=float(reading.weight),
            source=WeightSource.MEDICAL,
        )
        for reading in readings
        if reading.weight is not None
    ]
    if pet.weight is not None:
        entries.append(
            WeightEntry(
                date=as_utc_datetime(pet.updated_at),
                weight=float(pet.weight),
                source=WeightSource.MANUAL,
            )
        )
    entries.sort(key=lambda entry: entry.date, reverse=True)
    return entries


def total_spent(costs: Iterable[Decimal | float | None]) -> float:
    total = 0.0
    for cost in costs:
        if cost:
            total += float(cost)
    return round(total, 2)


def due_soon_window(now: datetime, days: int = DUE_SOON_DAYS) -> tuple[date, date]:
    today = now.date()
    return today, today + timedelta(days=days)
