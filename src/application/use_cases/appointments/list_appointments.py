from __future__ import annotations

from datetime import datetime
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import owner_scope
from src.application.validation import Page, ensure_page_window, parse_uuid
from src.domain.models.appointment import Appointment
from src.domain.value_objects.appointment_status import AppointmentStatus
from src.domain.value_objects.principal import Principal


async def execute(
    uow: UnitOfWork,
    principal: Principal,
    *,
    status: AppointmentStatus | None = None,
    service_id: str | UUID | None = None,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
    limit: int = 10,
    offset: int = 0,
) -> Page[Appointment]:
    ensure_page_window(limit, offset)
    items, total = await uow.appointments.list(
        customer_id=owner_scope(principal),
        status=status,
        service_id=parse_uuid(service_id, "service_id") if service_id else None,
        date_from=date_from,
        date_to=date_to,
        limit=limit,
        offset=offset,
    )
    return Page(items=items, total=total, limit=limit, offset=offset)
