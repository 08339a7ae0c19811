from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.appointments import (
    create_appointment,
    delete_appointment,
    get_appointment,
    list_appointments,
    update_appointment,
)
from src.config.settings import Settings
from src.domain.value_objects.appointment_status import AppointmentStatus
from src.domain.value_objects.principal import Principal
from src.interfaces.http.deps import get_app_settings, get_principal, get_uow
from src.interfaces.http.schemas.appointments import (
    AppointmentCreate,
    AppointmentResponse,
    AppointmentsListResponse,
    AppointmentUpdate,
)
from src.interfaces.http.schemas.common import page_payload

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment_endpoint(
    payload: AppointmentCreate,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    data = create_appointment.CreateAppointmentInput(**payload.model_dump())
    return await create_appointment.execute(uow, principal, data)


@router.get("", response_model=AppointmentsListResponse)
async def list_appointments_endpoint(
    status_filter: AppointmentStatus | None = Query(default=None, alias="status"),
    service_id: str | None = Query(default=None),
    date_from: datetime | None = Query(default=None),
    date_to: datetime | None = Query(default=None),
    limit: int | None = Query(default=None),
    offset: int = Query(default=0),
    principal: Principal = Depends(get_principal),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
):
    page = await list_appointments.execute(
        uow,
        principal,
        status=status_filter,
        service_id=service_id,
        date_from=date_from,
        date_to=date_to,
        limit=settings.default_page_limit if limit is None else limit,
        offset=offset,
    )
    return page_payload(page)


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment_endpoint(
    appointment_id: str,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    return await get_appointment.execute(uow, principal, appointment_id)


@router.patch("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment_endpoint(
    appointment_id: str,
    payload: AppointmentUpdate,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    data = update_appointment.UpdateAppointmentInput(**payload.model_dump(exclude_unset=True))
    return await update_appointment.execute(uow, principal, appointment_id, data)


@router.delete("/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_appointment_endpoint(
    appointment_id: str,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    await delete_appointment.execute(uow, principal, appointment_id)
