from __future__ import annotations

from fastapi import APIRouter, Depends, status

from src.application.use_cases.grooming_records import (
    create_grooming_record,
    get_grooming_record,
    get_grooming_stats,
    list_grooming_records,
    list_today_sessions,
    update_grooming_record,
)
from src.domain.value_objects.principal import Principal
from src.interfaces.http.deps import get_principal, get_uow
from src.interfaces.http.schemas.grooming_records import (
    GroomingRecordCreate,
    GroomingRecordResponse,
    GroomingRecordUpdate,
    GroomingStatsResponse,
)

router = APIRouter(prefix="/grooming-records", tags=["grooming-records"])


@router.post("", response_model=GroomingRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_grooming_record_endpoint(
    payload: GroomingRecordCreate,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    data = create_grooming_record.CreateGroomingRecordInput(**payload.model_dump())
    return await create_grooming_record.execute(uow, principal, data)


@router.get("/today", response_model=list[GroomingRecordResponse])
async def today_sessions_endpoint(
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    return await list_today_sessions.execute(uow, principal)


@router.get("/stats", response_model=GroomingStatsResponse)
async def grooming_stats_endpoint(
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    return await get_grooming_stats.execute(uow, principal)


@router.get("/pet/{pet_id}", response_model=list[GroomingRecordResponse])
async def list_grooming_records_endpoint(
    pet_id: str,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    return await list_grooming_records.execute(uow, principal, pet_id)


@router.get("/{record_id}", response_model=GroomingRecordResponse)
async def get_grooming_record_endpoint(
    record_id: str,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    return await get_grooming_record.execute(uow, principal, record_id)


@router.patch("/{record_id}", response_model=GroomingRecordResponse)
async def update_grooming_record_endpoint(
    record_id: str,
    payload: GroomingRecordUpdate,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    data = update_grooming_record.UpdateGroomingRecordInput(
        **payload.model_dump(exclude_unset=True)
    )
    return await update_grooming_record.execute(uow, principal, record_id, data)
