from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.services import (
    create_service,
    delete_service,
    get_service,
    list_services,
    update_service,
)
from src.config.settings import Settings
from src.domain.value_objects.principal import Principal
from src.interfaces.http.deps import get_app_settings, get_principal, get_uow
from src.interfaces.http.schemas.common import page_payload
from src.interfaces.http.schemas.services import (
    ServiceCreate,
    ServiceResponse,
    ServicesListResponse,
    ServiceUpdate,
)

router = APIRouter(prefix="/services", tags=["services"])


@router.post("", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
async def create_service_endpoint(
    payload: ServiceCreate,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    data = create_service.CreateServiceInput(**payload.model_dump())
    return await create_service.execute(uow, principal, data)


@router.get("", response_model=ServicesListResponse)
async def list_services_endpoint(
    limit: int | None = Query(default=None),
    offset: int = Query(default=0),
    _: Principal = Depends(get_principal),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
):
    page = await list_services.execute(
        uow,
        limit=settings.default_page_limit if limit is None else limit,
        offset=offset,
    )
    return page_payload(page)


@router.get("/all", response_model=list[ServiceResponse])
async def list_all_services_endpoint(
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    """Every service including inactive ones (admin only)."""
    return await list_services.execute_all(uow, principal)


@router.get("/{term}", response_model=ServiceResponse)
async def get_service_endpoint(
    term: str,
    _: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    return await get_service.execute(uow, term)


@router.patch("/{service_id}", response_model=ServiceResponse)
async def update_service_endpoint(
    service_id: str,
    payload: ServiceUpdate,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    data = update_service.UpdateServiceInput(**payload.model_dump(exclude_unset=True))
    return await update_service.execute(uow, principal, service_id, data)


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service_endpoint(
    service_id: str,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    await delete_service.execute(uow, principal, service_id)
