from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.pets import (
    create_pet,
    delete_pet,
    get_complete_profile,
    get_pet,
    list_pets,
    update_pet,
)
from src.config.settings import Settings
from src.domain.value_objects.principal import Principal
from src.interfaces.http.deps import get_app_settings, get_principal, get_uow, get_uow_factory
from src.interfaces.http.schemas.common import MessageResponse, page_payload
from src.interfaces.http.schemas.pets import PetCreate, PetResponse, PetsListResponse, PetUpdate
from src.interfaces.http.schemas.profile import CompleteProfileResponse

router = APIRouter(prefix="/pets", tags=["pets"])


@router.post("", response_model=PetResponse, status_code=status.HTTP_201_CREATED)
async def create_pet_endpoint(
    payload: PetCreate,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    data = create_pet.CreatePetInput(**payload.model_dump())
    return await create_pet.execute(uow, principal, data)


@router.get("", response_model=PetsListResponse)
async def list_pets_endpoint(
    limit: int | None = Query(default=None),
    offset: int = Query(default=0),
    principal: Principal = Depends(get_principal),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
):
    """Active pets, newest first; non-admins only see their own."""
    page = await list_pets.execute(
        uow,
        principal,
        limit=settings.default_page_limit if limit is None else limit,
        offset=offset,
    )
    return page_payload(page)


@router.get("/{pet_id}/complete-profile", response_model=CompleteProfileResponse)
async def complete_profile_endpoint(
    pet_id: str,
    principal: Principal = Depends(get_principal),
    settings: Settings = Depends(get_app_settings),
    uow_factory=Depends(get_uow_factory),
):
    """Pet details with medical, vaccination, grooming and appointment history."""
    limits = get_complete_profile.ProfileLimits(
        recent_visits=settings.profile_recent_visits_limit,
        recent_sessions=settings.profile_recent_sessions_limit,
        past_appointments=settings.profile_past_appointments_limit,
        due_soon_days=settings.vaccination_due_soon_days,
    )
    profile = await get_complete_profile.execute(uow_factory, principal, pet_id, limits=limits)
    return CompleteProfileResponse.from_domain(profile)


@router.get("/{pet_id}", response_model=PetResponse)
async def get_pet_endpoint(
    pet_id: str,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    return await get_pet.execute(uow, principal, pet_id)


@router.patch("/{pet_id}", response_model=PetResponse)
async def update_pet_endpoint(
    pet_id: str,
    payload: PetUpdate,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    data = update_pet.UpdatePetInput(**payload.model_dump(exclude_unset=True))
    return await update_pet.execute(uow, principal, pet_id, data)


@router.delete("/{pet_id}", response_model=MessageResponse)
async def delete_pet_endpoint(
    pet_id: str,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    await delete_pet.execute(uow, principal, pet_id)
    return MessageResponse(message="Pet deleted successfully")
