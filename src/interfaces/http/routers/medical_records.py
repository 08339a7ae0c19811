from __future__ import annotations

from fastapi import APIRouter, Depends, status

from src.application.use_cases.medical_records import (
    create_medical_record,
    get_medical_record,
    list_medical_records,
    update_medical_record,
)
from src.application.use_cases.vaccinations import (
    create_vaccination,
    list_upcoming_vaccinations,
    list_vaccinations,
    update_vaccination,
)
from src.config.settings import Settings
from src.domain.value_objects.principal import Principal
from src.interfaces.http.deps import get_app_settings, get_principal, get_uow
from src.interfaces.http.schemas.medical_records import (
    MedicalRecordCreate,
    MedicalRecordResponse,
    MedicalRecordUpdate,
    VaccinationCreate,
    VaccinationResponse,
    VaccinationUpdate,
)

router = APIRouter(prefix="/medical-records", tags=["medical-records"])


@router.post("", response_model=MedicalRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_medical_record_endpoint(
    payload: MedicalRecordCreate,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    data = create_medical_record.CreateMedicalRecordInput(**payload.model_dump())
    return await create_medical_record.execute(uow, principal, data)


@router.post(
    "/vaccinations", response_model=VaccinationResponse, status_code=status.HTTP_201_CREATED
)
async def create_vaccination_endpoint(
    payload: VaccinationCreate,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    data = create_vaccination.CreateVaccinationInput(**payload.model_dump())
    vaccination = await create_vaccination.execute(uow, principal, data)
    return VaccinationResponse.model_validate(vaccination, from_attributes=True)


@router.get("/vaccinations/due", response_model=list[VaccinationResponse])
async def upcoming_vaccinations_endpoint(
    principal: Principal = Depends(get_principal),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
):
    """Vaccines falling due soon across the caller's pets (all pets for admins)."""
    views = await list_upcoming_vaccinations.execute(
        uow, principal, due_soon_days=settings.vaccination_due_soon_days
    )
    return [VaccinationResponse.from_view(view) for view in views]


@router.get("/vaccinations/pet/{pet_id}", response_model=list[VaccinationResponse])
async def list_vaccinations_endpoint(
    pet_id: str,
    principal: Principal = Depends(get_principal),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
):
    views = await list_vaccinations.execute(
        uow, principal, pet_id, due_soon_days=settings.vaccination_due_soon_days
    )
    return [VaccinationResponse.from_view(view) for view in views]


@router.patch("/vaccinations/{vaccination_id}", response_model=VaccinationResponse)
async def update_vaccination_endpoint(
    vaccination_id: str,
    payload: VaccinationUpdate,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    data = update_vaccination.UpdateVaccinationInput(**payload.model_dump(exclude_unset=True))
    vaccination = await update_vaccination.execute(uow, principal, vaccination_id, data)
    return VaccinationResponse.model_validate(vaccination, from_attributes=True)


@router.get("/pet/{pet_id}", response_model=list[MedicalRecordResponse])
async def list_medical_records_endpoint(
    pet_id: str,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    return await list_medical_records.execute(uow, principal, pet_id)


@router.get("/{record_id}", response_model=MedicalRecordResponse)
async def get_medical_record_endpoint(
    record_id: str,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    return await get_medical_record.execute(uow, principal, record_id)


@router.patch("/{record_id}", response_model=MedicalRecordResponse)
async def update_medical_record_endpoint(
    record_id: str,
    payload: MedicalRecordUpdate,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    data = update_medical_record.UpdateMedicalRecordInput(
        **payload.model_dump(exclude_unset=True)
    )
    return await update_medical_record.execute(uow, principal, record_id, data)
