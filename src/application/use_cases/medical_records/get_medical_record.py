from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.pet_access import load_accessible_pet
from src.application.validation import parse_uuid
from src.domain.models.medical_record import MedicalRecord
from src.domain.value_objects.principal import Principal


async def execute(
    uow: UnitOfWork, principal: Principal, record_id: str | UUID
) -> MedicalRecord:
    record = await uow.medical_records.get(parse_uuid(record_id, "record_id"))
    if record is None:
        raise NotFound("Medical record not found")
    # Records outlive a soft-deleted pet
    await load_accessible_pet(
        uow, principal, record.pet_id, resource="medical record", include_inactive=True
    )
    return record
