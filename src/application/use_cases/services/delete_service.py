from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import ensure_admin
from src.application.validation import parse_uuid
from src.domain.value_objects.principal import Principal


async def execute(uow: UnitOfWork, principal: Principal, service_id: str | UUID) -> None:
    ensure_admin(principal, "delete services")
    deleted = await uow.services.delete(parse_uuid(service_id, "service_id"))
    if not deleted:
        raise NotFound("Service not found")
    await uow.commit()
