from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.service import Service


async def execute(uow: UnitOfWork, term: str) -> Service:
    """Look a service up by id, falling back to a case-insensitive name match."""
    try:
        service_id = UUID(term)
    except ValueError:
        service = await uow.services.get_by_name(term)
    else:
        service = await uow.services.get(service_id)
    if service is None:
        raise NotFound(f"Service '{term}' not found")
    return service
