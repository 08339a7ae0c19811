from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import ensure_admin
from src.application.validation import Page, ensure_page_window
from src.domain.models.service import Service
from src.domain.value_objects.principal import Principal


async def execute(uow: UnitOfWork, *, limit: int = 10, offset: int = 0) -> Page[Service]:
    """Active services, visible to every authenticated principal."""
    ensure_page_window(limit, offset)
    items = await uow.services.list(active_only=True, limit=limit, offset=offset)
    total = await uow.services.count(active_only=True)
    return Page(items=items, total=total, limit=limit, offset=offset)


async def execute_all(uow: UnitOfWork, principal: Principal) -> list[Service]:
    ensure_admin(principal, "list inactive services")
    return await uow.services.list(active_only=False)
