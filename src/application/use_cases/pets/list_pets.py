from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import owner_scope
from src.application.validation import Page, ensure_page_window
from src.domain.models.pet import Pet
from src.domain.value_objects.principal import Principal


async def execute(
    uow: UnitOfWork,
    principal: Principal,
    *,
    limit: int = 10,
    offset: int = 0,
) -> Page[Pet]:
    ensure_page_window(limit, offset)
    owner_id = owner_scope(principal)
    items = await uow.pets.list(owner_id=owner_id, limit=limit, offset=offset)
    total = await uow.pets.count(owner_id=owner_id)
    return Page(items=items, total=total, limit=limit, offset=offset)
