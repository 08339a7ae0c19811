from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.validation import Page, ensure_page_window
from src.domain.models.product import Product
from src.domain.value_objects.product_catalog import ProductSpecies, ProductType


async def execute(
    uow: UnitOfWork,
    *,
    type: ProductType | None = None,
    species: ProductSpecies | None = None,
    limit: int = 10,
    offset: int = 0,
) -> Page[Product]:
    ensure_page_window(limit, offset)
    items = await uow.products.list(type=type, species=species, limit=limit, offset=offset)
    total = await uow.products.count(type=type, species=species)
    return Page(items=items, total=total, limit=limit, offset=offset)
