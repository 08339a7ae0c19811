from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.product import Product


async def execute(uow: UnitOfWork, term: str) -> Product:
    """Look a product up by id or by slug."""
    try:
        product_id = UUID(term)
    except ValueError:
        product = await uow.products.get_by_slug(term)
    else:
        product = await uow.products.get(product_id)
    if product is None:
        raise NotFound(f"Product '{term}' not found")
    return product
