from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import ensure_admin
from src.application.validation import ensure_non_negative, parse_uuid
from src.domain.models.product import Product, slugify
from src.domain.value_objects.principal import Principal
from src.domain.value_objects.product_catalog import ProductSpecies, ProductType


@dataclass(slots=True)
class UpdateProductInput:
    title: str | None = None
    slug: str | None = None
    type: ProductType | None = None
    price: Decimal | None = None
    description: str | None = None
    stock: int | None = None
    sizes: list[str] | None = None
    species: ProductSpecies | None = None
    tags: list[str] | None = None


async def execute(
    uow: UnitOfWork,
    principal: Principal,
    product_id: str | UUID,
    payload: UpdateProductInput,
) -> Product:
    ensure_admin(principal, "update products")
    product_uuid = parse_uuid(product_id, "product_id")
    ensure_non_negative(payload.price, "price")
    ensure_non_negative(payload.stock, "stock")
    existing = await uow.products.get(product_uuid)
    if existing is None:
        raise NotFound("Product not found")
    data = {
        f.name: getattr(payload, f.name)
        for f in fields(payload)
        if getattr(payload, f.name) is not None
    }
    if "title" in data:
        data["title"] = data["title"].strip()
    # Slug is re-derived from whichever of slug/title was supplied
    if "slug" in data or "title" in data:
        data["slug"] = slugify(data.get("slug") or data["title"])
    if "tags" in data:
        data["tags"] = [tag.strip().lower() for tag in data["tags"] if tag.strip()]
    if not data:
        return existing
    updated = await uow.products.update(product_uuid, data)
    if updated is None:
        raise NotFound("Product not found")
    await uow.commit()
    return updated
