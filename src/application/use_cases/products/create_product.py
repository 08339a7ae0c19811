from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.policies.ownership import ensure_admin
from src.application.validation import ensure_non_negative
from src.domain.models.product import Product
from src.domain.value_objects.principal import Principal
from src.domain.value_objects.product_catalog import ProductSpecies, ProductType


@dataclass(slots=True)
class CreateProductInput:
    title: str
    type: ProductType
    price: Decimal = Decimal("0")
    slug: str | None = None
    description: str | None = None
    stock: int = 0
    sizes: list[str] = field(default_factory=list)
    species: ProductSpecies | None = None
    tags: list[str] = field(default_factory=list)


async def execute(uow: UnitOfWork, principal: Principal, payload: CreateProductInput) -> Product:
    ensure_admin(principal, "create products")
    ensure_non_negative(payload.price, "price")
    ensure_non_negative(payload.stock, "stock")
    product = Product.create(
        title=payload.title,
        type=payload.type,
        price=payload.price,
        slug=payload.slug,
        description=payload.description,
        stock=payload.stock,
        sizes=payload.sizes,
        species=payload.species,
        tags=payload.tags,
        created_by_id=principal.user_id,
    )
    if not product.slug:
        raise ValidationError("title must contain at least one letter or digit")
    created = await uow.products.add(product)
    await uow.commit()
    return created
