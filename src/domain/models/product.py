from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from src.domain.value_objects.product_catalog import ProductSpecies, ProductType


def slugify(title: str) -> str:
    """'Pet Collar Premium!' -> 'pet_collar_premium'"""
    slug = title.strip().lower()
    slug = re.sub(r"\s+", "_", slug)
    slug = re.sub(r"[^\w\-]+", "", slug)
    slug = re.sub(r"__+", "_", slug)
    return slug.strip("-")


@dataclass(slots=True)
class Product:
    id: UUID
    title: str
    slug: str
    type: ProductType
    price: Decimal = Decimal("0")
    description: str | None = None
    stock: int = 0
    sizes: list[str] = field(default_factory=list)
    species: ProductSpecies | None = None
    tags: list[str] = field(default_factory=list)
    created_by_id: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        title: str,
        type: ProductType,
        price: Decimal = Decimal("0"),
        slug: str | None = None,
        description: str | None = None,
        stock: int = 0,
        sizes: list[str] | None = None,
        species: ProductSpecies | None = None,
        tags: list[str] | None = None,
        created_by_id: UUID | None = None,
    ) -> Product:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            title=title.strip(),
            slug=slugify(slug or title),
            type=type,
            price=price,
            description=description,
            stock=stock,
            sizes=list(sizes or []),
            species=species,
            tags=[tag.strip().lower() for tag in (tags or []) if tag.strip()],
            created_by_id=created_by_id,
            created_at=now,
            updated_at=now,
        )
