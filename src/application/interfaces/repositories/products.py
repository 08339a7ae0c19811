from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.product import Product
from src.domain.value_objects.product_catalog import ProductSpecies, ProductType


class ProductRepository(Protocol):
    async def add(self, product: Product) -> Product: ...

    async def get(self, product_id: UUID) -> Product | None: ...

    async def get_by_slug(self, slug: str) -> Product | None: ...

    async def list(
        self,
        *,
        type: ProductType | None = None,
        species: ProductSpecies | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Product]: ...

    async def count(
        self,
        *,
        type: ProductType | None = None,
        species: ProductSpecies | None = None,
    ) -> int: ...

    async def update(self, product_id: UUID, data: dict) -> Product | None: ...

    async def delete(self, product_id: UUID) -> bool: ...
