from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.value_objects.product_catalog import ProductSpecies, ProductType


class ProductCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    type: ProductType
    price: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2)
    slug: str | None = Field(default=None, max_length=255)
    description: str | None = None
    stock: int = 0
    sizes: list[str] = Field(default_factory=list)
    species: ProductSpecies | None = None
    tags: list[str] = Field(default_factory=list)


class ProductUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    type: ProductType | None = None
    price: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    slug: str | None = Field(default=None, max_length=255)
    description: str | None = None
    stock: int | None = None
    sizes: list[str] | None = None
    species: ProductSpecies | None = None
    tags: list[str] | None = None


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    slug: str
    type: ProductType
    price: Decimal
    description: str | None = None
    stock: int
    sizes: list[str]
    species: ProductSpecies | None = None
    tags: list[str]
    created_by_id: UUID | None = None
    created_at: datetime
    updated_at: datetime


class ProductsListResponse(BaseModel):
    items: list[ProductResponse]
    total: int
    limit: int
    offset: int
    pages: int
