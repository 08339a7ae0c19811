from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.value_objects.product_catalog import ProductSpecies, ProductType
from src.infrastructure.db.base import Base
from src.infrastructure.db.types import StringList, value_enum


class ProductORM(Base):
    __tablename__ = "products"
    __table_args__ = (
        UniqueConstraint("title", name="ux_products_title"),
        UniqueConstraint("slug", name="ux_products_slug"),
        CheckConstraint("price >= 0", name="price_non_negative"),
        CheckConstraint("stock >= 0", name="stock_non_negative"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=0)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sizes: Mapped[list[str]] = mapped_column(StringList, nullable=False, default=list)
    type: Mapped[ProductType] = mapped_column(value_enum(ProductType), nullable=False)
    species: Mapped[ProductSpecies | None] = mapped_column(
        value_enum(ProductSpecies), nullable=True
    )
    tags: Mapped[list[str]] = mapped_column(StringList, nullable=False, default=list)
    created_by_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
