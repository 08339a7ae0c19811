from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.products import ProductRepository
from src.domain.models.product import Product
from src.domain.value_objects.product_catalog import ProductSpecies, ProductType
from src.infrastructure.db.errors import translate_integrity_error
from src.infrastructure.db.orm.product import ProductORM
from src.utils.datetime_tz import to_utc, utcnow

_TITLE_TAKEN = {"duplicate_value": "A product with that title or slug already exists"}


class ProductsSQLAlchemyRepository(ProductRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ProductORM) -> Product:
        return Product(
            id=orm.id,
            title=orm.title,
            slug=orm.slug,
            type=orm.type,
            price=orm.price,
            description=orm.description,
            stock=orm.stock,
            sizes=list(orm.sizes or []),
            species=orm.species,
            tags=list(orm.tags or []),
            created_by_id=orm.created_by_id,
            created_at=to_utc(orm.created_at),
            updated_at=to_utc(orm.updated_at),
        )

    @staticmethod
    def _filters(type: ProductType | None, species: ProductSpecies | None) -> list:
        filters = []
        if type is not None:
            filters.append(ProductORM.type == type)
        if species is not None:
            filters.append(ProductORM.species == species)
        return filters

    async def add(self, product: Product) -> Product:
        orm = ProductORM(
            id=product.id,
            title=product.title,
            slug=product.slug,
            description=product.description,
            price=product.price,
            stock=product.stock,
            sizes=product.sizes,
            type=product.type,
            species=product.species,
            tags=product.tags,
            created_by_id=product.created_by_id,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc, resource="product", messages=_TITLE_TAKEN) from exc
        return self._to_domain(orm)

    async def get(self, product_id: UUID) -> Product | None:
        result = await self.session.execute(select(ProductORM).where(ProductORM.id == product_id))
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_by_slug(self, slug: str) -> Product | None:
        stmt = select(ProductORM).where(ProductORM.slug == slug.strip().lower())
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        type: ProductType | None = None,
        species: ProductSpecies | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Product]:
        stmt = (
            select(ProductORM)
            .where(*self._filters(type, species))
            .order_by(ProductORM.title)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count(
        self,
        *,
        type: ProductType | None = None,
        species: ProductSpecies | None = None,
    ) -> int:
        stmt = select(func.count(ProductORM.id)).where(*self._filters(type, species))
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)

    async def update(self, product_id: UUID, data: dict) -> Product | None:
        values = {**data, "updated_at": utcnow()}
        stmt = (
            update(ProductORM)
            .where(ProductORM.id == product_id)
            .values(**values)
            .returning(ProductORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise translate_integrity_error(exc, resource="product", messages=_TITLE_TAKEN) from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def delete(self, product_id: UUID) -> bool:
        stmt = delete(ProductORM).where(ProductORM.id == product_id).returning(ProductORM.id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
