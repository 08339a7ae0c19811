from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.use_cases.grooming_records import get_grooming_stats
from src.application.use_cases.products import create_product, get_product, update_product
from src.application.use_cases.services import create_service, get_service
from src.domain.models.product import Product
from src.domain.value_objects.principal import Principal
from src.domain.value_objects.product_catalog import ProductType
from src.domain.value_objects.role import Role
from src.domain.value_objects.service_type import ServiceType

ADMIN = Principal(user_id=uuid4(), roles=frozenset({Role.ADMIN}))
USER = Principal(user_id=uuid4())


class StubCatalogRepo:
    def __init__(self) -> None:
        self.items: dict = {}
        self.lookups: list = []
        self.updated_with = None

    async def add(self, item):
        self.items[item.id] = item
        return item

    async def get(self, item_id):
        self.lookups.append(("id", item_id))
        return self.items.get(item_id)

    async def get_by_name(self, name):
        self.lookups.append(("name", name))
        return next((i for i in self.items.values() if i.name.lower() == name.lower()), None)

    async def get_by_slug(self, slug):
        self.lookups.append(("slug", slug))
        return next((i for i in self.items.values() if i.slug == slug), None)

    async def update(self, item_id, data):
        self.updated_with = data
        item = self.items[item_id]
        for key, value in data.items():
            setattr(item, key, value)
        return item


def make_uow(**repos):
    async def commit():
        return None

    return SimpleNamespace(commit=commit, **repos)


def _service_input(**overrides):
    values = dict(
        name="Bath",
        description="Full bath",
        price=Decimal("20"),
        duration_minutes=45,
        type=ServiceType.GROOMING,
    )
    values.update(overrides)
    return create_service.CreateServiceInput(**values)


@pytest.mark.asyncio
async def test_create_service_requires_admin():
    repo = StubCatalogRepo()
    with pytest.raises(PermissionDenied):
        await create_service.execute(make_uow(services=repo), USER, _service_input())
    assert repo.items == {}


@pytest.mark.asyncio
async def test_create_service_validates_price_and_duration():
    uow = make_uow(services=StubCatalogRepo())
    with pytest.raises(ValidationError):
        await create_service.execute(uow, ADMIN, _service_input(price=Decimal("-5")))
    with pytest.raises(ValidationError):
        await create_service.execute(uow, ADMIN, _service_input(duration_minutes=0))


@pytest.mark.asyncio
async def test_get_service_by_id_or_name():
    repo = StubCatalogRepo()
    uow = make_uow(services=repo)
    created = await create_service.execute(uow, ADMIN, _service_input())
    assert created.created_by_id == ADMIN.user_id

    by_id = await get_service.execute(uow, str(created.id))
    by_name = await get_service.execute(uow, "bath")

    assert by_id is created and by_name is created
    assert repo.lookups == [("id", created.id), ("name", "bath")]
    with pytest.raises(NotFound):
        await get_service.execute(uow, "Nail trim")


@pytest.mark.asyncio
async def test_create_product_derives_slug():
    uow = make_uow(products=StubCatalogRepo())
    product = await create_product.execute(
        uow,
        ADMIN,
        create_product.CreateProductInput(
            title="Pet Collar Premium!", type=ProductType.ACCESSORIES
        ),
    )
    assert product.slug == "pet_collar_premium"

    found = await get_product.execute(uow, "pet_collar_premium")
    assert found is product


@pytest.mark.asyncio
async def test_create_product_without_usable_title_is_rejected():
    uow = make_uow(products=StubCatalogRepo())
    with pytest.raises(ValidationError):
        await create_product.execute(
            uow, ADMIN, create_product.CreateProductInput(title="!!!", type=ProductType.TOYS)
        )


@pytest.mark.asyncio
async def test_update_product_reslugs_title_and_normalizes_tags():
    repo = StubCatalogRepo()
    product = Product.create(title="Old Name", type=ProductType.TOYS)
    repo.items[product.id] = product

    updated = await update_product.execute(
        make_uow(products=repo),
        ADMIN,
        str(product.id),
        update_product.UpdateProductInput(title=" Squeaky Bone ", tags=[" Dog ", "", "Toy"]),
    )

    assert repo.updated_with == {
        "title": "Squeaky Bone",
        "slug": "squeaky_bone",
        "tags": ["dog", "toy"],
    }
    assert updated.slug == "squeaky_bone"


@pytest.mark.asyncio
async def test_update_product_requires_admin():
    with pytest.raises(PermissionDenied):
        await update_product.execute(
            make_uow(products=StubCatalogRepo()),
            USER,
            str(uuid4()),
            update_product.UpdateProductInput(stock=3),
        )


class StubGroomingRepo:
    def __init__(self) -> None:
        self.windows: list = []

    async def count_between(self, *, start=None, end=None, owner_id=None):
        self.windows.append((start, end, owner_id))
        if start is None:
            return 12
        return 1 if start == end else 4

    async def totals(self, *, owner_id=None):
        return Decimal("345.678"), 52.24


@pytest.mark.asyncio
async def test_grooming_stats_rounds_and_windows_by_month():
    repo = StubGroomingRepo()
    stats = await get_grooming_stats.execute(
        make_uow(grooming_records=repo),
        USER,
        now=datetime(2024, 2, 14, 9, 0, tzinfo=timezone.utc),
    )

    assert stats.total_sessions == 12
    assert stats.total_revenue == 345.68
    assert stats.average_duration_minutes == 52.2
    assert stats.sessions_today == 1
    assert stats.sessions_this_month == 4
    assert (date(2024, 2, 1), date(2024, 2, 29), USER.user_id) in repo.windows
    assert all(owner == USER.user_id for _, _, owner in repo.windows)


@pytest.mark.asyncio
async def test_grooming_stats_for_admin_cover_everything():
    repo = StubGroomingRepo()

    async def empty_totals(*, owner_id=None):
        return None, None

    repo.totals = empty_totals
    stats = await get_grooming_stats.execute(make_uow(grooming_records=repo), ADMIN)

    assert stats.total_revenue == 0.0
    assert stats.average_duration_minutes == 0.0
    assert all(owner is None for _, _, owner in repo.windows)
