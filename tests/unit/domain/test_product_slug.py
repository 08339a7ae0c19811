from __future__ import annotations

from decimal import Decimal

from src.domain.models.product import Product, slugify
from src.domain.value_objects.product_catalog import ProductType


def test_slugify_lowercases_and_joins_words():
    assert slugify("Pet Collar Premium!") == "pet_collar_premium"
    assert slugify("  Croquetas   Adulto  ") == "croquetas_adulto"
    assert slugify("Shampoo & Conditioner") == "shampoo_conditioner"


def test_product_create_derives_slug_from_title():
    product = Product.create(title="Chew Toy XL", type=ProductType.TOYS, price=Decimal("4.99"))
    assert product.slug == "chew_toy_xl"


def test_product_create_prefers_explicit_slug_and_normalizes_tags():
    product = Product.create(
        title="Chew Toy XL",
        type=ProductType.TOYS,
        slug="Big Chew",
        tags=[" Dogs ", "", "Rubber"],
    )
    assert product.slug == "big_chew"
    assert product.tags == ["dogs", "rubber"]
