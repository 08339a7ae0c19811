from __future__ import annotations

from enum import Enum


class ProductType(str, Enum):
    DRY_FOOD = "alimento-seco"
    WET_FOOD = "alimento-humedo"
    SNACKS = "snacks"
    ACCESSORIES = "accesorios"
    TOYS = "juguetes"
    HYGIENE = "higiene"


class ProductSpecies(str, Enum):
    CATS = "cats"
    DOGS = "dogs"
