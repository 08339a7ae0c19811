from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.products import (
    create_product,
    delete_product,
    get_product,
    list_products,
    update_product,
)
from src.config.settings import Settings
from src.domain.value_objects.principal import Principal
from src.domain.value_objects.product_catalog import ProductSpecies, ProductType
from src.interfaces.http.deps import get_app_settings, get_principal, get_uow
from src.interfaces.http.schemas.common import page_payload
from src.interfaces.http.schemas.products import (
    ProductCreate,
    ProductResponse,
    ProductsListResponse,
    ProductUpdate,
)

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product_endpoint(
    payload: ProductCreate,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    data = create_product.CreateProductInput(**payload.model_dump())
    return await create_product.execute(uow, principal, data)


@router.get("", response_model=ProductsListResponse)
async def list_products_endpoint(
    type: ProductType | None = Query(default=None),
    species: ProductSpecies | None = Query(default=None),
    limit: int | None = Query(default=None),
    offset: int = Query(default=0),
    _: Principal = Depends(get_principal),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
):
    page = await list_products.execute(
        uow,
        type=type,
        species=species,
        limit=settings.default_page_limit if limit is None else limit,
        offset=offset,
    )
    return page_payload(page)


@router.get("/{term}", response_model=ProductResponse)
async def get_product_endpoint(
    term: str,
    _: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    return await get_product.execute(uow, term)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product_endpoint(
    product_id: str,
    payload: ProductUpdate,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    data = update_product.UpdateProductInput(**payload.model_dump(exclude_unset=True))
    return await update_product.execute(uow, principal, product_id, data)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product_endpoint(
    product_id: str,
    principal: Principal = Depends(get_principal),
    uow=Depends(get_uow),
):
    await delete_product.execute(uow, principal, product_id)
