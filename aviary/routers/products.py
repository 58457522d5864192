"""Product catalog router — public reads, admin-only writes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from aviary.core.response import DataResponse, ListResponse, paginated
from aviary.db.base import get_db
from aviary.dependencies import catalog_query, get_current_admin
from aviary.schemas.admin import AdminSession
from aviary.schemas.product import ProductCreate, ProductOut, ProductUpdate
from aviary.services.catalog_query import QuerySpec
from aviary.services.product import ProductService, product_catalog

router = APIRouter(prefix="/api/products", tags=["Products"])


def _svc(session: AsyncSession) -> ProductService:
    return ProductService(session)


@router.get("", response_model=ListResponse[ProductOut])
async def list_products(
    query: QuerySpec = Depends(catalog_query(product_catalog)),
    session: AsyncSession = Depends(get_db),
):
    result = await _svc(session).list_products(query)
    return paginated(result, ProductOut)


@router.get("/{product_id}", response_model=DataResponse[ProductOut])
async def get_product(
    product_id: str,
    session: AsyncSession = Depends(get_db),
):
    product = await _svc(session).get_product(product_id)
    return {"data": ProductOut.model_validate(product)}


@router.post("", response_model=DataResponse[ProductOut], status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductCreate,
    session: AsyncSession = Depends(get_db),
    admin: AdminSession = Depends(get_current_admin),
):
    product = await _svc(session).create_product(body)
    return {"data": ProductOut.model_validate(product)}


@router.put("/{product_id}", response_model=DataResponse[ProductOut])
async def update_product(
    product_id: str,
    body: ProductUpdate,
    session: AsyncSession = Depends(get_db),
    admin: AdminSession = Depends(get_current_admin),
):
    product = await _svc(session).update_product(product_id, body)
    return {"data": ProductOut.model_validate(product)}


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    session: AsyncSession = Depends(get_db),
    admin: AdminSession = Depends(get_current_admin),
):
    await _svc(session).delete_product(product_id)
