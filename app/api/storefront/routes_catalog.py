from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.exceptions import ProductNotFoundException
from app.services.catalog_service import ALL_CATEGORIES, CatalogService

from .common import ProductResponse, get_catalog

router = APIRouter()


@router.get("/catalog/categories", response_model=list[str])
async def get_categories(catalog: CatalogService = Depends(get_catalog)):
    return catalog.categories()


@router.get("/catalog/products", response_model=list[ProductResponse])
async def get_products(
    category: str = Query(ALL_CATEGORIES, description="Menu category, or All"),
    catalog: CatalogService = Depends(get_catalog),
):
    """List menu products, optionally filtered by category."""
    return [ProductResponse.from_product(p) for p in catalog.list_products(category)]


@router.get("/catalog/products/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, catalog: CatalogService = Depends(get_catalog)):
    try:
        product = catalog.get_product(product_id)
    except ProductNotFoundException as e:
        raise HTTPException(status_code=404, detail=e.message) from e
    return ProductResponse.from_product(product)
