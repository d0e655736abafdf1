from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.exceptions import ProductNotFoundException, VarietyNotFoundException
from app.services.catalog_service import CatalogService
from app.services.session_service import StorefrontSession

from .common import (
    AddItemRequest,
    CartResponse,
    UpdateQuantityRequest,
    build_cart_response,
    get_catalog,
    get_session,
    logger,
)

router = APIRouter()


@router.get("/cart", response_model=CartResponse)
async def get_cart(session: StorefrontSession = Depends(get_session)):
    return build_cart_response(session)


@router.post("/cart/items", response_model=CartResponse)
async def add_cart_item(
    body: AddItemRequest,
    session: StorefrontSession = Depends(get_session),
    catalog: CatalogService = Depends(get_catalog),
):
    """Add a product pick to the cart at the current menu price."""
    try:
        item = catalog.build_cart_item(body.product_id, body.variety_name)
    except (ProductNotFoundException, VarietyNotFoundException) as e:
        raise HTTPException(status_code=404, detail=e.message) from e

    added = session.cart.add(item, body.quantity)
    logger.debug(
        "Session %s: %s/%s now x%s",
        session.session_id,
        added.product_id,
        added.variety_name or "-",
        added.quantity,
    )
    return build_cart_response(session)


@router.patch("/cart/items/{product_id}", response_model=CartResponse)
async def update_cart_item(
    product_id: str,
    body: UpdateQuantityRequest,
    variety_name: str = Query("", description="Variety of the line to update"),
    session: StorefrontSession = Depends(get_session),
):
    """Set a line's quantity; zero or less removes the line."""
    session.cart.update_quantity(product_id, variety_name, body.quantity)
    return build_cart_response(session)


@router.delete("/cart/items/{product_id}", response_model=CartResponse)
async def remove_cart_item(
    product_id: str,
    variety_name: str = Query("", description="Variety of the line to remove"),
    session: StorefrontSession = Depends(get_session),
):
    session.cart.remove_item(product_id, variety_name)
    return build_cart_response(session)


@router.delete("/cart", response_model=CartResponse)
async def clear_cart(session: StorefrontSession = Depends(get_session)):
    session.cart.clear()
    return build_cart_response(session)
