from __future__ import annotations

from fastapi import APIRouter

from . import routes_cart, routes_catalog, routes_checkout, routes_session
from .common import set_storefront_services

router = APIRouter(prefix="/api/v1", tags=["storefront"])

router.include_router(routes_catalog.router)
router.include_router(routes_cart.router)
router.include_router(routes_checkout.router)
router.include_router(routes_session.router)

__all__ = ["router", "set_storefront_services"]
