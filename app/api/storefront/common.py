from __future__ import annotations

import logging

from fastapi import Depends, Header, HTTPException
from pydantic import BaseModel

from app.core.notifications import Notification
from app.domain.cart import CartStore
from app.domain.entities import CartItem, Product
from app.services.catalog_service import CatalogService
from app.services.session_service import SessionRegistry, StorefrontSession

logger = logging.getLogger(__name__)

_registry: SessionRegistry | None = None
_catalog: CatalogService | None = None


def set_storefront_services(registry: SessionRegistry, catalog: CatalogService) -> None:
    global _registry, _catalog
    _registry = registry
    _catalog = catalog


def get_registry() -> SessionRegistry:
    if _registry is None:
        raise HTTPException(status_code=503, detail="Storefront is not initialized")
    return _registry


def get_catalog() -> CatalogService:
    if _catalog is None:
        raise HTTPException(status_code=503, detail="Catalog is not initialized")
    return _catalog


def get_session(
    x_session_id: str | None = Header(None),
    registry: SessionRegistry = Depends(get_registry),
) -> StorefrontSession:
    """Session named by the X-Session-Id header, issued by ``POST /session``."""
    if not x_session_id:
        raise HTTPException(status_code=400, detail="X-Session-Id header is required")
    return registry.get(x_session_id)


# =============================================================================
# Pydantic Models
# =============================================================================


class VarietyResponse(BaseModel):
    name: str
    price: int


class ProductResponse(BaseModel):
    id: str
    name: str
    category: str
    image: str
    description: str | None = None
    starting_price: int
    varieties: list[VarietyResponse]

    @classmethod
    def from_product(cls, product: Product) -> ProductResponse:
        return cls(
            id=product.id,
            name=product.name,
            category=product.category,
            image=product.image,
            description=product.description,
            starting_price=product.starting_price,
            varieties=[VarietyResponse(name=v.name, price=v.price) for v in product.varieties],
        )


class NotificationResponse(BaseModel):
    title: str
    description: str
    severity: str
    created_at: str

    @classmethod
    def from_notification(cls, notification: Notification) -> NotificationResponse:
        return cls(**notification.to_dict())


class CartItemResponse(BaseModel):
    product_id: str
    variety_name: str
    product_name: str
    image: str
    price: int
    quantity: int
    line_total: int

    @classmethod
    def from_item(cls, item: CartItem) -> CartItemResponse:
        return cls(**item.to_dict(), line_total=item.line_total)


class CartResponse(BaseModel):
    session_id: str
    items: list[CartItemResponse]
    total: int
    items_count: int
    units_count: int
    is_submitting: bool = False


class AddItemRequest(BaseModel):
    product_id: str
    variety_name: str = ""
    # Raw UI input; the cart decides what counts as a valid quantity
    quantity: int | float | str | None = 1


class UpdateQuantityRequest(BaseModel):
    quantity: int | float | str | None


class CheckoutResponse(BaseModel):
    ok: bool
    error_key: str | None = None
    order_id: str | None = None
    order_ref: str | None = None
    total: int | None = None
    redirect: str | None = None
    notifications: list[NotificationResponse] = []


def build_cart_response(session: StorefrontSession) -> CartResponse:
    cart: CartStore = session.cart
    return CartResponse(
        session_id=session.session_id,
        items=[CartItemResponse.from_item(item) for item in cart.items()],
        total=cart.get_total(),
        items_count=cart.count(),
        units_count=cart.unit_count(),
        is_submitting=session.checkout.is_submitting,
    )


def drain_notifications(session: StorefrontSession) -> list[NotificationResponse]:
    return [NotificationResponse.from_notification(n) for n in session.notifier.drain()]
