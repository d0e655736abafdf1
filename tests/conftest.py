"""Shared pytest fixtures and collaborator doubles."""
from __future__ import annotations

import asyncio
from collections.abc import Sequence

import pytest

from app.application.orders.place_order import CheckoutCoordinator
from app.core.config import RouteConfig, Settings
from app.core.notifications import Notification
from app.domain.cart import CartStore
from app.domain.entities import AuthenticatedUser, CartItem, Profile
from app.services.catalog_service import CatalogService


def make_item(
    product_id: str = "samosa",
    variety_name: str = "",
    *,
    price: int = 15,
    name: str | None = None,
) -> CartItem:
    return CartItem(
        product_id=product_id,
        variety_name=variety_name,
        product_name=name or product_id.title(),
        image=f"/images/{product_id}.jpg",
        price=price,
    )


class DummyIdentity:
    def __init__(self, user: AuthenticatedUser | None = None, profile: Profile | None = None):
        self.user = user
        self.profile = profile

    def current_user(self) -> AuthenticatedUser | None:
        return self.user

    def current_profile(self) -> Profile | None:
        return self.profile


class DummyOrderCreator:
    """Records calls; can fail or block until released."""

    def __init__(self, order_id: str = "a1b2c3d4e5f6a7b8", error: Exception | None = None):
        self.order_id = order_id
        self.error = error
        self.calls: list[tuple[str, tuple[CartItem, ...], int]] = []
        self.started = asyncio.Event()
        self.release: asyncio.Event | None = None

    def hold(self) -> None:
        self.release = asyncio.Event()

    async def create_order(self, user_id: str, items: Sequence[CartItem], total: int) -> str:
        self.calls.append((user_id, tuple(items), total))
        self.started.set()
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        return self.order_id


class DummyNotifier:
    def __init__(self) -> None:
        self.sent: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.sent.append(notification)

    @property
    def titles(self) -> list[str]:
        return [n.title for n in self.sent]


class DummyNavigator:
    def __init__(self) -> None:
        self.routes: list[str] = []

    def navigate(self, route: str) -> None:
        self.routes.append(route)


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        storefront_name="Test Canteen",
        currency_symbol="₹",
        order_ref_length=8,
        default_quantity=1,
        log_level="DEBUG",
        environment="test",
        routes=RouteConfig(login="/login", home="/"),
    )


@pytest.fixture()
def item_factory():
    return make_item


@pytest.fixture()
def catalog() -> CatalogService:
    return CatalogService()


@pytest.fixture()
def cart() -> CartStore:
    return CartStore()


@pytest.fixture()
def signed_in() -> DummyIdentity:
    return DummyIdentity(
        AuthenticatedUser(id="user-42"),
        Profile(name="Asha Rao", branch="B.C.A", year="First"),
    )


@pytest.fixture()
def orders() -> DummyOrderCreator:
    return DummyOrderCreator()


@pytest.fixture()
def notifier() -> DummyNotifier:
    return DummyNotifier()


@pytest.fixture()
def navigator() -> DummyNavigator:
    return DummyNavigator()


@pytest.fixture()
def make_coordinator(cart, orders, notifier, navigator, signed_in):
    def _make(identity=None) -> CheckoutCoordinator:
        return CheckoutCoordinator(
            cart,
            identity=identity if identity is not None else signed_in,
            orders=orders,
            notifier=notifier,
            navigator=navigator,
        )

    return _make
