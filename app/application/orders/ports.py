"""
Collaborator contracts consumed by checkout.

Implementations live outside the domain (identity, order backend, UI).
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from app.core.notifications import Notification
from app.domain.entities import AuthenticatedUser, CartItem, Profile


@runtime_checkable
class IdentityProvider(Protocol):
    """Read-only view of who is signed in."""

    def current_user(self) -> AuthenticatedUser | None:
        ...

    def current_profile(self) -> Profile | None:
        ...


@runtime_checkable
class OrderCreator(Protocol):
    """Durable order backend; the returned ID is opaque."""

    async def create_order(self, user_id: str, items: Sequence[CartItem], total: int) -> str:
        ...


@runtime_checkable
class NotificationSink(Protocol):
    def notify(self, notification: Notification) -> None:
        ...


@runtime_checkable
class Navigator(Protocol):
    def navigate(self, route: str) -> None:
        ...
