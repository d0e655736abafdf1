"""
User-facing notifications for cart and checkout feedback.

Supports:
- Notification payloads with title, description and severity
- Message builders for the checkout outcomes
- An in-memory sink that keeps notifications until they are drained
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from app.core.order_math import format_price, short_order_ref
from app.domain.value_objects import Severity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    """Notification payload."""

    title: str
    description: str
    severity: Severity = Severity.INFO
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC), compare=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "title": self.title,
            "description": self.description,
            "severity": self.severity.value,
            "created_at": self.created_at.isoformat(),
        }


# =============================================================================
# Message builders
# =============================================================================


def login_required() -> Notification:
    return Notification(
        title="Please log in",
        description="You need to be logged in to place an order",
        severity=Severity.ERROR,
    )


def cart_empty() -> Notification:
    return Notification(
        title="Cart is empty",
        description="Please add items to your cart before placing an order",
        severity=Severity.ERROR,
    )


def order_placed(
    order_id: object,
    total: int,
    *,
    currency_symbol: str = "₹",
    ref_length: int = 8,
) -> Notification:
    ref = short_order_ref(order_id, ref_length)
    return Notification(
        title="Order placed successfully! 🎉",
        description=(
            f"Your order #{ref} has been placed. "
            f"Total: {format_price(total, currency_symbol)}"
        ),
        severity=Severity.SUCCESS,
    )


def order_failed() -> Notification:
    return Notification(
        title="Order Failed",
        description="There was an error placing your order. Please try again.",
        severity=Severity.ERROR,
    )


# =============================================================================
# Sinks
# =============================================================================


class CollectingNotificationSink:
    """Keeps notifications in memory until a UI layer drains them."""

    def __init__(self, max_pending: int = 50) -> None:
        self._pending: deque[Notification] = deque(maxlen=max_pending)

    def notify(self, notification: Notification) -> None:
        logger.debug("Notification queued: %s (%s)", notification.title, notification.severity.value)
        self._pending.append(notification)

    @property
    def pending(self) -> tuple[Notification, ...]:
        return tuple(self._pending)

    def drain(self) -> list[Notification]:
        drained = list(self._pending)
        self._pending.clear()
        return drained
