"""In-memory order backend used by the API and tests."""
from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime

from app.core.exceptions import StorefrontException
from app.domain.entities import CartItem
from app.domain.order import Order

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredOrder:
    order_id: str
    order: Order
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class OrderRepository:
    """Stores submitted orders in process memory.

    ``create_order`` matches the order-creation contract used by checkout:
    it returns an opaque string ID.
    """

    def __init__(self, latency_seconds: float = 0.0) -> None:
        self._orders: dict[str, StoredOrder] = {}
        self._latency_seconds = latency_seconds

    async def create_order(self, user_id: str, items: Sequence[CartItem], total: int) -> str:
        if not items:
            raise StorefrontException("Refusing to store an order without items")
        if self._latency_seconds:
            await asyncio.sleep(self._latency_seconds)

        order = Order(items=tuple(items), total=int(total), submitted_by=str(user_id))
        order_id = uuid.uuid4().hex
        self._orders[order_id] = StoredOrder(order_id=order_id, order=order)
        logger.info("Stored order %s for user %s (total %s)", order_id, user_id, order.total)
        return order_id

    def get_order(self, order_id: str) -> StoredOrder | None:
        return self._orders.get(order_id)

    def orders_for_user(self, user_id: str) -> list[StoredOrder]:
        return [stored for stored in self._orders.values() if stored.order.submitted_by == str(user_id)]

    def __len__(self) -> int:
        return len(self._orders)
