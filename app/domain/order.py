"""Order payload handed to the order-creation backend."""
from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.cart_item import CartItem


@dataclass(frozen=True, slots=True)
class Order:
    """Snapshot of a cart at submission time.

    The storefront builds this and passes it on; it never stores orders.
    """

    items: tuple[CartItem, ...]
    total: int
    submitted_by: str

    @property
    def items_count(self) -> int:
        return len(self.items)
