"""Cart line item."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

CartKey = tuple[str, str]


@dataclass(frozen=True, slots=True)
class CartItem:
    """Single line in the cart, keyed by product and variety.

    Price and display fields are captured when the item is added and never
    follow later catalog changes.
    """

    product_id: str
    variety_name: str
    product_name: str
    image: str
    price: int
    quantity: int = 1

    def __post_init__(self) -> None:
        if isinstance(self.price, bool) or not isinstance(self.price, int) or self.price < 0:
            raise ValueError(f"price must be a non-negative integer, got {self.price!r}")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValueError(f"quantity must be a positive integer, got {self.quantity!r}")

    @property
    def key(self) -> CartKey:
        return make_key(self.product_id, self.variety_name)

    @property
    def line_total(self) -> int:
        return self.price * self.quantity

    def with_quantity(self, quantity: int) -> CartItem:
        return replace(self, quantity=quantity)

    def to_dict(self) -> dict[str, Any]:
        return {
            "product_id": self.product_id,
            "variety_name": self.variety_name,
            "product_name": self.product_name,
            "image": self.image,
            "price": int(self.price),
            "quantity": int(self.quantity),
        }


def make_key(product_id: Any, variety_name: Any) -> CartKey:
    return (str(product_id), str(variety_name or ""))
