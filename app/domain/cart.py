"""In-session cart store keyed by product and variety."""
from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from app.core.order_math import calc_items_total, calc_quantity
from app.core.units import DEFAULT_QUANTITY, parse_quantity, parse_signed_quantity
from app.domain.entities.cart_item import CartItem, CartKey, make_key

logger = logging.getLogger(__name__)


class CartStore:
    """Authoritative set of line items for one browsing session.

    Entries are kept in insertion order. At most one entry exists per
    ``(product_id, variety_name)`` and every entry has quantity >= 1.
    Totals are recomputed from the entries on every read.
    """

    def __init__(self, default_quantity: int = DEFAULT_QUANTITY) -> None:
        if parse_quantity(default_quantity) is None:
            raise ValueError(f"default_quantity must be a positive integer, got {default_quantity!r}")
        self._default_quantity = int(default_quantity)
        self._items: dict[CartKey, CartItem] = {}

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def add(self, item: CartItem, requested_quantity: Any = DEFAULT_QUANTITY) -> CartItem:
        """Add ``item`` or merge it into the existing line for the same key.

        Invalid quantities fall back to the store default instead of raising.
        The stored price and display fields of an existing line are kept.
        """
        quantity = parse_quantity(requested_quantity)
        if quantity is None:
            logger.debug(
                "Invalid add quantity %r for %s; using %s",
                requested_quantity,
                item.key,
                self._default_quantity,
            )
            quantity = self._default_quantity

        key = item.key
        existing = self._items.get(key)
        if existing is not None:
            merged = existing.with_quantity(existing.quantity + quantity)
            self._items[key] = merged
            return merged

        added = item.with_quantity(quantity)
        self._items[key] = added
        return added

    def update_quantity(self, product_id: Any, variety_name: Any, new_quantity: Any) -> bool:
        """Set the quantity of a line; zero or less removes it.

        Returns True when the cart changed. Unknown lines and non-numeric
        input are ignored.
        """
        key = make_key(product_id, variety_name)
        existing = self._items.get(key)
        if existing is None:
            return False

        quantity = parse_signed_quantity(new_quantity)
        if quantity is None:
            logger.debug("Ignoring non-numeric quantity %r for %s", new_quantity, key)
            return False

        if quantity <= 0:
            del self._items[key]
            return True

        if quantity == existing.quantity:
            return False
        # Reassigning an existing key keeps its position in the dict
        self._items[key] = existing.with_quantity(quantity)
        return True

    def remove_item(self, product_id: Any, variety_name: Any) -> bool:
        return self._items.pop(make_key(product_id, variety_name), None) is not None

    def clear(self) -> None:
        self._items.clear()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get(self, product_id: Any, variety_name: Any) -> CartItem | None:
        return self._items.get(make_key(product_id, variety_name))

    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items.values())

    def snapshot(self) -> tuple[tuple[CartItem, ...], int]:
        """Immutable copy of the lines plus their total, taken together."""
        items = self.items()
        return items, calc_items_total(items)

    def get_total(self) -> int:
        return calc_items_total(self._items.values())

    def count(self) -> int:
        """Number of distinct lines."""
        return len(self._items)

    def unit_count(self) -> int:
        """Sum of quantities across lines."""
        return calc_quantity(self._items.values())

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self.items())

    def __contains__(self, key: object) -> bool:
        if isinstance(key, CartItem):
            return key.key in self._items
        if isinstance(key, tuple) and len(key) == 2:
            return make_key(*key) in self._items
        return False

    def __repr__(self) -> str:
        return f"<CartStore lines={self.count()} units={self.unit_count()} total={self.get_total()}>"
