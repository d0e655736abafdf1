"""Shared helpers for order totals and display formatting."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


class PricedLine(Protocol):
    price: int
    quantity: int


def calc_line_total(price: int, quantity: int) -> int:
    return int(price) * int(quantity)


def calc_items_total(items: Iterable[PricedLine]) -> int:
    """Exact integer sum of price x quantity over all lines."""
    return sum((calc_line_total(item.price, item.quantity) for item in items), 0)


def calc_quantity(items: Iterable[PricedLine]) -> int:
    return sum((int(item.quantity) for item in items), 0)


def format_price(amount: int, currency_symbol: str = "₹") -> str:
    return f"{currency_symbol}{int(amount)}"


def short_order_ref(order_id: object, length: int = 8) -> str:
    """Display form of an opaque order identifier."""
    return str(order_id)[:length]
