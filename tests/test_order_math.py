from app.core.order_math import (
    calc_items_total,
    calc_line_total,
    calc_quantity,
    format_price,
    short_order_ref,
)
from app.domain.order import Order


def test_calc_items_total_multiplies_price_by_quantity(item_factory) -> None:
    items = [item_factory("p1", price=50).with_quantity(2), item_factory("p2", price=30)]
    assert calc_items_total(items) == 130


def test_calc_items_total_of_nothing_is_zero() -> None:
    assert calc_items_total([]) == 0


def test_large_totals_stay_exact() -> None:
    assert calc_line_total(10**15 + 1, 3) == 3 * 10**15 + 3


def test_calc_quantity_sums_units(item_factory) -> None:
    items = [item_factory("p1").with_quantity(2), item_factory("p2").with_quantity(5)]
    assert calc_quantity(items) == 7


def test_format_price_and_order_ref() -> None:
    assert format_price(130) == "₹130"
    assert format_price(5, "Rs.") == "Rs.5"
    assert short_order_ref("0123456789abcdef") == "01234567"
    assert short_order_ref("abc") == "abc"


def test_order_counts_snapshot_lines(item_factory) -> None:
    items = (item_factory("p1", price=50).with_quantity(2), item_factory("p2", price=30))

    order = Order(items=items, total=calc_items_total(items), submitted_by="42")

    assert order.total == 130
    assert order.items_count == 2
