"""Helpers for parsing and validating line-item quantities."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from app.core.exceptions import InvalidQuantityException

DEFAULT_QUANTITY = 1
# Largest quantity a single add or update may request
MAX_QUANTITY = 999


def _decimal_to_int(value: Decimal) -> int | None:
    if not value.is_finite():
        return None
    # Magnitude check first so a huge exponent never gets expanded
    if value and value.adjusted() >= len(str(MAX_QUANTITY)):
        return None
    if value != value.to_integral_value():
        return None
    return int(value)


def _to_int(value: Any) -> int | None:
    # bool is an int subclass; a checkbox value is never a quantity
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        if not value.is_integer() or abs(value) > MAX_QUANTITY:
            return None
        parsed = int(value)
    elif isinstance(value, Decimal):
        parsed = _decimal_to_int(value)
    elif isinstance(value, str):
        cleaned = value.strip().replace(" ", "")
        if not cleaned:
            return None
        try:
            parsed = _decimal_to_int(Decimal(cleaned))
        except (InvalidOperation, ValueError):
            return None
    else:
        return None
    if parsed is None or abs(parsed) > MAX_QUANTITY:
        return None
    return parsed


def parse_quantity(value: Any, *, strict: bool = False) -> int | None:
    """Parse raw quantity input into a positive integer.

    Returns None for anything that is not a whole number between 1 and
    ``MAX_QUANTITY``, or raises InvalidQuantityException when ``strict`` is set.
    """
    parsed = _to_int(value)
    if parsed is None or parsed <= 0:
        if strict:
            raise InvalidQuantityException(value)
        return None
    return parsed


def parse_signed_quantity(value: Any) -> int | None:
    """Parse a whole number that may be zero or negative (used for updates)."""
    return _to_int(value)
