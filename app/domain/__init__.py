"""Domain package."""

from .cart import CartStore
from .entities import AuthenticatedUser, CartItem, CartKey, Product, Profile, Variety, make_key
from .order import Order
from .value_objects import (
    AccountKind,
    Branch,
    CheckoutState,
    Severity,
    StudyYear,
)

__all__ = [
    # Aggregates
    "CartStore",
    "Order",
    # Entities
    "AuthenticatedUser",
    "CartItem",
    "CartKey",
    "Product",
    "Profile",
    "Variety",
    "make_key",
    # Value Objects
    "AccountKind",
    "Branch",
    "CheckoutState",
    "Severity",
    "StudyYear",
]
