"""Domain entities package."""

from .cart_item import CartItem, CartKey, make_key
from .product import Product, Variety
from .user import AuthenticatedUser, Profile

__all__ = [
    "AuthenticatedUser",
    "CartItem",
    "CartKey",
    "Product",
    "Profile",
    "Variety",
    "make_key",
]
