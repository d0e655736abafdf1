"""Repository layer for data access abstraction."""
from __future__ import annotations

from .order_repository import OrderRepository, StoredOrder

__all__ = [
    "OrderRepository",
    "StoredOrder",
]
