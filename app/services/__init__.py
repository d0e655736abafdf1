"""Business services orchestrating domain logic."""

from .catalog_service import ALL_CATEGORIES, CatalogService
from .session_service import (
    RecordingNavigator,
    SessionIdentity,
    SessionRegistry,
    StorefrontSession,
    get_session_registry,
    init_session_registry,
)

__all__ = [
    "ALL_CATEGORIES",
    "CatalogService",
    "RecordingNavigator",
    "SessionIdentity",
    "SessionRegistry",
    "StorefrontSession",
    "get_session_registry",
    "init_session_registry",
]
