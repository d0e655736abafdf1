"""Per-session wiring of cart, identity and checkout."""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field

from app.application.orders.place_order import CheckoutCoordinator
from app.application.orders.ports import OrderCreator
from app.core.config import Settings, load_settings
from app.core.exceptions import SessionNotFoundException
from app.core.notifications import CollectingNotificationSink
from app.domain.cart import CartStore
from app.domain.entities import AuthenticatedUser, Profile

logger = logging.getLogger(__name__)


class SessionIdentity:
    """Identity holder for one session, filled in by the auth layer."""

    def __init__(self) -> None:
        self._user: AuthenticatedUser | None = None
        self._profile: Profile | None = None

    def current_user(self) -> AuthenticatedUser | None:
        return self._user

    def current_profile(self) -> Profile | None:
        return self._profile

    def sign_in(self, user: AuthenticatedUser, profile: Profile | None = None) -> None:
        self._user = user
        self._profile = profile

    def sign_out(self) -> None:
        self._user = None
        self._profile = None


class RecordingNavigator:
    """Keeps the routes a session was sent to; the UI reads the latest."""

    def __init__(self) -> None:
        self.history: list[str] = []

    def navigate(self, route: str) -> None:
        self.history.append(route)

    @property
    def current_route(self) -> str | None:
        return self.history[-1] if self.history else None

    def pop_redirect(self) -> str | None:
        route = self.current_route
        self.history.clear()
        return route


@dataclass
class StorefrontSession:
    session_id: str
    cart: CartStore
    identity: SessionIdentity
    notifier: CollectingNotificationSink
    navigator: RecordingNavigator
    checkout: CheckoutCoordinator = field(repr=False)


class SessionRegistry:
    """Creates and tracks browsing sessions; a cart lives as long as its session."""

    def __init__(self, orders: OrderCreator, settings: Settings | None = None) -> None:
        self._orders = orders
        self._settings = settings or load_settings()
        self._sessions: dict[str, StorefrontSession] = {}

    @property
    def settings(self) -> Settings:
        return self._settings

    def create(self, session_id: str | None = None) -> StorefrontSession:
        session_id = session_id or uuid.uuid4().hex
        if session_id in self._sessions:
            return self._sessions[session_id]
        while len(self._sessions) >= self._settings.max_sessions:
            self._evict_oldest()
        cart = CartStore(default_quantity=self._settings.default_quantity)
        identity = SessionIdentity()
        notifier = CollectingNotificationSink()
        navigator = RecordingNavigator()
        checkout = CheckoutCoordinator(
            cart,
            identity=identity,
            orders=self._orders,
            notifier=notifier,
            navigator=navigator,
            routes=self._settings.routes,
            currency_symbol=self._settings.currency_symbol,
            order_ref_length=self._settings.order_ref_length,
        )
        session = StorefrontSession(
            session_id=session_id,
            cart=cart,
            identity=identity,
            notifier=notifier,
            navigator=navigator,
            checkout=checkout,
        )
        self._sessions[session_id] = session
        logger.debug("Session %s started", session_id)
        return session

    def get(self, session_id: str) -> StorefrontSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundException(session_id)
        return session

    def close(self, session_id: str) -> None:
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise SessionNotFoundException(session_id)
        session.cart.clear()
        logger.debug("Session %s closed", session_id)

    def _evict_oldest(self) -> None:
        # Sessions are kept in creation order; the first one is the oldest
        oldest_id = next(iter(self._sessions))
        self.close(oldest_id)
        logger.info("Session limit %s reached; evicted %s", self._settings.max_sessions, oldest_id)

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions


_session_registry: SessionRegistry | None = None


def get_session_registry() -> SessionRegistry | None:
    """Get the session registry singleton."""
    return _session_registry


def init_session_registry(orders: OrderCreator, settings: Settings | None = None) -> SessionRegistry:
    """Initialize the session registry singleton."""
    global _session_registry
    _session_registry = SessionRegistry(orders, settings)
    return _session_registry
