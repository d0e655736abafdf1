"""Use case: turn the session cart into a submitted order."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from app.application.orders.ports import IdentityProvider, Navigator, NotificationSink, OrderCreator
from app.core import notifications
from app.core.config import RouteConfig
from app.core.order_math import short_order_ref
from app.core.exceptions import (
    CheckoutTransitionException,
    CheckoutValidationException,
    EmptyCartException,
    SubmissionException,
    UnauthenticatedException,
)
from app.domain.cart import CartStore
from app.domain.checkout_fsm import is_busy, validate_checkout_transition
from app.domain.order import Order
from app.domain.value_objects import CheckoutState

logger = logging.getLogger(__name__)


@dataclass
class CheckoutResult:
    ok: bool
    error_key: str | None = None
    order_id: str | None = None
    order_ref: str | None = None
    total: int | None = None


class CheckoutCoordinator:
    """Gates and submits the cart, one submission at a time.

    A trigger that arrives while an attempt is in progress is dropped without
    feedback. The cart is cleared only after the backend confirms the order.
    """

    def __init__(
        self,
        cart: CartStore,
        *,
        identity: IdentityProvider,
        orders: OrderCreator,
        notifier: NotificationSink,
        navigator: Navigator,
        routes: RouteConfig | None = None,
        currency_symbol: str = "₹",
        order_ref_length: int = 8,
    ) -> None:
        self._cart = cart
        self._identity = identity
        self._orders = orders
        self._notifier = notifier
        self._navigator = navigator
        self._routes = routes or RouteConfig(login="/login", home="/")
        self._currency_symbol = currency_symbol
        self._order_ref_length = order_ref_length
        self._state = CheckoutState.IDLE

    @property
    def state(self) -> CheckoutState:
        return self._state

    @property
    def is_submitting(self) -> bool:
        return self._state is CheckoutState.SUBMITTING

    def _transition(self, target: CheckoutState) -> None:
        result = validate_checkout_transition(self._state, target)
        if not result.allowed:
            raise CheckoutTransitionException(self._state.value, target.value)
        self._state = target

    def _validate(self) -> str:
        """Return the user ID to submit for, or raise a validation error."""
        user = self._identity.current_user()
        profile = self._identity.current_profile()
        if user is None or profile is None:
            raise UnauthenticatedException()
        if self._cart.is_empty():
            raise EmptyCartException()
        return user.id

    def _reject(self, exc: CheckoutValidationException) -> CheckoutResult:
        self._transition(CheckoutState.REJECTED)
        logger.info("Checkout rejected: %s", exc.reason)
        if isinstance(exc, UnauthenticatedException):
            self._notifier.notify(notifications.login_required())
            self._navigator.navigate(self._routes.login)
        else:
            self._notifier.notify(notifications.cart_empty())
        return CheckoutResult(False, exc.reason)

    async def place_order(self) -> CheckoutResult:
        if is_busy(self._state):
            logger.debug("Checkout already in progress (%s); trigger ignored", self._state.value)
            return CheckoutResult(False, "in_flight")

        self._transition(CheckoutState.VALIDATING)
        try:
            try:
                user_id = self._validate()
            except CheckoutValidationException as exc:
                return self._reject(exc)

            items, total = self._cart.snapshot()
            order = Order(items=items, total=total, submitted_by=user_id)

            self._transition(CheckoutState.SUBMITTING)
            logger.info(
                "Submitting order for user %s: %s lines, total %s",
                user_id,
                order.items_count,
                order.total,
            )
            try:
                order_id = await self._orders.create_order(order.submitted_by, order.items, order.total)
            except Exception as exc:
                error = SubmissionException(exc)
                logger.exception("Order submission failed for user %s: %s", user_id, error.message)
                self._transition(CheckoutState.FAILED)
                self._notifier.notify(notifications.order_failed())
                return CheckoutResult(False, "submission_failed", total=order.total)

            order_id = str(order_id)
            self._transition(CheckoutState.SUCCEEDED)
            logger.info("Order %s placed for user %s", order_id, user_id)
            self._cart.clear()
            self._notifier.notify(
                notifications.order_placed(
                    order_id,
                    order.total,
                    currency_symbol=self._currency_symbol,
                    ref_length=self._order_ref_length,
                )
            )
            self._navigator.navigate(self._routes.home)
            return CheckoutResult(
                True,
                order_id=order_id,
                order_ref=short_order_ref(order_id, self._order_ref_length),
                total=order.total,
            )
        finally:
            # Released on every path, including cancellation mid-await
            self._state = CheckoutState.IDLE
