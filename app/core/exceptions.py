"""Custom exceptions for the canteen storefront."""
from __future__ import annotations


class StorefrontException(Exception):
    """Base exception for all storefront errors."""

    def __init__(self, message: str, *args: object) -> None:
        super().__init__(message, *args)
        self.message = message


class ConfigurationException(StorefrontException):
    """Configuration errors."""

    pass


class InvalidQuantityException(StorefrontException):
    """Quantity input that is not a positive integer."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid quantity: {value!r}")
        self.value = value


class CheckoutValidationException(StorefrontException):
    """Checkout precondition failed before anything was submitted."""

    reason = "validation"


class UnauthenticatedException(CheckoutValidationException):
    """No authenticated user (or no profile) is present."""

    reason = "unauthenticated"

    def __init__(self) -> None:
        super().__init__("An authenticated user is required to place an order")


class EmptyCartException(CheckoutValidationException):
    """Checkout was triggered with nothing in the cart."""

    reason = "empty_cart"

    def __init__(self) -> None:
        super().__init__("Cannot place an order with an empty cart")


class SubmissionException(StorefrontException):
    """The order-creation collaborator failed."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Order submission failed: {cause}")
        self.cause = cause


class CheckoutTransitionException(StorefrontException):
    """Checkout state machine was driven through a forbidden transition."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(f"Checkout transition '{current} -> {target}' is not allowed")
        self.current = current
        self.target = target


class ProductNotFoundException(StorefrontException):
    """Product not found in the catalog."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id


class VarietyNotFoundException(StorefrontException):
    """Product exists but has no variety with the given name."""

    def __init__(self, product_id: str, variety_name: str) -> None:
        super().__init__(f"Product {product_id} has no variety '{variety_name}'")
        self.product_id = product_id
        self.variety_name = variety_name


class SessionNotFoundException(StorefrontException):
    """Browsing session is unknown or already closed."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session {session_id} not found")
        self.session_id = session_id
