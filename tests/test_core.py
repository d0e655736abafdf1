"""Tests for app.core modules."""
from __future__ import annotations

from decimal import Decimal

import pytest

from app.core.config import load_settings
from app.core.exceptions import (
    CheckoutValidationException,
    ConfigurationException,
    EmptyCartException,
    InvalidQuantityException,
    ProductNotFoundException,
    SessionNotFoundException,
    StorefrontException,
    SubmissionException,
    UnauthenticatedException,
    VarietyNotFoundException,
)
from app.core.units import MAX_QUANTITY, parse_quantity, parse_signed_quantity


class TestExceptions:
    """Test custom exception classes."""

    def test_base_exception(self):
        exc = StorefrontException("test message")
        assert str(exc) == "test message"
        assert exc.message == "test message"

    def test_validation_reasons(self):
        assert UnauthenticatedException().reason == "unauthenticated"
        assert EmptyCartException().reason == "empty_cart"
        assert isinstance(EmptyCartException(), CheckoutValidationException)

    def test_submission_exception_keeps_cause(self):
        cause = ConnectionError("refused")
        exc = SubmissionException(cause)
        assert exc.cause is cause
        assert "refused" in str(exc)

    def test_lookup_exceptions(self):
        assert ProductNotFoundException("chai").product_id == "chai"
        exc = VarietyNotFoundException("chai", "Huge")
        assert exc.variety_name == "Huge"
        assert "Huge" in str(exc)
        assert SessionNotFoundException("s1").session_id == "s1"

    def test_invalid_quantity_exception(self):
        exc = InvalidQuantityException("abc")
        assert exc.value == "abc"
        assert "'abc'" in str(exc)


class TestQuantityParsing:
    @pytest.mark.parametrize(
        "raw,expected",
        [(3, 3), ("3", 3), (" 12 ", 12), (2.0, 2), (Decimal("4"), 4), ("5.0", 5)],
    )
    def test_valid_positive_quantities(self, raw, expected):
        assert parse_quantity(raw) == expected

    @pytest.mark.parametrize("raw", [0, -1, "0", "-3", "x", "", None, 1.5, True, False, [], "inf"])
    def test_invalid_quantities(self, raw):
        assert parse_quantity(raw) is None

    def test_strict_mode_raises(self):
        with pytest.raises(InvalidQuantityException):
            parse_quantity("zero", strict=True)

    def test_signed_parsing_keeps_zero_and_negatives(self):
        assert parse_signed_quantity("0") == 0
        assert parse_signed_quantity(-2) == -2
        assert parse_signed_quantity("two") is None

    def test_quantity_cap(self):
        assert parse_quantity(MAX_QUANTITY) == MAX_QUANTITY
        assert parse_quantity(str(MAX_QUANTITY)) == MAX_QUANTITY
        assert parse_quantity(MAX_QUANTITY + 1) is None
        assert parse_signed_quantity(-(MAX_QUANTITY + 1)) is None

    @pytest.mark.parametrize(
        "raw",
        ["1e2000000", "1e20000000", "-1e999999999", "9" * 5000, 1e300, Decimal("1e99999999")],
    )
    def test_huge_magnitudes_are_rejected(self, raw):
        assert parse_quantity(raw) is None
        assert parse_signed_quantity(raw) is None

    @pytest.mark.parametrize("raw", [Decimal("Infinity"), Decimal("-Infinity"), Decimal("NaN"), Decimal("sNaN")])
    def test_non_finite_decimals_are_rejected(self, raw):
        assert parse_quantity(raw) is None
        assert parse_signed_quantity(raw) is None


class TestSettings:
    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch):
        for name in (
            "STOREFRONT_NAME",
            "CURRENCY_SYMBOL",
            "ORDER_REF_LENGTH",
            "DEFAULT_QUANTITY",
            "LOGIN_ROUTE",
            "HOME_ROUTE",
            "LOG_LEVEL",
            "ENVIRONMENT",
            "MAX_SESSIONS",
        ):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setattr("app.core.config.load_dotenv", lambda *args, **kwargs: False)

    def test_defaults(self):
        settings = load_settings()
        assert settings.storefront_name == "College Canteen"
        assert settings.currency_symbol == "₹"
        assert settings.order_ref_length == 8
        assert settings.default_quantity == 1
        assert settings.routes.login == "/login"
        assert settings.routes.home == "/"
        assert settings.is_dev is False
        assert settings.max_sessions == 10_000

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ORDER_REF_LENGTH", "6")
        monkeypatch.setenv("LOGIN_ROUTE", "/signin")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("ENVIRONMENT", "Development")

        settings = load_settings()

        assert settings.order_ref_length == 6
        assert settings.routes.login == "/signin"
        assert settings.log_level == "DEBUG"
        assert settings.is_dev is True

    @pytest.mark.parametrize(
        "name,value",
        [("ORDER_REF_LENGTH", "eight"), ("DEFAULT_QUANTITY", "0"), ("MAX_SESSIONS", "-5")],
    )
    def test_invalid_integers_raise(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ConfigurationException):
            load_settings()
