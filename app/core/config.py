"""Environment-driven configuration objects for the storefront."""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from app.core.exceptions import ConfigurationException


def _str_to_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationException(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(slots=True)
class RouteConfig:
    login: str
    home: str


@dataclass(slots=True)
class Settings:
    storefront_name: str
    currency_symbol: str
    order_ref_length: int
    default_quantity: int
    log_level: str
    environment: str
    routes: RouteConfig
    max_sessions: int = 10_000

    @property
    def is_dev(self) -> bool:
        return self.environment in ("development", "dev", "local", "test")


def load_settings() -> Settings:
    """Load environment variables once and expose typed settings."""
    load_dotenv()

    order_ref_length = _str_to_int("ORDER_REF_LENGTH", 8)
    if order_ref_length <= 0:
        raise ConfigurationException("ORDER_REF_LENGTH must be positive")

    default_quantity = _str_to_int("DEFAULT_QUANTITY", 1)
    if default_quantity <= 0:
        raise ConfigurationException("DEFAULT_QUANTITY must be positive")

    max_sessions = _str_to_int("MAX_SESSIONS", 10_000)
    if max_sessions <= 0:
        raise ConfigurationException("MAX_SESSIONS must be positive")

    routes = RouteConfig(
        login=os.getenv("LOGIN_ROUTE", "/login"),
        home=os.getenv("HOME_ROUTE", "/"),
    )

    return Settings(
        storefront_name=os.getenv("STOREFRONT_NAME", "College Canteen"),
        currency_symbol=os.getenv("CURRENCY_SYMBOL", "₹"),
        order_ref_length=order_ref_length,
        default_quantity=default_quantity,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        environment=os.getenv("ENVIRONMENT", "production").lower(),
        routes=routes,
        max_sessions=max_sessions,
    )
