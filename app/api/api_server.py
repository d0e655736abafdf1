"""
FastAPI server for the canteen storefront.

Exposes the catalog, per-session cart and checkout to the web UI.
"""
from __future__ import annotations

import logging
import os
import urllib.parse
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.storefront import router as storefront_router
from app.api.storefront import set_storefront_services
from app.application.orders.ports import OrderCreator
from app.core.config import Settings, load_settings
from app.core.exceptions import SessionNotFoundException, StorefrontException
from app.core.logging_config import setup_logging
from app.repositories import OrderRepository
from app.services.catalog_service import CatalogService
from app.services.session_service import init_session_registry

logger = logging.getLogger(__name__)


def _origin_from_url(value: str | None) -> str | None:
    if not value:
        return None
    try:
        parsed = urllib.parse.urlsplit(value.strip())
    except ValueError:
        return None
    if not parsed.scheme or not parsed.netloc:
        return None
    return f"{parsed.scheme}://{parsed.netloc}"


def _allowed_origins(settings: Settings) -> list[str]:
    allowed_origins: list[str] = []

    origin = _origin_from_url(os.getenv("WEBAPP_URL"))
    if origin:
        allowed_origins.append(origin)

    extra_origins = os.getenv("CORS_ALLOWED_ORIGINS", "")
    for raw in extra_origins.split(","):
        origin = _origin_from_url(raw)
        if origin and origin not in allowed_origins:
            allowed_origins.append(origin)

    # Only allow localhost in development
    if settings.is_dev:
        allowed_origins.extend(
            [
                "http://localhost:5173",
                "http://localhost:3000",
                "http://127.0.0.1:5173",
            ]
        )
    return allowed_origins


def create_api_app(
    orders: OrderCreator | None = None,
    catalog: CatalogService | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Create FastAPI application for the storefront.

    Args:
        orders: Order-creation backend; defaults to the in-memory repository
        catalog: Menu; defaults to the built-in static menu
        settings: Loaded settings; read from the environment when omitted
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    registry = init_session_registry(orders or OrderRepository(), settings)
    catalog = catalog or CatalogService()
    set_storefront_services(registry, catalog)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 %s API starting...", settings.storefront_name)
        yield
        logger.info("👋 %s API shutting down (%s open sessions)", settings.storefront_name, len(registry))

    app = FastAPI(
        title=f"{settings.storefront_name} API",
        description="Catalog, cart and checkout for the canteen storefront",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(settings),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Session-Id"],
        expose_headers=["Content-Length", "Content-Type"],
    )

    @app.exception_handler(SessionNotFoundException)
    async def session_not_found(request: Request, exc: SessionNotFoundException):
        return JSONResponse(status_code=404, content={"detail": exc.message})

    @app.exception_handler(StorefrontException)
    async def storefront_error(request: Request, exc: StorefrontException):
        logger.error("Unhandled storefront error on %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=400, content={"detail": exc.message})

    app.include_router(storefront_router)

    @app.get("/")
    async def root():
        return {"service": f"{settings.storefront_name} API", "version": "1.0.0", "docs": "/api/docs"}

    return app


def main() -> None:
    settings = load_settings()
    app = create_api_app(settings=settings)
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
