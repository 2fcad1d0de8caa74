"""
Application factory: builds engine, repositories and service once and wires them into FastAPI.
Pending migrations are applied on startup; the engine is disposed on shutdown.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from customers_api.core.config import Settings, get_settings
from customers_api.core.logging_config import setup_logging
from customers_api.db.migrations import run_migrations
from customers_api.db.session import build_engine, build_session_factory
from customers_api.repositories import alternate_kind, build_repository
from customers_api.routers import customers
from customers_api.services.customer_service import CustomerService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    engine = build_engine(settings)
    session_factory = build_session_factory(engine)
    repository = build_repository(settings.data_access, session_factory)
    alternate = None
    if settings.alt_path_enabled:
        alternate = build_repository(alternate_kind(settings.data_access), session_factory)
    service = CustomerService(
        repository,
        alternate=alternate,
        strict_validation=settings.strict_validation,
        max_text_length=settings.max_text_length,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        applied = run_migrations(engine)
        logger.info(
            "Customers API ready (data access=%s, alt path=%s, migrations applied=%s)",
            settings.data_access,
            "on" if alternate is not None else "off",
            applied or "none",
        )
        yield
        engine.dispose()

    docs = settings.is_development()
    app = FastAPI(
        title="Customers API",
        description="Store and fetch customers with billing and shipping addresses.",
        lifespan=lifespan,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.customer_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(customers.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
