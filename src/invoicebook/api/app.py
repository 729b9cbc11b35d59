"""FastAPI application with lifespan management."""

from __future__ import annotations

import importlib.metadata
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from invoicebook.api.middleware.error_handler import register_error_handlers
from invoicebook.api.routes import health, invoices
from invoicebook.core.config import APIConfig, AppSettings
from invoicebook.core.logging_config import setup_logging
from invoicebook.core.startup_checks import validate_settings
from invoicebook.database import IInvoiceDatabase, create_database
from invoicebook.services import InvoiceService


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("invoicebook")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


def create_app(
    settings: AppSettings | None = None,
    database: IInvoiceDatabase | None = None,
) -> FastAPI:
    """Build the API. ``database`` overrides the configured backend (tests)."""
    api_config = settings.api if settings is not None else APIConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application startup/shutdown lifecycle."""
        app_settings = settings or AppSettings()
        validate_settings(app_settings)
        setup_logging(app_settings.observability)

        db = database if database is not None else create_database(app_settings.database)
        app.state.settings = app_settings
        app.state.database = db
        app.state.invoice_service = InvoiceService(db)
        yield

    app = FastAPI(
        title=api_config.title,
        description=api_config.description,
        version=_get_version(),
        lifespan=lifespan,
    )
    register_error_handlers(app)
    app.include_router(health.router)
    app.include_router(invoices.router)
    return app


app = create_app()
