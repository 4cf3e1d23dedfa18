"""Invoicing API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map InvoicingError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager, disposed on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from invoicing.api.error_handlers import register_error_handlers
from invoicing.api.routes import customers, dashboard, health, invoices
from invoicing.config import get_settings
from invoicing.infrastructure.database import init_db
from invoicing.infrastructure.observability import setup_logging
from invoicing.infrastructure.view_cache import get_view_cache

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    get_view_cache().max_entries_per_path = settings.view_cache_max_entries
    logger.info("Invoicing API started")
    yield
    await manager.dispose()
    logger.info("Invoicing API shutting down")


app = FastAPI(
    title="Invoicing Dashboard API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(dashboard.router)
app.include_router(invoices.router)
app.include_router(customers.router)

register_error_handlers(app)
