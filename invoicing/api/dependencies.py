"""Service Dependencies — FastAPI providers wiring the process singletons into services.

Invariants:
    - Routes receive services, never the engine or a raw session
    - Tests override get_db_manager / get_view_cache, not these providers
"""

from fastapi import Depends

from invoicing.infrastructure.database import DatabaseSessionManager, get_db_manager
from invoicing.infrastructure.view_cache import ViewCache, get_view_cache
from invoicing.services.customer_queries import CustomerQueries
from invoicing.services.dashboard_queries import DashboardQueries
from invoicing.services.invoice_actions import InvoiceActions
from invoicing.services.invoice_queries import InvoiceQueries


def get_dashboard_queries(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> DashboardQueries:
    return DashboardQueries(db)


def get_invoice_queries(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> InvoiceQueries:
    return InvoiceQueries(db)


def get_customer_queries(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> CustomerQueries:
    return CustomerQueries(db)


def get_invoice_actions(
    db: DatabaseSessionManager = Depends(get_db_manager),
    views: ViewCache = Depends(get_view_cache),
) -> InvoiceActions:
    return InvoiceActions(db, views)
