"""Dashboard Overview — revenue chart, latest invoices, and summary cards."""

from fastapi import APIRouter, Depends

from invoicing.api.dependencies import get_dashboard_queries
from invoicing.schemas.dashboard import CardData, RevenuePoint
from invoicing.schemas.invoice import LatestInvoice
from invoicing.services.dashboard_queries import DashboardQueries

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("/revenue", response_model=list[RevenuePoint])
async def revenue(queries: DashboardQueries = Depends(get_dashboard_queries)):
    return await queries.fetch_revenue()


@router.get("/latest-invoices", response_model=list[LatestInvoice])
async def latest_invoices(
    queries: DashboardQueries = Depends(get_dashboard_queries),
):
    return await queries.fetch_latest_invoices()


@router.get("/cards", response_model=CardData)
async def cards(queries: DashboardQueries = Depends(get_dashboard_queries)):
    return await queries.fetch_card_data()
