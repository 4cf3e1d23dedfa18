"""Customer Routes — aggregated customer table and selection options."""

from fastapi import APIRouter, Depends, Query

from invoicing.api.dependencies import get_customer_queries
from invoicing.schemas.dashboard import CustomerField, CustomerTableRow
from invoicing.services.customer_queries import CustomerQueries

router = APIRouter(prefix="/api/v1/dashboard/customers", tags=["customers"])


@router.get("", response_model=list[CustomerTableRow])
async def list_customers(
    query: str = Query(""),
    queries: CustomerQueries = Depends(get_customer_queries),
):
    return await queries.fetch_filtered_customers(query)


@router.get("/options", response_model=list[CustomerField])
async def customer_options(
    queries: CustomerQueries = Depends(get_customer_queries),
):
    return await queries.fetch_customers()
