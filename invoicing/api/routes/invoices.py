"""Invoice Routes — listing (cached per query/page), lookup, and form-driven writes.

Invariants:
    - Listing responses are cached under INVOICES_PATH and dropped by every successful write
    - Create/update answer 303 See Other to MutationOutcome.redirect_to
    - Form validation happens in InvoiceActions, not in FastAPI: the body is a raw field map

Design Decisions:
    - Raw dict body keeps one validation path (InvoiceValidationError) for API and form callers
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import RedirectResponse

from invoicing.api.dependencies import get_invoice_actions, get_invoice_queries
from invoicing.core.domain_types import INVOICES_PATH
from invoicing.core.errors import ResourceNotFoundError
from invoicing.infrastructure.view_cache import ViewCache, get_view_cache
from invoicing.schemas.invoice import InvoiceFormView, InvoicePage
from invoicing.services.invoice_actions import InvoiceActions, MutationOutcome
from invoicing.services.invoice_queries import InvoiceQueries

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/dashboard/invoices", tags=["invoices"])


@router.get("", response_model=InvoicePage)
async def list_invoices(
    query: str = Query(""),
    page: int = Query(1, ge=1),
    queries: InvoiceQueries = Depends(get_invoice_queries),
    cache: ViewCache = Depends(get_view_cache),
):
    """One page of invoices matching the search query, plus the page count."""
    cached = cache.get(INVOICES_PATH, (query, page))
    if cached is not None:
        return cached
    listing = InvoicePage(
        invoices=await queries.fetch_filtered_invoices(query, page),
        total_pages=await queries.fetch_invoices_pages(query),
    )
    cache.set(INVOICES_PATH, (query, page), listing)
    return listing


@router.get("/{invoice_id}", response_model=InvoiceFormView)
async def get_invoice(
    invoice_id: str, queries: InvoiceQueries = Depends(get_invoice_queries),
):
    invoice = await queries.fetch_invoice_by_id(invoice_id)
    if invoice is None:
        raise ResourceNotFoundError("Invoice", invoice_id)
    return invoice


@router.post("")
async def create_invoice(
    form: dict[str, Any] = Body(...),
    actions: InvoiceActions = Depends(get_invoice_actions),
):
    outcome = await actions.create_invoice(form)
    return _redirect(outcome)


@router.put("/{invoice_id}")
async def update_invoice(
    invoice_id: str,
    form: dict[str, Any] = Body(...),
    actions: InvoiceActions = Depends(get_invoice_actions),
):
    outcome = await actions.update_invoice(invoice_id, form)
    return _redirect(outcome)


@router.delete("/{invoice_id}")
async def delete_invoice(
    invoice_id: str, actions: InvoiceActions = Depends(get_invoice_actions),
):
    outcome = await actions.delete_invoice(invoice_id)
    return {
        "invoice_id": outcome.invoice_id,
        "revalidated": list(outcome.revalidated),
    }


def _redirect(outcome: MutationOutcome) -> RedirectResponse:
    return RedirectResponse(
        url=outcome.redirect_to or INVOICES_PATH,
        status_code=status.HTTP_303_SEE_OTHER,
        headers={"X-Invoice-Id": outcome.invoice_id},
    )
