"""Invoice Actions — validated create/update/delete with post-write revalidation.

Invariants:
    - Pipeline per action: validate -> transform (dollars to cents) -> one write -> revalidate
    - Validation failures raise InvoiceValidationError before any session is opened
    - Store failures raise DataAccessError; revalidation and redirect only follow a committed write
    - update touches customer_id, amount, status only (id and date are immutable)
    - delete is awaited to completion before the listing is revalidated

Design Decisions:
    - MutationOutcome is the completion signal: callers redirect/refresh from it
    - clock injectable so the invoice date is deterministic under test
"""

import datetime
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy import delete, update

from invoicing.core.domain_types import INVOICES_PATH
from invoicing.core.money import dollars_to_cents
from invoicing.core.repository_protocols import SessionProvider, ViewRefresher
from invoicing.models.invoice import Invoice
from invoicing.schemas.invoice import parse_invoice_form

logger = logging.getLogger(__name__)


def _utc_today() -> datetime.date:
    return datetime.datetime.now(datetime.timezone.utc).date()


@dataclass(frozen=True)
class MutationOutcome:
    """Result of a committed invoice write."""
    invoice_id: str
    revalidated: tuple[str, ...]
    redirect_to: str | None


class InvoiceActions:
    """Form-driven invoice writes."""

    def __init__(
        self,
        db: SessionProvider,
        views: ViewRefresher,
        clock: Callable[[], datetime.date] = _utc_today,
    ):
        self.db = db
        self.views = views
        self.clock = clock

    async def create_invoice(self, form_input: Mapping[str, Any]) -> MutationOutcome:
        form = parse_invoice_form(form_input)
        invoice = Invoice(
            customer_id=form.customer_id,
            amount=dollars_to_cents(form.amount),
            status=form.status,
            date=self.clock(),
        )
        async with self.db.session("create invoice") as db:
            db.add(invoice)
            await db.commit()

        logger.info("Invoice created", extra={"invoice_id": invoice.id})
        return self._refresh(invoice.id, redirect_to=INVOICES_PATH)

    async def update_invoice(
        self, invoice_id: str, form_input: Mapping[str, Any],
    ) -> MutationOutcome:
        form = parse_invoice_form(form_input)
        stmt = (
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .values(
                customer_id=form.customer_id,
                amount=dollars_to_cents(form.amount),
                status=form.status,
            )
        )
        async with self.db.session("update invoice") as db:
            await db.execute(stmt)
            await db.commit()

        logger.info("Invoice updated", extra={"invoice_id": invoice_id})
        return self._refresh(invoice_id, redirect_to=INVOICES_PATH)

    async def delete_invoice(self, invoice_id: str) -> MutationOutcome:
        async with self.db.session("delete invoice") as db:
            await db.execute(delete(Invoice).where(Invoice.id == invoice_id))
            await db.commit()

        logger.info("Invoice deleted", extra={"invoice_id": invoice_id})
        return self._refresh(invoice_id, redirect_to=None)

    def _refresh(self, invoice_id: str, redirect_to: str | None) -> MutationOutcome:
        self.views.revalidate_path(INVOICES_PATH)
        return MutationOutcome(
            invoice_id=invoice_id,
            revalidated=(INVOICES_PATH,),
            redirect_to=redirect_to,
        )
