"""Invoice Queries — filtered/paginated listing, page count, and by-id lookup.

Invariants:
    - Listing and page count share one predicate (invoice_search_filter)
    - Listing order: date descending, then id descending; window of ITEMS_PER_PAGE rows
    - fetch_invoice_by_id returns None for a missing id; it raises only on store failure
    - Amounts leave fetch_invoice_by_id in major units (cents / 100)

Design Decisions:
    - Numeric, date, and enum columns are searched through CAST(... AS TEXT):
      approximate by nature, since the text form depends on the dialect
    - icontains(autoescape=True): '%' and '_' in the query match literally
"""

import logging

from sqlalchemy import String, cast, func, or_, select

from invoicing.core.domain_types import ITEMS_PER_PAGE
from invoicing.core.money import cents_to_dollars
from invoicing.core.pagination import page_offset, total_pages
from invoicing.core.repository_protocols import SessionProvider
from invoicing.models.customer import Customer
from invoicing.models.invoice import Invoice
from invoicing.schemas.invoice import InvoiceFormView, InvoiceTableRow

logger = logging.getLogger(__name__)


def invoice_search_filter(query: str):
    """Case-insensitive substring match over customer and textual invoice columns."""
    return or_(
        Customer.name.icontains(query, autoescape=True),
        Customer.email.icontains(query, autoescape=True),
        cast(Invoice.amount, String).icontains(query, autoescape=True),
        cast(Invoice.date, String).icontains(query, autoescape=True),
        cast(Invoice.status, String).icontains(query, autoescape=True),
    )


class InvoiceQueries:
    """Invoice listing reads."""

    def __init__(self, db: SessionProvider):
        self.db = db

    async def fetch_filtered_invoices(
        self, query: str, page: int,
    ) -> list[InvoiceTableRow]:
        stmt = (
            select(
                Invoice.id,
                Invoice.customer_id,
                Invoice.amount,
                Invoice.date,
                Invoice.status,
                Customer.name,
                Customer.email,
                Customer.image_url,
            )
            .join(Customer, Invoice.customer_id == Customer.id)
            .where(invoice_search_filter(query))
            .order_by(Invoice.date.desc(), Invoice.id.desc())
            .limit(ITEMS_PER_PAGE)
            .offset(page_offset(page))
        )
        async with self.db.session("fetch invoices") as db:
            result = await db.execute(stmt)
            rows = result.mappings().all()

        return [InvoiceTableRow(**row) for row in rows]

    async def fetch_invoices_pages(self, query: str) -> int:
        stmt = (
            select(func.count())
            .select_from(Invoice)
            .join(Customer, Invoice.customer_id == Customer.id)
            .where(invoice_search_filter(query))
        )
        async with self.db.session("fetch total number of invoices") as db:
            result = await db.execute(stmt)
            count = result.scalar_one()

        return total_pages(count)

    async def fetch_invoice_by_id(self, invoice_id: str) -> InvoiceFormView | None:
        stmt = select(
            Invoice.id, Invoice.customer_id, Invoice.amount, Invoice.status,
        ).where(Invoice.id == invoice_id)
        async with self.db.session("fetch invoice") as db:
            result = await db.execute(stmt)
            row = result.one_or_none()

        if row is None:
            return None
        return InvoiceFormView(
            id=row.id,
            customer_id=row.customer_id,
            amount=cents_to_dollars(row.amount),
            status=row.status,
        )
