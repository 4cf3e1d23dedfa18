"""Dashboard Queries — revenue series, latest invoices, and summary cards.

Invariants:
    - Read-only: no statement here writes
    - Every store failure surfaces as DataAccessError naming the operation
    - fetch_card_data runs its three sub-queries concurrently, each on its own session;
      one failure fails the whole call (no partial card snapshot) and cancels the siblings

Design Decisions:
    - One session per sub-query: an AsyncSession cannot run statements concurrently
    - Revenue ordered in Python by calendar month (the key is a label like "Jan")
"""

import asyncio
import logging

from sqlalchemy import case, func, select

from invoicing.core.domain_types import InvoiceStatus, LATEST_INVOICES_LIMIT
from invoicing.core.money import format_currency
from invoicing.core.pagination import month_sort_key
from invoicing.core.repository_protocols import SessionProvider
from invoicing.models.customer import Customer
from invoicing.models.invoice import Invoice
from invoicing.models.revenue import Revenue
from invoicing.schemas.dashboard import CardData, RevenuePoint
from invoicing.schemas.invoice import LatestInvoice

logger = logging.getLogger(__name__)


async def _all_or_nothing(*aws):
    """Run awaitables concurrently; on the first failure cancel the rest and re-raise it."""
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    for task in tasks:
        if not task.cancelled() and task.exception() is not None:
            raise task.exception()
    return [task.result() for task in tasks]


def status_sum(status: InvoiceStatus):
    """SUM(CASE WHEN status = :status THEN amount ELSE 0 END), zero when no rows."""
    return func.coalesce(
        func.sum(
            case((Invoice.status == status.value, Invoice.amount), else_=0),
        ),
        0,
    )


class DashboardQueries:
    """Overview page reads."""

    def __init__(self, db: SessionProvider):
        self.db = db

    async def fetch_revenue(self) -> list[RevenuePoint]:
        async with self.db.session("fetch revenue data") as db:
            result = await db.execute(select(Revenue.month, Revenue.revenue))
            rows = result.all()

        points = [
            RevenuePoint(month=row.month, revenue=float(row.revenue))
            for row in rows
        ]
        return sorted(points, key=lambda p: month_sort_key(p.month))

    async def fetch_latest_invoices(self) -> list[LatestInvoice]:
        query = (
            select(
                Invoice.id,
                Invoice.amount,
                Customer.name,
                Customer.email,
                Customer.image_url,
            )
            .join(Customer, Invoice.customer_id == Customer.id)
            .order_by(Invoice.date.desc(), Invoice.id.desc())
            .limit(LATEST_INVOICES_LIMIT)
        )
        async with self.db.session("fetch the latest invoices") as db:
            result = await db.execute(query)
            rows = result.all()

        return [
            LatestInvoice(
                id=row.id,
                name=row.name,
                email=row.email,
                image_url=row.image_url,
                amount=format_currency(row.amount),
            )
            for row in rows
        ]

    async def fetch_card_data(self) -> CardData:
        invoice_count, customer_count, (paid, pending) = await _all_or_nothing(
            self._scalar(select(func.count()).select_from(Invoice)),
            self._scalar(select(func.count()).select_from(Customer)),
            self._status_totals(),
        )
        return CardData(
            number_of_invoices=invoice_count,
            number_of_customers=customer_count,
            total_paid_invoices=format_currency(paid),
            total_pending_invoices=format_currency(pending),
            total_paid_cents=paid,
            total_pending_cents=pending,
        )

    async def _scalar(self, query) -> int:
        async with self.db.session("fetch card data") as db:
            result = await db.execute(query)
            return int(result.scalar_one())

    async def _status_totals(self) -> tuple[int, int]:
        query = select(
            status_sum(InvoiceStatus.PAID).label("paid"),
            status_sum(InvoiceStatus.PENDING).label("pending"),
        ).select_from(Invoice)
        async with self.db.session("fetch card data") as db:
            result = await db.execute(query)
            row = result.one()
        return int(row.paid), int(row.pending)
