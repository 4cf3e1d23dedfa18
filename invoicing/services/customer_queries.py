"""Customer Queries — selection options, aggregated customer table, user lookup.

Invariants:
    - fetch_filtered_customers LEFT JOINs invoices: customers without invoices still appear,
      with total_invoices = 0 and "$0.00" sums
    - Both customer listings order by name ascending
    - get_user matches email exactly and returns None when absent
"""

import logging

from sqlalchemy import func, or_, select

from invoicing.core.domain_types import InvoiceStatus
from invoicing.core.money import format_currency
from invoicing.core.repository_protocols import SessionProvider
from invoicing.models.customer import Customer
from invoicing.models.invoice import Invoice
from invoicing.models.user import User
from invoicing.schemas.dashboard import CustomerField, CustomerTableRow, UserRecord
from invoicing.services.dashboard_queries import status_sum

logger = logging.getLogger(__name__)


class CustomerQueries:
    """Customer and user reads."""

    def __init__(self, db: SessionProvider):
        self.db = db

    async def fetch_customers(self) -> list[CustomerField]:
        stmt = select(Customer.id, Customer.name).order_by(Customer.name.asc())
        async with self.db.session("fetch all customers") as db:
            result = await db.execute(stmt)
            rows = result.all()

        return [CustomerField(id=row.id, name=row.name) for row in rows]

    async def fetch_filtered_customers(self, query: str) -> list[CustomerTableRow]:
        stmt = (
            select(
                Customer.id,
                Customer.name,
                Customer.email,
                Customer.image_url,
                func.count(Invoice.id).label("total_invoices"),
                status_sum(InvoiceStatus.PENDING).label("total_pending"),
                status_sum(InvoiceStatus.PAID).label("total_paid"),
            )
            .outerjoin(Invoice, Customer.id == Invoice.customer_id)
            .where(or_(
                Customer.name.icontains(query, autoescape=True),
                Customer.email.icontains(query, autoescape=True),
            ))
            .group_by(
                Customer.id, Customer.name, Customer.email, Customer.image_url,
            )
            .order_by(Customer.name.asc())
        )
        async with self.db.session("fetch customer table") as db:
            result = await db.execute(stmt)
            rows = result.all()

        return [
            CustomerTableRow(
                id=row.id,
                name=row.name,
                email=row.email,
                image_url=row.image_url,
                total_invoices=row.total_invoices,
                total_pending=format_currency(row.total_pending),
                total_paid=format_currency(row.total_paid),
            )
            for row in rows
        ]

    async def get_user(self, email: str) -> UserRecord | None:
        stmt = select(User).where(User.email == email)
        async with self.db.session("fetch user") as db:
            result = await db.execute(stmt)
            user = result.scalars().first()

        if user is None:
            return None
        return UserRecord(
            id=user.id, name=user.name, email=user.email, password=user.password,
        )
