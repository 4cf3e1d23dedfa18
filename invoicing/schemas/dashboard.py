"""Dashboard Schemas — read models for cards, revenue, customers, and users.

Invariants:
    - Display amounts (str) come from format_currency; raw sums stay in cents (int)
    - CustomerTableRow aggregates are zero for customers without invoices
"""

from pydantic import BaseModel


class RevenuePoint(BaseModel):
    month: str
    revenue: float


class CardData(BaseModel):
    """Aggregate snapshot; all four figures come from one fetch."""
    number_of_invoices: int
    number_of_customers: int
    total_paid_invoices: str
    total_pending_invoices: str
    total_paid_cents: int
    total_pending_cents: int


class CustomerField(BaseModel):
    """Selection-control option."""
    id: str
    name: str


class CustomerTableRow(BaseModel):
    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str


class UserRecord(BaseModel):
    """User row for the auth collaborator: password is the stored hash."""
    id: str
    name: str
    email: str
    password: str
