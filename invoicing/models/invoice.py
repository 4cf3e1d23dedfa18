"""Invoice ORM — a billed amount owed by a customer.

Invariants:
    - amount is integer cents in a BIGINT, CHECK amount >= 0
    - status is the closed enum invoice_status ('pending', 'paid'); the store rejects anything else
    - customer_id must reference an existing customer
    - id and date are set once at creation and never updated

Design Decisions:
    - Named SQL enum with create_constraint: native enum on PostgreSQL, CHECK on SQLite
"""

import datetime

from sqlalchemy import BigInteger, CheckConstraint, Date, Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from invoicing.core.domain_types import INVOICE_STATUS_VALUES
from invoicing.db.base import Base, new_id

invoice_status_enum = Enum(
    *INVOICE_STATUS_VALUES, name="invoice_status", create_constraint=True,
)


class Invoice(Base):
    """Invoice entity: amount in cents with a pending/paid status."""
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_invoices_amount_nonneg"),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    customer_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customers.id"), nullable=False, index=True,
    )
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    date: Mapped[datetime.date] = mapped_column(
        Date, nullable=False, index=True,
    )
    status: Mapped[str] = mapped_column(invoice_status_enum, nullable=False)

    # Relationships
    customer: Mapped["Customer"] = relationship(
        "Customer", back_populates="invoices",
    )
