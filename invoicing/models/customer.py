"""Customer ORM — the party an invoice is billed to.

Invariants:
    - name, email, image_url are non-nullable
    - invoices relationship is one-to-many (Invoice.customer_id FK)

Design Decisions:
    - lazy="raise" on invoices: listings aggregate in SQL, never by walking the relationship
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from invoicing.db.base import Base, new_id


class Customer(Base):
    """Customer entity: owns invoices."""
    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    invoices: Mapped[list["Invoice"]] = relationship(
        "Invoice", back_populates="customer", lazy="raise",
    )
