"""Revenue ORM — one row of monthly revenue for the dashboard chart."""

from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from invoicing.db.base import Base


class Revenue(Base):
    """Revenue entity: keyed by month label."""
    __tablename__ = "revenues"

    month: Mapped[str] = mapped_column(String(255), primary_key=True)
    revenue: Mapped[Decimal] = mapped_column(Numeric, nullable=False)
