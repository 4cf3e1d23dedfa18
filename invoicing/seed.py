"""Seed Script — populates users, customers, invoices, and revenues from placeholder data.

Invariants:
    - User passwords are bcrypt-hashed before insert; plaintext never reaches the store
    - Customers are inserted before invoices (FK order)
    - One commit for the whole seed: a failure leaves the tables untouched

Usage:
    python -m invoicing.seed
"""

import asyncio
import datetime
import logging
from collections.abc import Iterable

import bcrypt
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from invoicing import placeholder_data
from invoicing.config import get_settings
from invoicing.db.base import Base
from invoicing.db.session import create_session_factory
from invoicing.infrastructure.observability import setup_logging
from invoicing.models import Customer, Invoice, Revenue, User

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(rounds=rounds),
    ).decode("utf-8")


def _as_date(value) -> datetime.date:
    if isinstance(value, datetime.date):
        return value
    return datetime.date.fromisoformat(value)


async def seed_database(
    db: AsyncSession,
    users: Iterable[dict] = placeholder_data.users,
    customers: Iterable[dict] = placeholder_data.customers,
    invoices: Iterable[dict] = placeholder_data.invoices,
    revenue: Iterable[dict] = placeholder_data.revenue,
    bcrypt_rounds: int = 10,
) -> dict[str, int]:
    """Insert fixture rows in one transaction. Returns inserted row counts per table."""
    user_rows = [
        User(**{**u, "password": hash_password(u["password"], bcrypt_rounds)})
        for u in users
    ]
    customer_rows = [Customer(**c) for c in customers]
    invoice_rows = [
        Invoice(**{**i, "date": _as_date(i["date"])}) for i in invoices
    ]
    revenue_rows = [Revenue(**r) for r in revenue]

    db.add_all(user_rows)
    db.add_all(customer_rows)
    await db.flush()
    db.add_all(invoice_rows)
    db.add_all(revenue_rows)
    await db.commit()

    counts = {
        "users": len(user_rows),
        "customers": len(customer_rows),
        "invoices": len(invoice_rows),
        "revenues": len(revenue_rows),
    }
    for table, count in counts.items():
        logger.info(f"Seeded {count} {table}", extra={"count": count})
    return counts


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    engine, session_factory = create_session_factory(settings.database_url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with session_factory() as db:
            await seed_database(db)
    except SQLAlchemyError:
        logger.error("Seeding failed", exc_info=True)
        raise
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
