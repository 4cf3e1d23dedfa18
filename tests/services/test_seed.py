"""Seed script — counts, FK order, hashed passwords."""

from sqlalchemy import func, select

from invoicing import placeholder_data
from invoicing.models import Customer, Invoice, Revenue, User
from invoicing.seed import hash_password, seed_database
from tests.services.fixture_data import password_matches


def test_hash_password_round_trip():
    hashed = hash_password("123456", rounds=4)
    assert hashed != "123456"
    assert hashed.startswith("$2")
    assert password_matches("123456", hashed)
    assert not password_matches("654321", hashed)


async def test_seed_placeholder_data(db_manager):
    async with db_manager.session("seed") as db:
        counts = await seed_database(db, bcrypt_rounds=4)

    assert counts == {
        "users": len(placeholder_data.users),
        "customers": len(placeholder_data.customers),
        "invoices": len(placeholder_data.invoices),
        "revenues": len(placeholder_data.revenue),
    }

    async with db_manager.session() as db:
        for model, expected in (
            (User, 1), (Customer, 6), (Invoice, 13), (Revenue, 12),
        ):
            total = await db.scalar(select(func.count()).select_from(model))
            assert total == expected
        stored = await db.scalar(select(User.password))
    assert stored != "123456"
    assert password_matches("123456", stored)
