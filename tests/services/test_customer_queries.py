"""Customer Queries — selection options, aggregated table, user lookup."""

import pytest

from invoicing.core.errors import DataAccessError
from invoicing.services.customer_queries import CustomerQueries
from tests.services.fixture_data import password_matches


async def test_fetch_customers_ordered_by_name(seeded):
    customers = await CustomerQueries(seeded).fetch_customers()
    assert [(c.id, c.name) for c in customers] == [
        ("C1", "Amy Burns"), ("C2", "Balazs Orban"), ("C3", "Evil Rabbit"),
    ]


async def test_fetch_customers_empty(db_manager):
    assert await CustomerQueries(db_manager).fetch_customers() == []


async def test_filtered_customers_aggregates(seeded):
    rows = await CustomerQueries(seeded).fetch_filtered_customers("")
    assert [r.name for r in rows] == ["Amy Burns", "Balazs Orban", "Evil Rabbit"]

    amy, balazs, rabbit = rows
    assert amy.total_invoices == 2
    assert amy.total_pending == "$157.95"
    assert amy.total_paid == "$203.48"
    assert balazs.total_invoices == 2
    assert balazs.total_pending == "$448.00"
    assert balazs.total_paid == "$30.40"


async def test_customer_without_invoices_still_listed(seeded):
    rows = await CustomerQueries(seeded).fetch_filtered_customers("rabbit")
    assert len(rows) == 1
    assert rows[0].id == "C3"
    assert rows[0].total_invoices == 0
    assert rows[0].total_pending == "$0.00"
    assert rows[0].total_paid == "$0.00"


async def test_filtered_customers_matches_email_case_insensitive(seeded):
    rows = await CustomerQueries(seeded).fetch_filtered_customers("ORBAN.COM")
    assert [r.id for r in rows] == ["C2"]
    assert rows[0].image_url == "/customers/balazs-orban.png"


async def test_filtered_customers_no_match(seeded):
    assert await CustomerQueries(seeded).fetch_filtered_customers("zzz") == []


async def test_get_user_returns_hashed_record(seeded):
    user = await CustomerQueries(seeded).get_user("user@nextmail.com")
    assert user.id == "U1"
    assert user.name == "User"
    assert user.password != "123456"
    assert password_matches("123456", user.password)
    assert not password_matches("wrong", user.password)


async def test_get_user_unknown_email_returns_none(seeded):
    assert await CustomerQueries(seeded).get_user("nobody@nextmail.com") is None


async def test_get_user_email_match_is_exact(seeded):
    assert await CustomerQueries(seeded).get_user("USER@nextmail.com") is None


async def test_store_failures_name_the_operation(empty_db_manager):
    queries = CustomerQueries(empty_db_manager)
    with pytest.raises(DataAccessError, match="Failed to fetch all customers."):
        await queries.fetch_customers()
    with pytest.raises(DataAccessError, match="Failed to fetch customer table."):
        await queries.fetch_filtered_customers("")
    with pytest.raises(DataAccessError, match="Failed to fetch user."):
        await queries.get_user("user@nextmail.com")
