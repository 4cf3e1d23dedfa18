"""Invoice Queries — search predicate, pagination window, page count, by-id lookup.

Invariants:
    - Search is a case-insensitive substring over name, email, amount, date, status
    - Pages hold 6 rows, newest first; page count obeys the boundary law
    - Missing ids read as None; store failures as DataAccessError
"""

from decimal import Decimal

import pytest

from invoicing.core.errors import DataAccessError
from invoicing.services.invoice_queries import InvoiceQueries


async def test_filter_by_customer_name_case_insensitive(seeded):
    rows = await InvoiceQueries(seeded).fetch_filtered_invoices("AMY", 1)
    assert [r.id for r in rows] == ["I2", "I1"]
    assert rows[0].name == "Amy Burns"
    assert rows[0].customer_id == "C1"


async def test_filter_by_customer_email(seeded):
    rows = await InvoiceQueries(seeded).fetch_filtered_invoices("orban.com", 1)
    assert {r.id for r in rows} == {"I3", "I4"}


async def test_filter_by_amount_as_text(seeded):
    rows = await InvoiceQueries(seeded).fetch_filtered_invoices("448", 1)
    assert [r.id for r in rows] == ["I4"]
    assert rows[0].amount == 44800


async def test_filter_by_date_as_text(seeded):
    rows = await InvoiceQueries(seeded).fetch_filtered_invoices("2024-03", 1)
    assert [r.id for r in rows] == ["I3"]


async def test_filter_by_status_as_text(seeded):
    rows = await InvoiceQueries(seeded).fetch_filtered_invoices("Paid", 1)
    assert {r.id for r in rows} == {"I2", "I3"}
    assert all(r.status == "paid" for r in rows)


async def test_like_wildcards_match_literally(seeded):
    assert await InvoiceQueries(seeded).fetch_filtered_invoices("%", 1) == []
    assert await InvoiceQueries(seeded).fetch_filtered_invoices("_", 1) == []


async def test_no_match_returns_empty_and_zero_pages(seeded):
    queries = InvoiceQueries(seeded)
    assert await queries.fetch_filtered_invoices("zzz-no-match", 1) == []
    assert await queries.fetch_invoices_pages("zzz-no-match") == 0


async def test_listing_is_date_descending(seeded):
    rows = await InvoiceQueries(seeded).fetch_filtered_invoices("", 1)
    dates = [r.date for r in rows]
    assert dates == sorted(dates, reverse=True)
    assert [r.id for r in rows] == ["I4", "I3", "I2", "I1"]


async def test_pages_hold_six_rows(many_invoices):
    queries = InvoiceQueries(many_invoices)
    page1 = await queries.fetch_filtered_invoices("", 1)
    page2 = await queries.fetch_filtered_invoices("", 2)
    page3 = await queries.fetch_filtered_invoices("", 3)
    page4 = await queries.fetch_filtered_invoices("", 4)
    assert [len(p) for p in (page1, page2, page3, page4)] == [6, 6, 5, 0]
    ids = [r.id for r in page1 + page2 + page3]
    assert len(set(ids)) == 17
    assert page1[0].id == "I4"
    assert page3[-1].id == "X01"


async def test_page_below_one_reads_as_first_page(many_invoices):
    queries = InvoiceQueries(many_invoices)
    first = await queries.fetch_filtered_invoices("", 1)
    assert await queries.fetch_filtered_invoices("", 0) == first


async def test_page_count_boundary_law(many_invoices):
    queries = InvoiceQueries(many_invoices)
    for query, matching in (("", 17), ("orban", 15), ("amy", 2), ("zzz", 0)):
        pages = await queries.fetch_invoices_pages(query)
        assert pages * 6 >= matching
        assert matching == 0 or (pages - 1) * 6 < matching
    assert await queries.fetch_invoices_pages("") == 3


async def test_fetch_invoice_by_id_converts_to_major_units(seeded):
    invoice = await InvoiceQueries(seeded).fetch_invoice_by_id("I1")
    assert invoice.id == "I1"
    assert invoice.customer_id == "C1"
    assert invoice.amount == Decimal("157.95")
    assert invoice.status == "pending"


async def test_fetch_invoice_by_id_missing_returns_none(seeded):
    assert await InvoiceQueries(seeded).fetch_invoice_by_id("nope") is None


async def test_store_failure_is_data_access_error(empty_db_manager):
    queries = InvoiceQueries(empty_db_manager)
    with pytest.raises(DataAccessError, match="Failed to fetch invoices."):
        await queries.fetch_filtered_invoices("", 1)
    with pytest.raises(DataAccessError, match="Failed to fetch total number of invoices."):
        await queries.fetch_invoices_pages("")
    with pytest.raises(DataAccessError, match="Failed to fetch invoice."):
        await queries.fetch_invoice_by_id("I1")
