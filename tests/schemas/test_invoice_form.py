"""Invoice form validation — coercion, closed status set, field-level errors.

Invariants:
    - amount coerces from str/int/float; non-numeric, negative, NaN fail
    - amount above the BIGINT cents range fails as a field error, not at conversion
    - status accepts exactly "pending" and "paid"
    - customerId and customer_id are both accepted; blank fails
    - failures surface as InvoiceValidationError, never pydantic.ValidationError
"""

from decimal import Decimal

import pytest

from invoicing.core.domain_types import MAX_AMOUNT_CENTS
from invoicing.core.errors import InvoiceValidationError
from invoicing.core.money import MAX_AMOUNT, dollars_to_cents
from invoicing.schemas.invoice import parse_invoice_form


def test_parses_camel_case_form():
    form = parse_invoice_form(
        {"customerId": "C1", "amount": "250.00", "status": "pending"},
    )
    assert form.customer_id == "C1"
    assert form.amount == Decimal("250.00")
    assert form.status == "pending"


def test_accepts_snake_case_customer_id():
    form = parse_invoice_form({"customer_id": "C2", "amount": 10, "status": "paid"})
    assert form.customer_id == "C2"
    assert form.amount == Decimal("10")


def test_strips_customer_id():
    form = parse_invoice_form({"customerId": "  C1 ", "amount": "1", "status": "paid"})
    assert form.customer_id == "C1"


def test_ignores_unknown_fields():
    form = parse_invoice_form({
        "customerId": "C1", "amount": "1", "status": "paid",
        "id": "I1", "date": "2024-01-01",
    })
    assert form.customer_id == "C1"


@pytest.mark.parametrize("status", ["overdue", "PAID", "", "draft"])
def test_rejects_status_outside_closed_set(status):
    with pytest.raises(InvoiceValidationError) as exc_info:
        parse_invoice_form({"customerId": "C1", "amount": "5", "status": status})
    assert exc_info.value.fields == {"status"}


@pytest.mark.parametrize("amount", ["abc", "", "NaN", "-1", "inf"])
def test_rejects_non_numeric_or_negative_amount(amount):
    with pytest.raises(InvoiceValidationError) as exc_info:
        parse_invoice_form({"customerId": "C1", "amount": amount, "status": "paid"})
    assert exc_info.value.fields == {"amount"}


@pytest.mark.parametrize(
    "amount", ["1e26", "1e30", "99999999999999999999999999999", "92233720368547758.08"],
)
def test_rejects_amount_beyond_column_range(amount):
    with pytest.raises(InvoiceValidationError) as exc_info:
        parse_invoice_form({"customerId": "C1", "amount": amount, "status": "paid"})
    assert exc_info.value.fields == {"amount"}


def test_accepts_largest_storable_amount():
    form = parse_invoice_form(
        {"customerId": "C1", "amount": str(MAX_AMOUNT), "status": "paid"},
    )
    assert form.amount == Decimal("92233720368547758.07")
    assert dollars_to_cents(form.amount) == MAX_AMOUNT_CENTS


def test_rejects_blank_customer_id():
    with pytest.raises(InvoiceValidationError) as exc_info:
        parse_invoice_form({"customerId": "   ", "amount": "5", "status": "paid"})
    assert exc_info.value.fields == {"customer_id"}


def test_missing_fields_reported_together():
    with pytest.raises(InvoiceValidationError) as exc_info:
        parse_invoice_form({})
    err = exc_info.value
    assert len(err.details) == 3
    assert err.fields == {"customer_id", "amount", "status"}
    for detail in err.details:
        assert detail["type"] == "missing"
