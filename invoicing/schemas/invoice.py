"""Invoice Schemas — form input validation and invoice read models.

Invariants:
    - InvoiceForm.customer_id: non-empty after strip
    - InvoiceForm.amount: finite decimal in [0, MAX_AMOUNT], coerced from str/int/float;
      anything accepted converts to cents that fit the BIGINT amount column
    - InvoiceForm.status: exactly "pending" or "paid"
    - parse_invoice_form raises InvoiceValidationError (never pydantic's ValidationError)

Design Decisions:
    - Literal type for status over str enum: Pydantic handles validation natively
    - customerId / customer_id both accepted: form posts use camelCase
"""

import datetime
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Literal

from pydantic import (
    AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator,
)

from invoicing.core.errors import InvoiceValidationError
from invoicing.core.money import MAX_AMOUNT

StatusLiteral = Literal["pending", "paid"]


class InvoiceForm(BaseModel):
    """Create/update payload: validated before any write."""
    model_config = ConfigDict(extra="ignore")

    customer_id: str = Field(
        validation_alias=AliasChoices("customerId", "customer_id"),
    )
    amount: Decimal = Field(ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    status: StatusLiteral

    @field_validator("customer_id")
    @classmethod
    def strip_customer_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("customer_id cannot be empty or whitespace")
        return v


def parse_invoice_form(form_input: Mapping[str, Any]) -> InvoiceForm:
    """Validate raw form fields, mapping failures to field-level InvoiceValidationError."""
    try:
        return InvoiceForm.model_validate(dict(form_input))
    except ValidationError as e:
        raise InvoiceValidationError(_field_errors(e)) from e


_FIELD_ALIASES = {"customerId": "customer_id"}


def _field_errors(exc: ValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(
                _FIELD_ALIASES.get(str(loc), str(loc)) for loc in e["loc"]
            ) or "form",
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]


# --- Read models --------------------------------------------------------------

class InvoiceFormView(BaseModel):
    """Single invoice for the edit form: amount in major units."""
    id: str
    customer_id: str
    amount: Decimal
    status: StatusLiteral


class InvoiceTableRow(BaseModel):
    """Filtered listing row: invoice joined with its customer, amount in cents."""
    id: str
    customer_id: str
    name: str
    email: str
    image_url: str
    date: datetime.date
    amount: int
    status: StatusLiteral


class LatestInvoice(BaseModel):
    """Latest-invoices widget row: amount as a display string."""
    id: str
    name: str
    email: str
    image_url: str
    amount: str


class InvoicePage(BaseModel):
    """Listing response: one page plus the page count for the same query."""
    invoices: list[InvoiceTableRow]
    total_pages: int
