"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - InvoiceStatus is a closed two-valued enum; its values match the DB enum `invoice_status`
    - Amounts at rest are integer cents (Cents); major units only at the read/write boundary
    - ITEMS_PER_PAGE and LATEST_INVOICES_LIMIT are fixed, not configurable

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CustomerId = NewType("CustomerId", str)
InvoiceId = NewType("InvoiceId", str)
UserId = NewType("UserId", str)


# ─── Value Types ─────────────────────────────────────────────────

Cents = NewType("Cents", int)

# invoices.amount is a signed 64-bit BIGINT
MAX_AMOUNT_CENTS = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Invoice status: decides which aggregate bucket an amount lands in."""
    PENDING = "pending"
    PAID = "paid"


INVOICE_STATUS_VALUES: tuple[str, ...] = tuple(s.value for s in InvoiceStatus)


# ─── Limits ──────────────────────────────────────────────────────

ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5

INVOICES_PATH = "/dashboard/invoices"
