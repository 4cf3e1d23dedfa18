"""Pagination & Ordering — pure arithmetic for listing windows and revenue months.

Invariants:
    - Pages are 1-indexed; page < 1 reads as page 1 (offset never negative)
    - total_pages(n) * ITEMS_PER_PAGE >= n and (total_pages(n) - 1) * ITEMS_PER_PAGE < n
"""

from invoicing.core.domain_types import ITEMS_PER_PAGE

MONTH_ORDER = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)


def page_offset(page: int, page_size: int = ITEMS_PER_PAGE) -> int:
    return (max(page, 1) - 1) * page_size


def total_pages(count: int, page_size: int = ITEMS_PER_PAGE) -> int:
    return -(-count // page_size)


def month_sort_key(month: str) -> tuple[int, str]:
    """Calendar position for 'Jan'..'Dec' (or full names); unknown keys sort last."""
    prefix = month.strip()[:3].lower()
    if prefix in MONTH_ORDER:
        return (MONTH_ORDER.index(prefix), month)
    return (len(MONTH_ORDER), month)
