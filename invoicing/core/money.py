"""Money — conversions between major units and integer cents, plus display formatting.

Invariants:
    - dollars_to_cents(cents_to_dollars(c)) == c for every integer c
    - Fractional cents round half-to-even
    - format_currency is read-path only; it never feeds a write

Design Decisions:
    - Decimal throughout: "250.00" * 100 must be exactly 25000
    - en-US / USD display format hardcoded (single-currency dashboard)
"""

from decimal import Decimal, ROUND_HALF_EVEN

from invoicing.core.domain_types import MAX_AMOUNT_CENTS, Cents

_CENTS_PER_UNIT = Decimal(100)
_ONE = Decimal(1)

# Largest major-unit amount whose cents still fit the amount column
MAX_AMOUNT = Decimal(MAX_AMOUNT_CENTS).scaleb(-2)


def dollars_to_cents(amount: Decimal) -> Cents:
    """Major units to integer cents, rounding fractional cents half-to-even."""
    return Cents(int((amount * _CENTS_PER_UNIT).quantize(_ONE, rounding=ROUND_HALF_EVEN)))


def cents_to_dollars(cents: int | Decimal | None) -> Decimal:
    """Integer cents to major units. None (empty aggregate) reads as zero."""
    if cents is None:
        return Decimal("0.00")
    return (Decimal(cents) / _CENTS_PER_UNIT).quantize(Decimal("0.01"))


def format_currency(cents: int | Decimal | None) -> str:
    """Cents to an en-US currency string, e.g. 123456 -> '$1,234.56'."""
    dollars = cents_to_dollars(cents)
    if dollars < 0:
        return f"-${-dollars:,.2f}"
    return f"${dollars:,.2f}"
