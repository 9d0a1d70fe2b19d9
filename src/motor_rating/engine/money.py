"""Rounding conventions for premium amounts."""

from __future__ import annotations

from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal

PAISE = Decimal("0.01")
RUPEE = Decimal("1")


def to_money(value: Decimal) -> Decimal:
    """Round a line item to 2 dp, half-up.  Never returns -0.00."""
    return Decimal(value).quantize(PAISE, rounding=ROUND_HALF_UP) + 0


def to_rupees(value: Decimal) -> Decimal:
    """Round a subtotal to whole rupees, half-up."""
    return Decimal(value).quantize(RUPEE, rounding=ROUND_HALF_UP)


def ceil_rupees(value: Decimal) -> Decimal:
    return Decimal(value).quantize(RUPEE, rounding=ROUND_CEILING)
