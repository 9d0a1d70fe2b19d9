"""Insured Declared Value for the coming policy year."""

from __future__ import annotations

from decimal import Decimal

from motor_rating.engine.money import to_rupees
from motor_rating.errors import OutOfRangeInput


def compute_idv(old_idv: Decimal, depreciation_pct: Decimal) -> Decimal:
    """old IDV × (100 − depreciation%) / 100, rounded to whole rupees."""
    old_idv = Decimal(old_idv)
    depreciation_pct = Decimal(depreciation_pct)
    if old_idv < 0:
        raise OutOfRangeInput("old_idv", str(old_idv), ">= 0")
    if not 0 <= depreciation_pct <= 100:
        raise OutOfRangeInput("depreciation_pct", str(depreciation_pct), "0 to 100")
    return to_rupees(old_idv * (100 - depreciation_pct) / 100)
