"""Band selection — maps a continuous value onto a tariff tier.

Two conventions are used by the tariff:

* half-open ``[lo, hi)``: ``value < threshold`` selects the band, so a
  value equal to the threshold falls in the next band (ages);
* closed-upper ``(lo, hi]``: ``value <= threshold`` selects the band
  (cc, GVW, passenger tiers, Nil Dep ages).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence, TypeVar

T = TypeVar("T")


def _within(value: float, upper: float, closed_upper: bool) -> bool:
    return value <= upper if closed_upper else value < upper


def band_index(value: float, thresholds: Sequence[float], *, closed_upper: bool = False) -> int:
    """Index of the band ``value`` falls in; ``len(thresholds)`` for the open top band."""
    for i, upper in enumerate(thresholds):
        if _within(value, upper, closed_upper):
            return i
    return len(thresholds)


def band_value(
    value: float | Decimal,
    bands: Sequence[tuple[float | None, T]],
    *,
    closed_upper: bool = False,
) -> T | None:
    """Value of the first ``(upper, value)`` band containing ``value``.

    An upper bound of ``None`` is open-ended.  Returns ``None`` when
    ``value`` lies beyond the last bounded band.
    """
    for upper, result in bands:
        if upper is None or _within(value, upper, closed_upper):
            return result
    return None
