"""Vehicle age calculator.

    days <  1460  →  age = days / 365
    days >= 1460  →  age = (days + 1) / 365.25

The divisor switch and the +1 day are the tariff's defined method for
ages beyond four years; this is not a leap-year calculation.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from motor_rating.errors import InvalidDateRange

logger = logging.getLogger(__name__)

AGE_FORMULA_SWITCH_DAYS = 1460


def _as_date(value: date | str, label: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise InvalidDateRange(f"Unparseable {label}: {value!r}") from None


def compute_age(registration_date: date | str, risk_start_date: date | str) -> float:
    """Fractional vehicle age in years at risk start."""
    reg = _as_date(registration_date, "registration date")
    risk = _as_date(risk_start_date, "risk start date")

    if risk < reg:
        raise InvalidDateRange(
            f"Risk start {risk.isoformat()} precedes registration {reg.isoformat()}",
            registration_date=reg,
            risk_start_date=risk,
        )

    days = (risk - reg).days
    age = days / 365 if days < AGE_FORMULA_SWITCH_DAYS else (days + 1) / 365.25
    logger.debug("vehicle age: %d days -> %.4f years", days, age)
    return age
