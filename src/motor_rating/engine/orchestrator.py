"""Quote orchestrator — runs the four stages in order.

    validate → age → OD rate → compose

The engine is stateless; each call receives a full ``QuoteInput`` and
returns a full ``QuoteOutput``.
"""

from __future__ import annotations

import logging

from motor_rating.config.quote import QuoteInput
from motor_rating.engine.age import compute_age
from motor_rating.engine.eligibility import resolve_eligibility
from motor_rating.engine.od_rate import resolve_vehicle_od_rate
from motor_rating.engine.premium import compose_premium
from motor_rating.engine.validation import validate_quote_input
from motor_rating.models.results import AddonEligibility, QuoteOutput

logger = logging.getLogger(__name__)


def run_quote(quote: QuoteInput) -> QuoteOutput:
    """Price one quotation end to end."""
    v = quote.vehicle
    validate_quote_input(quote)

    age = compute_age(v.registration_date, v.risk_start_date)
    od_rate = resolve_vehicle_od_rate(v, age)
    result = compose_premium(quote, od_rate, age)

    logger.debug("quote %s age=%.3f rate=%s total=%s", v.vehicle_class, age, od_rate, result.grand_total)
    return result


def quote_with_eligibility(quote: QuoteInput) -> tuple[QuoteOutput, AddonEligibility]:
    result = run_quote(quote)
    v = quote.vehicle
    eligibility = resolve_eligibility(
        v.vehicle_class,
        result.age_years,
        passenger_capacity=v.passenger_capacity,
        power_type=v.power_type,
        is_new_vehicle=quote.is_new_vehicle,
    )
    return result, eligibility
