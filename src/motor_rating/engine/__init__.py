"""Rating engine — age, OD rate, premium composition and eligibility."""

from motor_rating.engine.age import compute_age
from motor_rating.engine.eligibility import resolve_eligibility
from motor_rating.engine.idv import compute_idv
from motor_rating.engine.od_rate import resolve_od_rate, resolve_vehicle_od_rate
from motor_rating.engine.orchestrator import quote_with_eligibility, run_quote
from motor_rating.engine.premium import compose_premium
from motor_rating.engine.third_party import compute_third_party
from motor_rating.engine.validation import validate_quote_input

__all__ = [
    "compute_age",
    "compute_idv",
    "compute_third_party",
    "compose_premium",
    "quote_with_eligibility",
    "resolve_eligibility",
    "resolve_od_rate",
    "resolve_vehicle_od_rate",
    "run_quote",
    "validate_quote_input",
]
