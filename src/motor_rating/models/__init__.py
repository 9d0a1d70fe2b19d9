"""Result models — quote output contracts."""

from motor_rating.models.results import (
    AddonEligibility,
    ODBreakdown,
    QuoteOutput,
    TPBreakdown,
)

__all__ = [
    "AddonEligibility",
    "ODBreakdown",
    "QuoteOutput",
    "TPBreakdown",
]
