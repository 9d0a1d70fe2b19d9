"""Result types — the contract between the rating engine and its callers.

Line items are ``None`` when the cover is not present on the quote, so a
caller can tell "not selected / not rated" apart from a genuine zero.
All amounts are ₹, rounded to 2 dp; subtotals are whole rupees.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from motor_rating.config.enums import VehicleClass


# ═══════════════════════════════════════════════════════════════════════════
# Own damage
# ═══════════════════════════════════════════════════════════════════════════

class ODBreakdown(BaseModel):
    """Own-damage line items, in tariff order."""

    basic_od: Decimal
    """Rate × IDV / 100, plus the GCV excess-weight or bus passenger loading."""

    od_discount: Decimal
    """−basic_od × discount% / 100.  Always present; 0.00 when no discount."""

    imt23_loading: Decimal | None = None
    """15% of (basic + discount + accessories + trailer OD)."""

    nil_dep: Decimal | None = None
    engine_protect: Decimal | None = None
    consumables: Decimal | None = None
    return_to_invoice: Decimal | None = None
    key_loss: Decimal | None = None
    employee_compensation: Decimal | None = None
    road_side_assistance: Decimal | None = None
    tyre_plan: Decimal | None = None
    ncb_protection: Decimal | None = None
    geo_extension: Decimal | None = None
    lpg_kit: Decimal | None = None
    own_trailer: Decimal | None = None
    towing: Decimal | None = None

    ncb_discount: Decimal | None = None
    """Negative.  Computed last, on the tariff NCB base only."""

    ev_protect: Decimal | None = None
    electrical_accessories: Decimal | None = None
    trailer_od: Decimal | None = None

    def line_items(self) -> dict[str, Decimal]:
        """Present line items only, keyed by field name."""
        return {k: v for k, v in self if v is not None}


# ═══════════════════════════════════════════════════════════════════════════
# Third party
# ═══════════════════════════════════════════════════════════════════════════

class TPBreakdown(BaseModel):
    """Third-party line items.  All ``None`` for standalone OD policies."""

    basic_tp: Decimal | None = None
    passenger_liability: Decimal | None = None
    legal_liability_driver: Decimal | None = None
    pa_owner_driver: Decimal | None = None
    paid_driver_cover: Decimal | None = None
    passenger_cover: Decimal | None = None
    geo_extension: Decimal | None = None
    lpg_kit: Decimal | None = None
    trailer_tp: Decimal | None = None

    def line_items(self) -> dict[str, Decimal]:
        return {k: v for k, v in self if v is not None}


# ═══════════════════════════════════════════════════════════════════════════
# Quote
# ═══════════════════════════════════════════════════════════════════════════

class QuoteOutput(BaseModel):
    """Complete output snapshot for one quotation."""

    tariff_version: str
    vehicle_class: VehicleClass
    age_years: float
    """Fractional vehicle age at risk start."""
    od_rate: Decimal
    """Resolved OD rate (%) from the tariff table."""
    idv: Decimal
    is_new_vehicle: bool

    od: ODBreakdown
    tp: TPBreakdown

    od_subtotal: Decimal
    """Whole rupees.  Trailer OD is included only for goods carriers."""
    od_gst: Decimal
    tp_subtotal: Decimal
    """Whole rupees."""
    tp_gst: Decimal
    grand_total: Decimal
    """ceil(OD + GST + TP + GST) + 1."""

    notes: list[str] = Field(default_factory=list)
    """Underwriting notes: referrals, forced endorsements, unrated add-ons."""


# ═══════════════════════════════════════════════════════════════════════════
# Eligibility
# ═══════════════════════════════════════════════════════════════════════════

class AddonEligibility(BaseModel):
    """Which covers a caller may offer.  Advisory only; never gates pricing."""

    nil_dep: bool = False
    engine_protect: bool = False
    consumables: bool = False
    return_to_invoice: bool = False
    key_loss: bool = False
    employee_compensation: bool = False
    road_side_assistance: bool = False
    tyre_plan: bool = False
    ncb_protection: bool = False
    ev_protect: bool = False
    towing: bool = False
    trailer_od: bool = False
    own_trailer: bool = False
    imt23: bool = False
    lpg_kit: bool = False
    geo_extension: bool = False

    legal_liability_driver: bool = False
    paid_driver_cover: bool = False
    passenger_cover: bool = False
    pa_owner_driver: bool = False
    pa_owner_driver_tenures: list[int] = Field(default_factory=list)
    """Tenures (years) that may be offered for PA owner-driver."""

    def enabled(self) -> set[str]:
        """Names of every enabled cover."""
        return {k for k, v in self if v is True}
