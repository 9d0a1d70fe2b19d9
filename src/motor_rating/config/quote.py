"""Top-level quote request — bundles every rating input."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from motor_rating.config.addons import AddonSelection
from motor_rating.config.liability import LiabilityCovers
from motor_rating.config.vehicle import VehicleDetails


class QuoteInput(BaseModel):
    """Complete, immutable input snapshot for one quotation."""

    model_config = ConfigDict(frozen=True)

    vehicle: VehicleDetails
    idv: Decimal = Field(
        ge=0,
        description="Insured Declared Value for the policy year (₹). "
                    "See engine.idv.compute_idv for the depreciation formula.",
    )
    od_discount_pct: Decimal = Field(
        default=Decimal("0"), ge=0, le=100,
        description="Underwriting discount on base OD (%)",
    )
    ncb_pct: Decimal = Field(
        default=Decimal("0"), ge=0, le=65,
        description="No-claim bonus (%), applied last on the tariff NCB base",
    )
    addons: AddonSelection = Field(default_factory=AddonSelection)
    liability: LiabilityCovers = Field(default_factory=LiabilityCovers)
    quote_date: date = Field(
        default_factory=date.today,
        description="Date the quote is issued. A vehicle registered on this date "
                    "is rated as new (multi-year TP).",
    )

    @property
    def is_new_vehicle(self) -> bool:
        return self.vehicle.registration_date == self.quote_date
