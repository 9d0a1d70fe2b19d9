"""Optional covers chosen by the proposer."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class AddonSelection(BaseModel):
    """Add-on flags and sums insured.

    Pricing trusts these flags as given; eligibility is advisory and is
    resolved separately.
    """

    model_config = ConfigDict(frozen=True)

    # --- Flag add-ons ---
    nil_dep: bool = Field(default=False, description="Nil (zero) depreciation cover")
    engine_protect: bool = Field(default=False, description="Engine & gearbox protection")
    consumables: bool = Field(default=False, description="Consumables cover")
    return_to_invoice: bool = Field(default=False, description="Return to invoice")
    key_loss: bool = Field(default=False, description="Key replacement")
    road_side_assistance: bool = Field(default=False, description="Road-side assistance")
    lpg_kit: bool = Field(default=False, description="Bi-fuel LPG/CNG kit (OD and TP loading)")
    geo_extension: bool = Field(default=False, description="Geographical extension (OD and TP)")
    ncb_protection: bool = Field(default=False, description="NCB protection")
    own_trailer: bool = Field(default=False, description="Own trailer cover")
    imt23: bool = Field(default=False, description="IMT 23 endorsement loading")
    ev_protect: bool = Field(default=False, description="EV battery / drive-train protection")

    tyre_plan_tier: int | None = Field(
        default=None, ge=1, le=4,
        description="Tyre protection plan tier (1–4); None = not selected",
    )

    # --- Sum-insured driven add-ons ---
    employee_compensation_si: Decimal | None = Field(
        default=None, ge=0,
        description="Employee compensation wage roll / sum insured (₹)",
    )
    electrical_accessories_si: Decimal | None = Field(
        default=None, ge=0,
        description="Electrical accessories sum insured (₹), loaded at 4%",
    )
    trailer_od_si: Decimal | None = Field(
        default=None, ge=0,
        description="Trailer own-damage sum insured (₹), loaded at 1.05%",
    )
    towing_si: Decimal | None = Field(
        default=None, ge=0,
        description="Towing charges sum insured (₹)",
    )
