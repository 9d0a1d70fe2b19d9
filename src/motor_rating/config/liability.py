"""Third-party side covers: legal liability, CSI covers, PA owner-driver."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LiabilityCovers(BaseModel):
    """Per-person liability and personal-accident covers."""

    model_config = ConfigDict(frozen=True)

    legal_liability_drivers: int = Field(
        default=0, ge=0,
        description="Number of paid drivers covered for legal liability (₹50 each)",
    )
    paid_drivers: int = Field(default=0, ge=0, description="Paid drivers under the CSI cover")
    paid_driver_csi_tier: Literal[1, 2] = Field(
        default=2,
        description="CSI tier for paid drivers: 1 = ₹60/person, 2 = ₹120/person",
    )
    unnamed_passengers: int = Field(default=0, ge=0, description="Unnamed passengers under the CSI cover")
    passenger_csi_tier: Literal[1, 2] = Field(
        default=2,
        description="CSI tier for unnamed passengers: 1 = ₹50/person, 2 = ₹100/person",
    )
    pa_owner_driver_years: Literal[1, 3, 5] | None = Field(
        default=None,
        description="PA owner-driver tenure in years; None = not opted",
    )
