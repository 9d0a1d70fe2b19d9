"""Vehicle details — the rating parameters that select tariff tables."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from motor_rating.config.enums import PowerType, VehicleClass, Zone


class VehicleDetails(BaseModel):
    """The insured vehicle, fixed per quote."""

    model_config = ConfigDict(frozen=True)

    vehicle_class: VehicleClass = Field(description="Tariff class of the vehicle")
    zone: Zone = Field(default=Zone.B, description="Registration zone (A / B / C)")
    power_type: PowerType = Field(
        default=PowerType.ICE,
        description="ICE, Electric or Hybrid. Electric/Hybrid only apply to private cars, "
                    "two-wheelers and three-wheelers.",
    )
    registration_date: date = Field(description="First registration date")
    risk_start_date: date = Field(description="Policy risk inception date")

    cubic_capacity: float | None = Field(
        default=None, gt=0,
        description="Engine cubic capacity (cc). For Electric vehicles this carries the "
                    "motor rating in kW, which bands the TP premium. "
                    "Mandatory for private car, two-wheeler and taxi.",
    )
    gross_vehicle_weight: float | None = Field(
        default=None, gt=0,
        description="Gross vehicle weight (kg). Mandatory for GCV4.",
    )
    passenger_capacity: int | None = Field(
        default=None, ge=0,
        description="Licensed seating capacity excluding driver. "
                    "Mandatory for taxi, bus, school bus and 3W passenger carrier.",
    )
