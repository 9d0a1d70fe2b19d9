"""Shared test fixtures — quote inputs for the worked scenarios."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from motor_rating.config import (
    AddonSelection,
    LiabilityCovers,
    PowerType,
    QuoteInput,
    VehicleClass,
    VehicleDetails,
    Zone,
)

# Issue date used throughout; never the real clock.
QUOTE_DATE = date(2024, 4, 1)

# Registration dates relative to QUOTE_DATE.
REG_1Y = date(2023, 4, 1)    # 366 days  -> 1.0027 years
REG_3Y = date(2021, 4, 1)    # 1096 days -> 3.0027 years
REG_6Y = date(2018, 4, 1)    # 2192 days -> 2193 / 365.25 = 6.0041 years


def build_quote(
    vehicle_class: VehicleClass,
    *,
    registration_date: date = REG_3Y,
    risk_start_date: date = QUOTE_DATE,
    zone: Zone = Zone.B,
    power_type: PowerType = PowerType.ICE,
    cubic_capacity: float | None = None,
    gross_vehicle_weight: float | None = None,
    passenger_capacity: int | None = None,
    idv: Decimal | int = 500_000,
    od_discount_pct: Decimal | int = 0,
    ncb_pct: Decimal | int = 0,
    addons: AddonSelection | None = None,
    liability: LiabilityCovers | None = None,
    quote_date: date = QUOTE_DATE,
) -> QuoteInput:
    return QuoteInput(
        vehicle=VehicleDetails(
            vehicle_class=vehicle_class,
            zone=zone,
            power_type=power_type,
            registration_date=registration_date,
            risk_start_date=risk_start_date,
            cubic_capacity=cubic_capacity,
            gross_vehicle_weight=gross_vehicle_weight,
            passenger_capacity=passenger_capacity,
        ),
        idv=Decimal(idv),
        od_discount_pct=Decimal(od_discount_pct),
        ncb_pct=Decimal(ncb_pct),
        addons=addons or AddonSelection(),
        liability=liability or LiabilityCovers(),
        quote_date=quote_date,
    )


@pytest.fixture
def private_car_quote() -> QuoteInput:
    """PvtCar, zone B, ICE, 1200 cc, ~3 years old, IDV 5 lakh, no add-ons."""
    return build_quote(VehicleClass.PVT_CAR, cubic_capacity=1200)


@pytest.fixture
def goods_carrier_quote() -> QuoteInput:
    """GCV4, zone A, 15 000 kg GVW, ~6 years old, IDV 10 lakh."""
    return build_quote(
        VehicleClass.GCV4,
        zone=Zone.A,
        registration_date=REG_6Y,
        gross_vehicle_weight=15_000,
        idv=1_000_000,
    )


@pytest.fixture
def bus_quote() -> QuoteInput:
    """Bus, zone B, 20 passengers, ~1 year old, IDV 20 lakh."""
    return build_quote(
        VehicleClass.BUS,
        registration_date=REG_1Y,
        passenger_capacity=20,
        idv=2_000_000,
    )


@pytest.fixture
def make_quote():
    """Factory for ad-hoc quotes; keyword arguments as ``build_quote``."""
    return build_quote
