"""Per-class mandatory-field and range checks.

Run before any premium is composed so that no total is ever produced
from partial data.
"""

from __future__ import annotations

from types import MappingProxyType

from motor_rating.config.enums import VehicleClass
from motor_rating.config.quote import QuoteInput
from motor_rating.config.vehicle import VehicleDetails
from motor_rating.errors import MissingMandatoryField, OutOfRangeInput, UnsupportedVehicleClass
from motor_rating.tariff.addon_rates import BUS_MIN_PASSENGERS, TAXI_MAX_PASSENGERS
from motor_rating.tariff.od_rates import OD_RATE_TABLES

MANDATORY_FIELDS = MappingProxyType({
    VehicleClass.GCV4: ("gross_vehicle_weight",),
    VehicleClass.THREE_GCV: (),
    VehicleClass.THREE_PCV: ("passenger_capacity",),
    VehicleClass.PVT_CAR: ("cubic_capacity",),
    VehicleClass.PVT_CAR_STANDALONE: ("cubic_capacity",),
    VehicleClass.TWO_WHEELER: ("cubic_capacity",),
    VehicleClass.TWO_WHEELER_STANDALONE: ("cubic_capacity",),
    VehicleClass.TAXI: ("cubic_capacity", "passenger_capacity"),
    VehicleClass.BUS: ("passenger_capacity",),
    VehicleClass.SCHOOL_BUS: ("passenger_capacity",),
    VehicleClass.MISC: (),
})


def validate_vehicle(vehicle: VehicleDetails) -> None:
    """Raise the first rating error found on ``vehicle``; return ``None`` if ratable."""
    cls = vehicle.vehicle_class

    if (cls, vehicle.power_type) not in OD_RATE_TABLES:
        raise UnsupportedVehicleClass(cls.value, vehicle.power_type.value)

    for field in MANDATORY_FIELDS[cls]:
        if getattr(vehicle, field) is None:
            raise MissingMandatoryField(field, cls.value)

    nps = vehicle.passenger_capacity
    if cls is VehicleClass.TAXI and not 1 <= nps <= TAXI_MAX_PASSENGERS:
        raise OutOfRangeInput("passenger_capacity", nps, f"1 to {TAXI_MAX_PASSENGERS}", cls.value)
    if cls.is_bus and nps < BUS_MIN_PASSENGERS:
        raise OutOfRangeInput("passenger_capacity", nps, f"at least {BUS_MIN_PASSENGERS}", cls.value)


def validate_quote_input(quote: QuoteInput) -> None:
    validate_vehicle(quote.vehicle)
