"""OD rate resolver — (class, power, zone, age, cc) → tariff rate (%).

Band selection lives here; the tables themselves live in
``motor_rating.tariff.od_rates``.  The returned rate is the literal
tariff value, 3 dp, for the premium composer to apply.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from motor_rating.config.enums import PowerType, VehicleClass, Zone
from motor_rating.config.vehicle import VehicleDetails
from motor_rating.engine.bands import band_index
from motor_rating.errors import MissingMandatoryField, UnsupportedVehicleClass
from motor_rating.tariff.od_rates import OD_RATE_TABLES, RateTable

logger = logging.getLogger(__name__)


def rate_table_for(vehicle_class: VehicleClass, power_type: PowerType = PowerType.ICE) -> RateTable:
    table = OD_RATE_TABLES.get((vehicle_class, power_type))
    if table is None:
        raise UnsupportedVehicleClass(vehicle_class.value, power_type.value)
    return table


def resolve_od_rate(
    vehicle_class: VehicleClass,
    zone: Zone,
    power_type: PowerType,
    age: float,
    cubic_capacity: float | None = None,
    gross_vehicle_weight: float | None = None,
    passenger_capacity: int | None = None,
) -> Decimal:
    """Look up the OD rate for one vehicle.

    ``gross_vehicle_weight`` and ``passenger_capacity`` do not band any
    current OD table; they load the base premium instead (see
    ``engine.premium``) and are accepted here so every class shares one
    call shape.
    """
    table = rate_table_for(vehicle_class, power_type)
    age_band = band_index(age, table.age_thresholds)

    cc_band = None
    if table.uses_capacity:
        if cubic_capacity is None:
            raise MissingMandatoryField("cubic_capacity", vehicle_class.value)
        cc_band = band_index(cubic_capacity, table.cc_thresholds, closed_upper=True)

    rate = table.lookup(zone, age_band, cc_band)
    logger.debug(
        "OD rate %s zone=%s age_band=%d cc_band=%s -> %s",
        table.name, zone.value, age_band, cc_band, rate,
    )
    return rate


def resolve_vehicle_od_rate(vehicle: VehicleDetails, age: float) -> Decimal:
    return resolve_od_rate(
        vehicle.vehicle_class,
        vehicle.zone,
        vehicle.power_type,
        age,
        cubic_capacity=vehicle.cubic_capacity,
        gross_vehicle_weight=vehicle.gross_vehicle_weight,
        passenger_capacity=vehicle.passenger_capacity,
    )
