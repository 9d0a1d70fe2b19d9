"""Third-party premium from the IRDAI-notified tables.

Basic liability is chosen per class; the common side covers (LPG, geo
extension, paid-driver and passenger CSI, legal liability to driver) are
added on top and carry the multi-year multiplier for a new private car
or two-wheeler.  Standalone OD policies have no TP section at all.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from motor_rating.config.enums import PowerType, VehicleClass
from motor_rating.config.quote import QuoteInput
from motor_rating.engine.bands import band_index, band_value
from motor_rating.engine.money import to_money, to_rupees
from motor_rating.errors import MissingMandatoryField, UnsupportedVehicleClass
from motor_rating.models.results import TPBreakdown
from motor_rating.tariff import tp_rates as t

logger = logging.getLogger(__name__)


def new_vehicle_multiplier(vehicle_class: VehicleClass, is_new_vehicle: bool) -> int:
    """3 for a new private car, 5 for a new two-wheeler, else 1."""
    if not is_new_vehicle:
        return 1
    if vehicle_class.is_private_car:
        return t.NEW_PVT_CAR_MULTIPLIER
    if vehicle_class.is_two_wheeler:
        return t.NEW_TWO_WHEELER_MULTIPLIER
    return 1


def _required(value, field: str, vehicle_class: VehicleClass):
    if value is None:
        raise MissingMandatoryField(field, vehicle_class.value)
    return value


def private_basic_tp(
    vehicle_class: VehicleClass,
    power_type: PowerType,
    capacity: float,
    is_new_vehicle: bool,
) -> Decimal:
    """Basic TP for a private car or two-wheeler.

    ``capacity`` is cc for ICE and hybrid vehicles and the motor rating in
    kW for electric ones; electric vehicles band on the kW slabs.
    """
    electric = power_type is PowerType.ELECTRIC
    if vehicle_class.is_private_car:
        table = t.PVT_CAR_BASIC_TP_NEW if is_new_vehicle else t.PVT_CAR_BASIC_TP_RENEWAL
        thresholds = t.PVT_CAR_KW_THRESHOLDS if electric else t.PVT_CAR_CC_THRESHOLDS
        factor = t.PVT_CAR_POWER_FACTOR[power_type]
    else:
        table = t.TWO_WHEELER_BASIC_TP_NEW if is_new_vehicle else t.TWO_WHEELER_BASIC_TP_RENEWAL
        thresholds = t.TWO_WHEELER_KW_THRESHOLDS if electric else t.TWO_WHEELER_CC_THRESHOLDS
        factor = t.TWO_WHEELER_POWER_FACTOR[power_type]
    band = band_index(capacity, thresholds, closed_upper=True)
    return to_rupees(table[band] * factor)


def _basic_liability(quote: QuoteInput) -> tuple[Decimal, Decimal | None]:
    """(basic TP, passenger liability) for the vehicle's class."""
    v = quote.vehicle
    cls = v.vehicle_class

    if cls is VehicleClass.GCV4:
        gvw = _required(v.gross_vehicle_weight, "gross_vehicle_weight", cls)
        return band_value(gvw, t.GCV4_BASIC_TP, closed_upper=True), None

    if cls is VehicleClass.THREE_GCV:
        return t.THREE_GCV_BASIC_TP[v.power_type], None

    if cls is VehicleClass.THREE_PCV:
        nps = _required(v.passenger_capacity, "passenger_capacity", cls)
        basic, per_seat = t.THREE_PCV_TP[v.power_type]
        return basic, per_seat * nps

    if cls.is_bus:
        nps = _required(v.passenger_capacity, "passenger_capacity", cls)
        basic, per_seat = t.BUS_TP if cls is VehicleClass.BUS else t.SCHOOL_BUS_TP
        return basic, per_seat * nps

    if cls is VehicleClass.MISC:
        return t.MISC_BASIC_TP, None

    if cls is VehicleClass.TAXI:
        cc = _required(v.cubic_capacity, "cubic_capacity", cls)
        nps = _required(v.passenger_capacity, "passenger_capacity", cls)
        for upper, basic, per_seat in t.TAXI_TP:
            if upper is None or cc <= upper:
                return basic, per_seat * nps

    if cls in (VehicleClass.PVT_CAR, VehicleClass.TWO_WHEELER):
        cc = _required(v.cubic_capacity, "cubic_capacity", cls)
        return private_basic_tp(cls, v.power_type, cc, quote.is_new_vehicle), None

    raise UnsupportedVehicleClass(cls.value, v.power_type.value)


def compute_third_party(quote: QuoteInput) -> TPBreakdown:
    """TP line items for ``quote``; an empty breakdown for standalone OD."""
    v = quote.vehicle
    cls = v.vehicle_class
    if cls.is_standalone:
        return TPBreakdown()

    addons = quote.addons
    cover = quote.liability
    mult = new_vehicle_multiplier(cls, quote.is_new_vehicle)

    basic, passengers = _basic_liability(quote)
    lines: dict[str, Decimal] = {"basic_tp": to_money(basic)}
    if passengers:
        lines["passenger_liability"] = to_money(passengers)

    # ── Common side covers (multi-year on a new private vehicle) ──
    if addons.lpg_kit:
        lines["lpg_kit"] = to_money(t.LPG_KIT_TP * mult)
    if addons.geo_extension:
        lines["geo_extension"] = to_money(t.GEO_EXTENSION_TP * mult)
    if cover.paid_drivers:
        rate = t.PAID_DRIVER_CSI[cover.paid_driver_csi_tier]
        lines["paid_driver_cover"] = to_money(cover.paid_drivers * rate * mult)
    if cover.unnamed_passengers:
        rate = t.PASSENGER_CSI[cover.passenger_csi_tier]
        lines["passenger_cover"] = to_money(cover.unnamed_passengers * rate * mult)
    if cover.legal_liability_drivers:
        lines["legal_liability_driver"] = to_money(
            cover.legal_liability_drivers * t.LEGAL_LIABILITY_PER_DRIVER * mult
        )

    # ── Class-specific ──
    if cls in (VehicleClass.GCV4, VehicleClass.MISC) and addons.trailer_od_si:
        lines["trailer_tp"] = to_money(t.TRAILER_TP)

    if cover.pa_owner_driver_years is not None:
        lines["pa_owner_driver"] = to_money(t.PA_OWNER_DRIVER[cover.pa_owner_driver_years])

    logger.debug("TP for %s (multiplier %d): %s", cls, mult, lines)
    return TPBreakdown(**lines)
