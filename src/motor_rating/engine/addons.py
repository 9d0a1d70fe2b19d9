"""Add-on premiums.

Each function returns a 2 dp amount, or ``None`` when the class has no
rate for the cover or the vehicle is past the last age band.  Selection
is decided by the caller; nothing here checks eligibility.
"""

from __future__ import annotations

from decimal import Decimal

from motor_rating.config.enums import PowerType, VehicleClass
from motor_rating.engine.bands import band_value
from motor_rating.engine.money import to_money
from motor_rating.tariff import addon_rates as r


# ═══════════════════════════════════════════════════════════════════════════
# Age-banded add-ons
# ═══════════════════════════════════════════════════════════════════════════

def nil_dep_premium(
    vehicle_class: VehicleClass,
    age: float,
    basic_od: Decimal,
    electrical_accessories_si: Decimal | None = None,
) -> Decimal | None:
    """(basic OD + accessories × 4%) × age-banded rate.

    Bands are closed on the upper bound: exactly 0.5 years is still the
    first band.
    """
    bands = r.NIL_DEP_PRIVATE if vehicle_class.is_private else r.NIL_DEP_COMMERCIAL
    rate = band_value(age, bands, closed_upper=True)
    if rate is None:
        return None
    base = basic_od + (electrical_accessories_si or Decimal(0)) * r.ELECTRICAL_ACCESSORIES_RATE
    return to_money(base * rate)


def _engine_protect_bands(vehicle_class: VehicleClass) -> r.AgeBands | None:
    if vehicle_class.is_private_car:
        return r.ENGINE_PROTECT_CAR
    if vehicle_class.is_two_wheeler:
        return r.ENGINE_PROTECT_TWO_WHEELER
    if vehicle_class is VehicleClass.TAXI or vehicle_class.is_bus:
        return r.ENGINE_PROTECT_TAXI_BUS
    return None


def engine_protect_premium(vehicle_class: VehicleClass, age: float, idv: Decimal) -> Decimal | None:
    bands = _engine_protect_bands(vehicle_class)
    if bands is None:
        return None
    rate = band_value(age, bands)
    return to_money(idv * rate) if rate is not None else None


def consumables_premium(vehicle_class: VehicleClass, age: float, idv: Decimal) -> Decimal | None:
    bands = r.CONSUMABLES_PRIVATE if vehicle_class.is_private else r.CONSUMABLES_COMMERCIAL
    rate = band_value(age, bands)
    return to_money(idv * rate) if rate is not None else None


def _return_to_invoice_bands(vehicle_class: VehicleClass) -> r.AgeBands | None:
    if vehicle_class.is_private or vehicle_class in (VehicleClass.GCV4, VehicleClass.TAXI):
        return r.RETURN_TO_INVOICE_STANDARD
    if vehicle_class is VehicleClass.MISC:
        return r.RETURN_TO_INVOICE_MISC
    if vehicle_class.is_bus:
        return r.RETURN_TO_INVOICE_BUS
    return None


def return_to_invoice_premium(vehicle_class: VehicleClass, age: float, idv: Decimal) -> Decimal | None:
    bands = _return_to_invoice_bands(vehicle_class)
    if bands is None:
        return None
    rate = band_value(age, bands)
    return to_money(idv * rate) if rate is not None else None


def ev_protect_premium(power_type: PowerType, age: float, idv: Decimal) -> Decimal | None:
    """Battery / drive-train cover; only electrified vehicles are rated."""
    if power_type is PowerType.ELECTRIC:
        bands = r.EV_PROTECT_ELECTRIC
    elif power_type is PowerType.HYBRID:
        bands = r.EV_PROTECT_HYBRID
    else:
        return None
    return to_money(idv * band_value(age, bands))


# ═══════════════════════════════════════════════════════════════════════════
# Flat and simple-rate add-ons
# ═══════════════════════════════════════════════════════════════════════════

def key_loss_premium(vehicle_class: VehicleClass) -> Decimal:
    return to_money(r.KEY_LOSS_TWO_WHEELER if vehicle_class.is_two_wheeler else r.KEY_LOSS_DEFAULT)


def employee_compensation_premium(vehicle_class: VehicleClass, sum_insured: Decimal) -> Decimal:
    if vehicle_class.is_two_wheeler:
        rate = r.EMPLOYEE_COMPENSATION_TWO_WHEELER
    elif vehicle_class.is_private_car or vehicle_class is VehicleClass.TAXI:
        rate = r.EMPLOYEE_COMPENSATION_CAR_TAXI
    else:
        rate = r.EMPLOYEE_COMPENSATION_DEFAULT
    return to_money(sum_insured * rate)


def road_side_assistance_premium(vehicle_class: VehicleClass) -> Decimal | None:
    amount = r.ROAD_SIDE_ASSISTANCE.get(vehicle_class)
    return to_money(amount) if amount is not None else None


def tyre_plan_premium(tier: int) -> Decimal:
    return to_money(r.TYRE_PLAN[tier])


def ncb_protection_premium(vehicle_class: VehicleClass, idv: Decimal) -> Decimal:
    rate = r.NCB_PROTECTION_CAR if vehicle_class.is_private_car else r.NCB_PROTECTION_DEFAULT
    return to_money(idv * rate)


def lpg_kit_od_premium(basic_od: Decimal, od_discount: Decimal) -> Decimal:
    return to_money((basic_od + od_discount) * r.LPG_KIT_OD_RATE)


def own_trailer_premium(idv: Decimal) -> Decimal:
    return to_money(idv * r.OWN_TRAILER_RATE)


def towing_premium(sum_insured: Decimal) -> Decimal:
    rate = r.TOWING_RATE_LOW if sum_insured <= r.TOWING_THRESHOLD else r.TOWING_RATE_HIGH
    return to_money(sum_insured * rate)
