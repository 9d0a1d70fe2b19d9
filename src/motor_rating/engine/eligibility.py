"""Eligibility resolver — which covers may be offered, not what they cost.

One decision table per class, using the same age breakpoints as the
pricing bands (2.5, 4.5, 6.5 years).  The result is advisory: pricing
trusts the selection flags it is given.
"""

from __future__ import annotations

from motor_rating.config.enums import PowerType, VehicleClass
from motor_rating.models.results import AddonEligibility

BUS_SMALL_MAX_PASSENGERS = 17


def _gcv4(age: float, nps: int | None) -> set[str]:
    covers = {"employee_compensation", "road_side_assistance", "towing", "trailer_od", "imt23"}
    if age < 2.5:
        covers |= {"nil_dep", "consumables", "return_to_invoice"}
    elif age <= 4.5:
        covers |= {"nil_dep", "consumables"}
    return covers


def _three_wheeler(age: float, nps: int | None) -> set[str]:
    covers = {"employee_compensation", "road_side_assistance", "imt23"}
    if age < 2.5:
        covers |= {"nil_dep", "consumables", "return_to_invoice"}
    elif age <= 4.5:
        covers |= {"nil_dep", "consumables"}
    else:
        covers.add("towing")
    return covers


def _private_car(age: float, nps: int | None) -> set[str]:
    covers = {"road_side_assistance", "ncb_protection"}
    if age < 2.5:
        covers |= {"nil_dep", "consumables", "key_loss", "engine_protect", "tyre_plan", "return_to_invoice"}
    elif age < 4.5:
        covers |= {"nil_dep", "consumables", "key_loss", "engine_protect", "tyre_plan"}
    elif age <= 6.5:
        covers.add("nil_dep")
    else:
        covers.add("employee_compensation")
    return covers


def _taxi(age: float, nps: int | None) -> set[str]:
    covers = {"road_side_assistance", "ncb_protection", "employee_compensation"}
    if age < 2.5:
        covers |= {"nil_dep", "consumables", "engine_protect", "return_to_invoice", "key_loss"}
    elif age <= 4.5:
        covers |= {"nil_dep", "consumables", "key_loss"}
    return covers


def _two_wheeler(age: float, nps: int | None) -> set[str]:
    covers = {"road_side_assistance", "employee_compensation"}
    if age < 2.5:
        covers |= {"nil_dep", "consumables", "key_loss", "engine_protect", "tyre_plan", "return_to_invoice"}
    elif age < 4.5:
        covers |= {"nil_dep", "consumables", "key_loss", "engine_protect"}
    elif age <= 6.5:
        covers.add("nil_dep")
    return covers


def _bus(age: float, nps: int | None) -> set[str]:
    covers = {"road_side_assistance", "employee_compensation", "towing", "imt23"}
    if nps is None:
        return covers
    small = nps <= BUS_SMALL_MAX_PASSENGERS
    if age < 2.5:
        covers |= {"nil_dep", "consumables", "return_to_invoice"}
    elif age <= 4.5:
        covers |= {"nil_dep", "consumables"}
    else:
        return covers
    if small:
        covers |= {"engine_protect", "key_loss"}
    return covers


def _misc(age: float, nps: int | None) -> set[str]:
    covers = {"employee_compensation", "trailer_od", "own_trailer", "imt23"}
    if age < 4.5:
        covers |= {"nil_dep", "consumables"}
    return covers


_CLASS_RULES = {
    VehicleClass.GCV4: _gcv4,
    VehicleClass.THREE_GCV: _three_wheeler,
    VehicleClass.THREE_PCV: _three_wheeler,
    VehicleClass.PVT_CAR: _private_car,
    VehicleClass.PVT_CAR_STANDALONE: _private_car,
    VehicleClass.TAXI: _taxi,
    VehicleClass.TWO_WHEELER: _two_wheeler,
    VehicleClass.TWO_WHEELER_STANDALONE: _two_wheeler,
    VehicleClass.BUS: _bus,
    VehicleClass.SCHOOL_BUS: _bus,
    VehicleClass.MISC: _misc,
}


def pa_owner_driver_tenures(vehicle_class: VehicleClass, is_new_vehicle: bool) -> list[int]:
    """Tenures that may be offered: 3 years on a new car, 5 on a new two-wheeler."""
    if is_new_vehicle and vehicle_class is VehicleClass.PVT_CAR:
        return [1, 3]
    if is_new_vehicle and vehicle_class is VehicleClass.TWO_WHEELER:
        return [1, 5]
    return [1]


def resolve_eligibility(
    vehicle_class: VehicleClass,
    age: float,
    passenger_capacity: int | None = None,
    power_type: PowerType = PowerType.ICE,
    is_new_vehicle: bool = False,
) -> AddonEligibility:
    covers = _CLASS_RULES[vehicle_class](age, passenger_capacity)
    covers |= {"lpg_kit", "geo_extension"}

    if vehicle_class.is_private_car and power_type.is_electrified:
        covers.add("ev_protect")

    tenures: list[int] = []
    if not vehicle_class.is_standalone:
        covers |= {"legal_liability_driver", "paid_driver_cover", "pa_owner_driver"}
        tenures = pa_owner_driver_tenures(vehicle_class, is_new_vehicle)
    if vehicle_class in (VehicleClass.PVT_CAR, VehicleClass.TWO_WHEELER):
        covers.add("passenger_cover")

    return AddonEligibility(**{name: True for name in covers}, pa_owner_driver_tenures=tenures)
