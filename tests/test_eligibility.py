"""Tests for engine/eligibility.py — advisory add-on availability."""

from __future__ import annotations

import pytest

from motor_rating.config import PowerType, VehicleClass
from motor_rating.engine.eligibility import pa_owner_driver_tenures, resolve_eligibility

# Offered to every non-standalone class regardless of age.
COMMON = {"lpg_kit", "geo_extension", "legal_liability_driver", "paid_driver_cover", "pa_owner_driver"}


class TestPrivateCar:

    def test_age_between_2_5_and_4_5(self):
        got = resolve_eligibility(VehicleClass.PVT_CAR, 3.0).enabled()
        assert got == COMMON | {
            "road_side_assistance", "ncb_protection", "passenger_cover",
            "nil_dep", "consumables", "key_loss", "engine_protect", "tyre_plan",
        }

    def test_under_2_5_adds_return_to_invoice(self):
        assert resolve_eligibility(VehicleClass.PVT_CAR, 2.49).return_to_invoice
        assert not resolve_eligibility(VehicleClass.PVT_CAR, 2.5).return_to_invoice

    def test_4_5_to_6_5_only_nil_dep(self):
        e = resolve_eligibility(VehicleClass.PVT_CAR, 4.5)
        assert e.nil_dep and e.road_side_assistance and e.ncb_protection
        assert not e.consumables and not e.engine_protect

    def test_6_5_is_inclusive(self):
        assert resolve_eligibility(VehicleClass.PVT_CAR, 6.5).nil_dep

    def test_older_than_6_5(self):
        e = resolve_eligibility(VehicleClass.PVT_CAR, 7.0)
        assert not e.nil_dep
        assert e.employee_compensation

    @pytest.mark.parametrize("power_type", [PowerType.ELECTRIC, PowerType.HYBRID])
    def test_ev_protect_for_electrified(self, power_type):
        assert resolve_eligibility(VehicleClass.PVT_CAR, 3.0, power_type=power_type).ev_protect

    def test_no_ev_protect_for_ice(self):
        assert not resolve_eligibility(VehicleClass.PVT_CAR, 3.0).ev_protect


class TestCommercial:

    def test_gcv4_young(self):
        e = resolve_eligibility(VehicleClass.GCV4, 1.0)
        assert e.enabled() == COMMON | {
            "employee_compensation", "road_side_assistance", "towing", "trailer_od", "imt23",
            "nil_dep", "consumables", "return_to_invoice",
        }

    def test_gcv4_old(self):
        e = resolve_eligibility(VehicleClass.GCV4, 5.0)
        assert not e.nil_dep and e.towing

    def test_three_wheeler_towing_only_when_old(self):
        assert not resolve_eligibility(VehicleClass.THREE_PCV, 3.0).towing
        assert resolve_eligibility(VehicleClass.THREE_GCV, 5.0).towing

    def test_taxi(self):
        e = resolve_eligibility(VehicleClass.TAXI, 3.0)
        assert e.nil_dep and e.key_loss and e.consumables
        assert not e.engine_protect and not e.return_to_invoice
        assert not e.passenger_cover

    def test_misc(self):
        assert resolve_eligibility(VehicleClass.MISC, 4.49).nil_dep
        assert not resolve_eligibility(VehicleClass.MISC, 4.5).nil_dep
        assert resolve_eligibility(VehicleClass.MISC, 9.0).own_trailer


class TestBus:

    def test_large_bus(self):
        e = resolve_eligibility(VehicleClass.BUS, 1.0, passenger_capacity=20)
        assert e.nil_dep and e.consumables and e.return_to_invoice
        assert not e.engine_protect and not e.key_loss

    def test_small_bus_gets_engine_protect_and_key_loss(self):
        e = resolve_eligibility(VehicleClass.SCHOOL_BUS, 1.0, passenger_capacity=17)
        assert e.engine_protect and e.key_loss

    def test_old_bus(self):
        e = resolve_eligibility(VehicleClass.BUS, 5.0, passenger_capacity=10)
        assert not e.nil_dep and not e.engine_protect
        assert e.towing and e.imt23

    def test_unknown_seats_offers_base_covers_only(self):
        e = resolve_eligibility(VehicleClass.BUS, 1.0)
        assert not e.nil_dep
        assert e.road_side_assistance


class TestTwoWheelerAndStandalone:

    def test_two_wheeler_young(self):
        e = resolve_eligibility(VehicleClass.TWO_WHEELER, 1.0)
        assert e.tyre_plan and e.return_to_invoice and e.passenger_cover

    def test_two_wheeler_mid_age_has_no_tyre_plan(self):
        e = resolve_eligibility(VehicleClass.TWO_WHEELER, 3.0)
        assert e.engine_protect and not e.tyre_plan

    def test_standalone_has_no_liability_covers(self):
        e = resolve_eligibility(VehicleClass.TWO_WHEELER_STANDALONE, 1.0)
        assert not e.legal_liability_driver and not e.pa_owner_driver and not e.passenger_cover
        assert e.pa_owner_driver_tenures == []


class TestPATenures:

    def test_new_vehicle_tenures(self):
        assert pa_owner_driver_tenures(VehicleClass.PVT_CAR, True) == [1, 3]
        assert pa_owner_driver_tenures(VehicleClass.TWO_WHEELER, True) == [1, 5]

    def test_renewal_and_commercial_one_year(self):
        assert pa_owner_driver_tenures(VehicleClass.PVT_CAR, False) == [1]
        assert pa_owner_driver_tenures(VehicleClass.TAXI, True) == [1]

    def test_resolved_with_eligibility(self):
        e = resolve_eligibility(VehicleClass.PVT_CAR, 0.0, is_new_vehicle=True)
        assert e.pa_owner_driver_tenures == [1, 3]
