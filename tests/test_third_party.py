"""Tests for engine/third_party.py — TP liability and side covers."""

from __future__ import annotations

from decimal import Decimal

import pytest

from motor_rating.config import AddonSelection, LiabilityCovers, PowerType, VehicleClass
from motor_rating.engine.third_party import _basic_liability, compute_third_party, new_vehicle_multiplier
from motor_rating.errors import UnsupportedVehicleClass
from motor_rating.models.results import TPBreakdown

from conftest import QUOTE_DATE

D = Decimal


class TestBasicLiability:

    @pytest.mark.parametrize("gvw,expected", [
        (7_500, D("16049.00")),
        (7_501, D("27186.00")),
        (12_000, D("27186.00")),
        (15_000, D("35313.00")),
        (40_000, D("43950.00")),
        (40_001, D("44242.00")),
    ])
    def test_gcv4_weight_tiers(self, make_quote, gvw, expected):
        tp = compute_third_party(make_quote(VehicleClass.GCV4, gross_vehicle_weight=gvw))
        assert tp.basic_tp == expected
        assert tp.passenger_liability is None

    def test_taxi_cc_band_and_seats(self, make_quote):
        # 1001–1500 cc: 7940 + 4 × 978
        tp = compute_third_party(make_quote(VehicleClass.TAXI, cubic_capacity=1200, passenger_capacity=4))
        assert tp.basic_tp == D("7940.00")
        assert tp.passenger_liability == D("3912.00")

    def test_bus_and_school_bus(self, make_quote):
        bus = compute_third_party(make_quote(VehicleClass.BUS, passenger_capacity=20))
        school = compute_third_party(make_quote(VehicleClass.SCHOOL_BUS, passenger_capacity=20))
        assert (bus.basic_tp, bus.passenger_liability) == (D("14343.00"), D("17540.00"))
        assert (school.basic_tp, school.passenger_liability) == (D("12192.00"), D("14900.00"))

    def test_three_wheelers_by_power(self, make_quote):
        goods = compute_third_party(make_quote(VehicleClass.THREE_GCV, power_type=PowerType.ELECTRIC))
        assert goods.basic_tp == D("3139.00")
        passenger = compute_third_party(
            make_quote(VehicleClass.THREE_PCV, power_type=PowerType.ELECTRIC, passenger_capacity=3)
        )
        # 1539 + 3 × 737
        assert passenger.basic_tp == D("1539.00")
        assert passenger.passenger_liability == D("2211.00")

    def test_misc_with_trailer(self, make_quote):
        tp = compute_third_party(make_quote(VehicleClass.MISC, addons=AddonSelection(trailer_od_si=D(100_000))))
        assert tp.basic_tp == D("7267.00")
        assert tp.trailer_tp == D("2485.00")

    def test_trailer_tp_only_for_goods_and_misc(self, make_quote):
        tp = compute_third_party(
            make_quote(VehicleClass.PVT_CAR, cubic_capacity=1200, addons=AddonSelection(trailer_od_si=D(100_000)))
        )
        assert tp.trailer_tp is None


class TestPrivateVehicles:

    def test_private_car_renewal(self, make_quote):
        tp = compute_third_party(make_quote(VehicleClass.PVT_CAR, cubic_capacity=1200))
        assert tp.basic_tp == D("3416.00")

    def test_new_private_car_multi_year(self, make_quote):
        quote = make_quote(
            VehicleClass.PVT_CAR,
            registration_date=QUOTE_DATE,
            cubic_capacity=1200,
            addons=AddonSelection(lpg_kit=True, geo_extension=True),
            liability=LiabilityCovers(paid_drivers=1, legal_liability_drivers=1, unnamed_passengers=4,
                                      passenger_csi_tier=1),
        )
        tp = compute_third_party(quote)
        assert tp.basic_tp == D("10640.00")
        assert tp.lpg_kit == D("180.00")              # 60 × 3
        assert tp.geo_extension == D("300.00")        # 100 × 3
        assert tp.paid_driver_cover == D("360.00")    # 1 × 120 × 3
        assert tp.legal_liability_driver == D("150.00")  # 1 × 50 × 3
        assert tp.passenger_cover == D("600.00")      # 4 × 50 × 3

    def test_new_two_wheeler_multi_year(self, make_quote):
        quote = make_quote(
            VehicleClass.TWO_WHEELER,
            registration_date=QUOTE_DATE,
            cubic_capacity=125,
            addons=AddonSelection(lpg_kit=True),
        )
        tp = compute_third_party(quote)
        assert tp.basic_tp == D("3851.00")
        assert tp.lpg_kit == D("300.00")              # 60 × 5

    def test_two_wheeler_cc_bands_closed_upper(self, make_quote):
        basic = lambda cc: compute_third_party(make_quote(VehicleClass.TWO_WHEELER, cubic_capacity=cc)).basic_tp
        assert basic(75) == D("538.00")
        assert basic(76) == D("714.00")
        assert basic(350) == D("1366.00")
        assert basic(351) == D("2804.00")

    def test_multiplier_only_for_new_private(self):
        assert new_vehicle_multiplier(VehicleClass.PVT_CAR, True) == 3
        assert new_vehicle_multiplier(VehicleClass.TWO_WHEELER, True) == 5
        assert new_vehicle_multiplier(VehicleClass.TAXI, True) == 1
        assert new_vehicle_multiplier(VehicleClass.PVT_CAR, False) == 1

    def test_other_classes_take_no_multiplier(self, make_quote):
        quote = make_quote(
            VehicleClass.TAXI, registration_date=QUOTE_DATE, cubic_capacity=900, passenger_capacity=4,
            addons=AddonSelection(lpg_kit=True),
        )
        assert compute_third_party(quote).lpg_kit == D("60.00")


class TestPowerType:

    def test_electric_car_kw_bands(self, make_quote):
        basic = lambda kw: compute_third_party(
            make_quote(VehicleClass.PVT_CAR, power_type=PowerType.ELECTRIC, cubic_capacity=kw)
        ).basic_tp
        assert basic(30) == D("1780.00")     # 2094 × 0.85 = 1779.9
        assert basic(40) == D("2904.00")     # 3416 × 0.85 = 2903.6
        assert basic(66) == D("6712.00")     # 7897 × 0.85 = 6712.45

    def test_electric_two_wheeler_kw_bands(self, make_quote):
        basic = lambda kw: compute_third_party(
            make_quote(VehicleClass.TWO_WHEELER, power_type=PowerType.ELECTRIC, cubic_capacity=kw)
        ).basic_tp
        assert basic(3) == D("457.00")       # 538 × 0.85 = 457.3
        assert basic(5) == D("607.00")       # 714 × 0.85 = 606.9
        assert basic(17) == D("2383.00")     # 2804 × 0.85 = 2383.4

    def test_hybrid_car_derate(self, make_quote):
        tp = compute_third_party(make_quote(VehicleClass.PVT_CAR, power_type=PowerType.HYBRID, cubic_capacity=1200))
        assert tp.basic_tp == D("3160.00")   # 3416 × 0.925 = 3159.8

    def test_hybrid_two_wheeler_not_derated(self, make_quote):
        tp = compute_third_party(
            make_quote(VehicleClass.TWO_WHEELER, power_type=PowerType.HYBRID, cubic_capacity=200)
        )
        assert tp.basic_tp == D("1366.00")


class TestStandaloneAndPA:

    @pytest.mark.parametrize("vehicle_class", [VehicleClass.PVT_CAR_STANDALONE, VehicleClass.TWO_WHEELER_STANDALONE])
    def test_standalone_has_no_tp(self, make_quote, vehicle_class):
        quote = make_quote(
            vehicle_class, cubic_capacity=1200,
            addons=AddonSelection(lpg_kit=True),
            liability=LiabilityCovers(pa_owner_driver_years=1, paid_drivers=2),
        )
        tp = compute_third_party(quote)
        assert tp == TPBreakdown()
        assert tp.line_items() == {}

    @pytest.mark.parametrize("years,expected", [(1, D("275.00")), (3, D("705.00")), (5, D("1100.00"))])
    def test_pa_owner_driver(self, make_quote, years, expected):
        quote = make_quote(VehicleClass.MISC, liability=LiabilityCovers(pa_owner_driver_years=years))
        assert compute_third_party(quote).pa_owner_driver == expected

    def test_paid_driver_tier_one(self, make_quote):
        quote = make_quote(VehicleClass.GCV4, gross_vehicle_weight=5000,
                           liability=LiabilityCovers(paid_drivers=2, paid_driver_csi_tier=1))
        assert compute_third_party(quote).paid_driver_cover == D("120.00")

    def test_class_without_liability_table_is_typed_error(self, make_quote):
        quote = make_quote(VehicleClass.PVT_CAR_STANDALONE, cubic_capacity=1200)
        with pytest.raises(UnsupportedVehicleClass) as exc:
            _basic_liability(quote)
        assert exc.value.details == {"vehicle_class": "PvtCarStandalone", "power_type": "ICE"}
