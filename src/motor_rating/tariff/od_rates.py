"""Own-damage rate tables (% of IDV), 2024 tariff snapshot.

Tables are transcribed verbatim and must not be re-derived.  Age bands
are half-open ``[lo, hi)``; capacity bands are closed on the upper bound
(``cc <= 1000`` is the first band).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from motor_rating.config.enums import PowerType, VehicleClass, Zone


def _d(*values: str) -> tuple[Decimal, ...]:
    return tuple(Decimal(v) for v in values)


@dataclass(frozen=True)
class RateTable:
    """Zone × age band [× capacity band] → OD rate (%)."""

    name: str
    age_thresholds: tuple[float, ...]
    rates: Mapping[Zone, tuple]
    cc_thresholds: tuple[float, ...] | None = None

    @property
    def uses_capacity(self) -> bool:
        return self.cc_thresholds is not None

    def lookup(self, zone: Zone, age_band: int, cc_band: int | None = None) -> Decimal:
        row = self.rates[zone][age_band]
        if self.uses_capacity:
            return row[cc_band]
        return row

    def cells(self) -> list[tuple[Zone, int, int | None, Decimal]]:
        """Every (zone, age band, cc band, rate) cell of the table."""
        out = []
        for zone, rows in self.rates.items():
            for age_band, row in enumerate(rows):
                if self.uses_capacity:
                    out.extend((zone, age_band, cc_band, rate) for cc_band, rate in enumerate(row))
                else:
                    out.append((zone, age_band, None, row))
        return out


# ── Band thresholds ───────────────────────────────────────────────────
AGE_5_7 = (5.0, 7.0)
AGE_5_10 = (5.0, 10.0)
CC_CAR = (1000.0, 1500.0)
CC_TWO_WHEELER = (150.0, 350.0)


# ── Goods carrying vehicle (4W+) ─────────────────────────────────────
GCV4 = RateTable(
    name="GCV4",
    age_thresholds=AGE_5_7,
    rates=MappingProxyType({
        Zone.A: _d("1.751", "1.795", "1.839"),
        Zone.B: _d("1.743", "1.787", "1.830"),
        Zone.C: _d("1.726", "1.770", "1.812"),
    }),
)

# ── Private car ───────────────────────────────────────────────────────
PVT_CAR_ICE = RateTable(
    name="PvtCar ICE",
    age_thresholds=AGE_5_10,
    cc_thresholds=CC_CAR,
    rates=MappingProxyType({
        Zone.A: (
            _d("3.127", "3.283", "3.440"),
            _d("3.283", "3.447", "3.612"),
            _d("3.362", "3.529", "3.698"),
        ),
        Zone.B: (
            _d("3.039", "3.191", "3.343"),
            _d("3.191", "3.351", "3.510"),
            _d("3.267", "3.430", "3.594"),
        ),
        Zone.C: (
            _d("3.039", "3.191", "3.343"),
            _d("3.191", "3.351", "3.510"),
            _d("3.267", "3.430", "3.594"),
        ),
    }),
)

PVT_CAR_ELECTRIC = RateTable(
    name="PvtCar Electric",
    age_thresholds=AGE_5_10,
    rates=MappingProxyType({
        Zone.A: _d("3.283", "3.447", "3.529"),
        Zone.B: _d("3.191", "3.351", "3.430"),
        Zone.C: _d("3.191", "3.351", "3.430"),
    }),
)

# ── Two wheeler ───────────────────────────────────────────────────────
TWO_WHEELER_ICE = RateTable(
    name="TwoWheeler ICE",
    age_thresholds=AGE_5_10,
    cc_thresholds=CC_TWO_WHEELER,
    rates=MappingProxyType({
        Zone.A: (
            _d("1.708", "1.793", "1.879"),
            _d("1.793", "1.883", "1.973"),
            _d("1.836", "1.928", "2.020"),
        ),
        Zone.B: (
            _d("1.676", "1.760", "1.844"),
            _d("1.760", "1.848", "1.936"),
            _d("1.802", "1.892", "1.982"),
        ),
        Zone.C: (
            _d("1.676", "1.760", "1.844"),
            _d("1.760", "1.848", "1.936"),
            _d("1.802", "1.892", "1.982"),
        ),
    }),
)

TWO_WHEELER_ELECTRIC = RateTable(
    name="TwoWheeler Electric",
    age_thresholds=AGE_5_10,
    rates=MappingProxyType({
        Zone.A: _d("1.793", "1.883", "1.928"),
        Zone.B: _d("1.760", "1.848", "1.892"),
        Zone.C: _d("1.760", "1.848", "1.892"),
    }),
)

# ── Taxi ──────────────────────────────────────────────────────────────
TAXI = RateTable(
    name="Taxi",
    age_thresholds=AGE_5_7,
    cc_thresholds=CC_CAR,
    rates=MappingProxyType({
        Zone.A: (
            _d("3.284", "3.448", "3.612"),
            _d("3.366", "3.534", "3.703"),
            _d("3.448", "3.620", "3.793"),
        ),
        Zone.B: (
            _d("3.191", "3.351", "3.510"),
            _d("3.271", "3.435", "3.598"),
            _d("3.351", "3.519", "3.686"),
        ),
        Zone.C: (
            _d("3.191", "3.351", "3.510"),
            _d("3.271", "3.435", "3.598"),
            _d("3.351", "3.519", "3.686"),
        ),
    }),
)

# ── Bus / school bus ──────────────────────────────────────────────────
BUS = RateTable(
    name="Bus",
    age_thresholds=AGE_5_7,
    rates=MappingProxyType({
        Zone.A: _d("1.680", "1.722", "1.764"),
        Zone.B: _d("1.672", "1.714", "1.756"),
        Zone.C: _d("1.656", "1.697", "1.739"),
    }),
)

# ── Miscellaneous ─────────────────────────────────────────────────────
MISC = RateTable(
    name="Misc",
    age_thresholds=AGE_5_7,
    rates=MappingProxyType({
        Zone.A: _d("1.208", "1.238", "1.268"),
        Zone.B: _d("1.202", "1.232", "1.262"),
        Zone.C: _d("1.190", "1.220", "1.250"),
    }),
)

# ── Three wheelers ────────────────────────────────────────────────────
THREE_GCV = RateTable(
    name="ThreeGCV",
    age_thresholds=AGE_5_7,
    rates=MappingProxyType({
        Zone.A: _d("1.664", "1.706", "1.747"),
        Zone.B: _d("1.656", "1.697", "1.739"),
        Zone.C: _d("1.640", "1.681", "1.722"),
    }),
)

THREE_PCV = RateTable(
    name="ThreePCV",
    age_thresholds=AGE_5_7,
    rates=MappingProxyType({
        Zone.A: _d("1.278", "1.310", "1.342"),
        Zone.B: _d("1.272", "1.304", "1.336"),
        Zone.C: _d("1.260", "1.292", "1.323"),
    }),
)


# ── Registry: (class, power) → table ─────────────────────────────────
# Hybrid private vehicles rate on the ICE table; three-wheeler OD does not
# vary by power type.  Missing combinations have no tariff entry.
OD_RATE_TABLES: Mapping[tuple[VehicleClass, PowerType], RateTable] = MappingProxyType({
    (VehicleClass.GCV4, PowerType.ICE): GCV4,
    (VehicleClass.PVT_CAR, PowerType.ICE): PVT_CAR_ICE,
    (VehicleClass.PVT_CAR, PowerType.HYBRID): PVT_CAR_ICE,
    (VehicleClass.PVT_CAR, PowerType.ELECTRIC): PVT_CAR_ELECTRIC,
    (VehicleClass.PVT_CAR_STANDALONE, PowerType.ICE): PVT_CAR_ICE,
    (VehicleClass.PVT_CAR_STANDALONE, PowerType.HYBRID): PVT_CAR_ICE,
    (VehicleClass.PVT_CAR_STANDALONE, PowerType.ELECTRIC): PVT_CAR_ELECTRIC,
    (VehicleClass.TWO_WHEELER, PowerType.ICE): TWO_WHEELER_ICE,
    (VehicleClass.TWO_WHEELER, PowerType.HYBRID): TWO_WHEELER_ICE,
    (VehicleClass.TWO_WHEELER, PowerType.ELECTRIC): TWO_WHEELER_ELECTRIC,
    (VehicleClass.TWO_WHEELER_STANDALONE, PowerType.ICE): TWO_WHEELER_ICE,
    (VehicleClass.TWO_WHEELER_STANDALONE, PowerType.HYBRID): TWO_WHEELER_ICE,
    (VehicleClass.TWO_WHEELER_STANDALONE, PowerType.ELECTRIC): TWO_WHEELER_ELECTRIC,
    (VehicleClass.TAXI, PowerType.ICE): TAXI,
    (VehicleClass.BUS, PowerType.ICE): BUS,
    (VehicleClass.SCHOOL_BUS, PowerType.ICE): BUS,
    (VehicleClass.MISC, PowerType.ICE): MISC,
    (VehicleClass.THREE_GCV, PowerType.ICE): THREE_GCV,
    (VehicleClass.THREE_GCV, PowerType.ELECTRIC): THREE_GCV,
    (VehicleClass.THREE_PCV, PowerType.ICE): THREE_PCV,
    (VehicleClass.THREE_PCV, PowerType.ELECTRIC): THREE_PCV,
})
