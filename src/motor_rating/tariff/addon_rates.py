"""Own-damage loadings and add-on rates, 2024 snapshot.

Age bands are ``(upper_bound, rate)`` pairs.  NilDep bands are closed on
the upper bound; every other band list is half-open ``[lo, hi)``.  An
upper bound of ``None`` is open-ended.  Rates are fractions of the
premium base (base OD or IDV), not percentages.
"""

from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType

from motor_rating.config.enums import VehicleClass

D = Decimal

AgeBands = tuple[tuple[float | None, Decimal], ...]

# ── OD loadings ───────────────────────────────────────────────────────
GCV_GVW_THRESHOLD = D(12000)
GCV_EXCESS_GVW_RATE = D("0.27")            # ₹ per kg above threshold

# (max passengers, loading)
BUS_PASSENGER_LOADING: tuple[tuple[int | None, Decimal], ...] = (
    (18, D(350)),
    (36, D(450)),
    (60, D(550)),
    (None, D(680)),
)
BUS_MIN_PASSENGERS = 7
TAXI_MAX_PASSENGERS = 6

ELECTRICAL_ACCESSORIES_RATE = D("0.04")
TRAILER_OD_RATE = D("0.0105")
IMT23_RATE = D("0.15")

# ── Nil depreciation (fraction of base OD + accessories), upper-inclusive
NIL_DEP_COMMERCIAL: AgeBands = (
    (0.5, D("0.10")),
    (1.5, D("0.20")),
    (2.5, D("0.30")),
    (4.5, D("0.40")),
)
NIL_DEP_PRIVATE: AgeBands = (
    (0.5, D("0.10")),
    (1.5, D("0.20")),
    (4.5, D("0.30")),
    (6.5, D("0.40")),
)

# ── Engine protect (fraction of IDV) ─────────────────────────────────
ENGINE_PROTECT_CAR: AgeBands = (
    (0.5, D("0.0013")),
    (1.5, D("0.0016")),
    (2.5, D("0.0021")),
    (3.5, D("0.0027")),
    (4.5, D("0.0032")),
)
ENGINE_PROTECT_TWO_WHEELER: AgeBands = (
    (0.5, D("0.0007")),
    (1.5, D("0.0009")),
    (2.5, D("0.0012")),
    (3.5, D("0.0017")),
    (4.5, D("0.0022")),
)
ENGINE_PROTECT_TAXI_BUS: AgeBands = (
    (0.5, D("0.0015")),
    (1.5, D("0.0020")),
    (2.5, D("0.0026")),
)

# ── Consumables (fraction of IDV) ────────────────────────────────────
CONSUMABLES_PRIVATE: AgeBands = (
    (0.5, D("0.0010")),
    (1.5, D("0.0012")),
    (2.5, D("0.0015")),
    (3.5, D("0.0017")),
    (4.5, D("0.0020")),
)
CONSUMABLES_COMMERCIAL: AgeBands = (
    (0.5, D("0.0015")),
    (1.5, D("0.0018")),
    (2.5, D("0.0022")),
    (3.5, D("0.0025")),
    (4.5, D("0.0030")),
)

# ── Return to invoice (fraction of IDV) ──────────────────────────────
RETURN_TO_INVOICE_STANDARD: AgeBands = (
    (0.5, D("0.0015")),
    (1.5, D("0.0020")),
    (2.5, D("0.0025")),
)
RETURN_TO_INVOICE_MISC: AgeBands = (
    (0.5, D("0.0010")),
    (1.5, D("0.0015")),
    (2.5, D("0.0020")),
)
RETURN_TO_INVOICE_BUS: AgeBands = (
    (0.5, D("0.0020")),
    (1.5, D("0.0025")),
    (2.5, D("0.0030")),
)

# ── EV protect (fraction of IDV); last band open-ended ───────────────
EV_PROTECT_ELECTRIC: AgeBands = (
    (0.5, D("0.0025")),
    (1.5, D("0.0030")),
    (2.5, D("0.0035")),
    (3.5, D("0.0040")),
    (None, D("0.0050")),
)
EV_PROTECT_HYBRID: AgeBands = (
    (0.5, D("0.0015")),
    (1.5, D("0.0020")),
    (2.5, D("0.0025")),
    (3.5, D("0.0030")),
    (None, D("0.0035")),
)

# ── Flat and simple-rate add-ons ─────────────────────────────────────
KEY_LOSS_TWO_WHEELER = D(50)
KEY_LOSS_DEFAULT = D(750)

EMPLOYEE_COMPENSATION_TWO_WHEELER = D("0.02")
EMPLOYEE_COMPENSATION_CAR_TAXI = D("0.066")
EMPLOYEE_COMPENSATION_DEFAULT = D("0.03")

ROAD_SIDE_ASSISTANCE = MappingProxyType({
    VehicleClass.TWO_WHEELER: D(25),
    VehicleClass.TWO_WHEELER_STANDALONE: D(25),
    VehicleClass.PVT_CAR: D(50),
    VehicleClass.PVT_CAR_STANDALONE: D(50),
    VehicleClass.TAXI: D(75),
    VehicleClass.GCV4: D(200),
})

TYRE_PLAN = MappingProxyType({1: D(1000), 2: D(2000), 3: D(4000), 4: D(8000)})

NCB_PROTECTION_CAR = D("0.0015")
NCB_PROTECTION_DEFAULT = D("0.0024")

GEO_EXTENSION_OD = D(400)
LPG_KIT_OD_RATE = D("0.05")
OWN_TRAILER_RATE = D("0.005")

TOWING_THRESHOLD = D(10000)
TOWING_RATE_LOW = D("0.05")
TOWING_RATE_HIGH = D("0.075")

# ── Underwriting ──────────────────────────────────────────────────────
# Nil Dep on these classes forces the IMT 23 endorsement.
NIL_DEP_FORCES_IMT23 = frozenset({
    VehicleClass.GCV4,
    VehicleClass.BUS,
    VehicleClass.SCHOOL_BUS,
    VehicleClass.MISC,
})
# Above these ages Nil Dep is referred unless the proposer carries NCB.
# ThreePCV has no referral rule.
NIL_DEP_REFERRAL_COMMERCIAL = frozenset({
    VehicleClass.GCV4,
    VehicleClass.BUS,
    VehicleClass.SCHOOL_BUS,
    VehicleClass.MISC,
    VehicleClass.TAXI,
    VehicleClass.THREE_GCV,
})
NIL_DEP_REFERRAL_AGE_COMMERCIAL = 2.6
NIL_DEP_REFERRAL_AGE_PRIVATE = 4.6
