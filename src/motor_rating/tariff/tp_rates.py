"""Third-party liability tariff (IRDAI notified, ₹), 2024 snapshot.

Capacity tiers are closed on the upper bound; ``None`` marks the open
top tier.
"""

from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType

from motor_rating.config.enums import PowerType

D = Decimal

# ── Goods carrying vehicle: tiered by GVW (kg) ───────────────────────
GCV4_BASIC_TP: tuple[tuple[float | None, Decimal], ...] = (
    (7500, D(16049)),
    (12000, D(27186)),
    (20000, D(35313)),
    (40000, D(43950)),
    (None, D(44242)),
)

# ── Three wheelers ────────────────────────────────────────────────────
THREE_GCV_BASIC_TP = MappingProxyType({
    PowerType.ICE: D(4492),
    PowerType.ELECTRIC: D(3139),
})

# (basic TP, per-passenger liability)
THREE_PCV_TP = MappingProxyType({
    PowerType.ICE: (D(2371), D(1134)),
    PowerType.ELECTRIC: (D(1539), D(737)),
})

# ── Buses: (basic TP, per-passenger liability) ───────────────────────
BUS_TP = (D(14343), D(877))
SCHOOL_BUS_TP = (D(12192), D(745))

# ── Miscellaneous ─────────────────────────────────────────────────────
MISC_BASIC_TP = D(7267)

# ── Taxi: (cc upper bound, basic TP, per-passenger liability) ────────
TAXI_TP: tuple[tuple[float | None, Decimal, Decimal], ...] = (
    (1000, D(6040), D(1162)),
    (1500, D(7940), D(978)),
    (None, D(10523), D(1117)),
)

# ── Private car: new (3-year) vs renewal (1-year) ────────────────────
PVT_CAR_BASIC_TP_NEW = (D(6521), D(10640), D(24596))
PVT_CAR_BASIC_TP_RENEWAL = (D(2094), D(3416), D(7897))
PVT_CAR_CC_THRESHOLDS = (1000.0, 1500.0)
# Electric cars are banded on motor rating (kW), not cc.
PVT_CAR_KW_THRESHOLDS = (30.0, 65.0)

# ── Two wheeler: new (5-year) vs renewal (1-year) ────────────────────
TWO_WHEELER_BASIC_TP_NEW = (D(2901), D(3851), D(7365), D(15117))
TWO_WHEELER_BASIC_TP_RENEWAL = (D(538), D(714), D(1366), D(2804))
TWO_WHEELER_CC_THRESHOLDS = (75.0, 150.0, 350.0)
TWO_WHEELER_KW_THRESHOLDS = (3.0, 7.0, 16.0)

# ── Power-type derating of basic TP ──────────────────────────────────
PVT_CAR_POWER_FACTOR = MappingProxyType({
    PowerType.ICE: D(1),
    PowerType.ELECTRIC: D("0.85"),
    PowerType.HYBRID: D("0.925"),
})
TWO_WHEELER_POWER_FACTOR = MappingProxyType({
    PowerType.ICE: D(1),
    PowerType.ELECTRIC: D("0.85"),
    PowerType.HYBRID: D(1),
})

# ── Multi-year TP on a new vehicle ───────────────────────────────────
NEW_PVT_CAR_MULTIPLIER = 3
NEW_TWO_WHEELER_MULTIPLIER = 5

# ── Common TP additions (per year) ───────────────────────────────────
LPG_KIT_TP = D(60)
GEO_EXTENSION_TP = D(100)
TRAILER_TP = D(2485)
LEGAL_LIABILITY_PER_DRIVER = D(50)
PAID_DRIVER_CSI = MappingProxyType({1: D(60), 2: D(120)})
PASSENGER_CSI = MappingProxyType({1: D(50), 2: D(100)})

# ── PA owner-driver, by tenure (years) ───────────────────────────────
PA_OWNER_DRIVER = MappingProxyType({1: D(275), 3: D(705), 5: D(1100)})
