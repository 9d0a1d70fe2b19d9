"""Premium composer — OD lines, TP lines, GST and the grand total.

Order matters and is fixed by the tariff:

  1. base OD (rate × IDV / 100, plus GCV weight or bus passenger loading)
  2. OD discount on base OD
  3. electrical accessories and trailer OD, net of the discount
  4. IMT 23 on (base + discount + accessories + trailer OD)
  5. add-ons
  6. NCB, last, on its own base

Every line is rounded to 2 dp as it is produced; later lines are built
from the rounded values.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from motor_rating.config.enums import VehicleClass
from motor_rating.config.quote import QuoteInput
from motor_rating.engine import addons as ad
from motor_rating.engine.bands import band_value
from motor_rating.engine.money import ceil_rupees, to_money, to_rupees
from motor_rating.engine.third_party import compute_third_party
from motor_rating.engine.validation import validate_quote_input
from motor_rating.models.results import ODBreakdown, QuoteOutput, TPBreakdown
from motor_rating.tariff import TARIFF_VERSION
from motor_rating.tariff import addon_rates as r
from motor_rating.tariff.gst import GOODS_BASIC_TP_GST_RATE, GOODS_CARRIERS, GST_RATE

logger = logging.getLogger(__name__)

HUNDRED = Decimal(100)
ZERO = Decimal(0)

# Lines that make up the tariff NCB base.
NCB_BASE_LINES = (
    "basic_od",
    "od_discount",
    "return_to_invoice",
    "imt23_loading",
    "nil_dep",
    "lpg_kit",
    "own_trailer",
    "electrical_accessories",
    "trailer_od",
)


# ═══════════════════════════════════════════════════════════════════════════
# Base OD
# ═══════════════════════════════════════════════════════════════════════════

def vehicle_loading(quote: QuoteInput) -> Decimal:
    """GCV excess-weight loading or bus passenger loading; 0 otherwise."""
    v = quote.vehicle
    cls = v.vehicle_class
    if cls is VehicleClass.GCV4:
        gvw = Decimal(str(v.gross_vehicle_weight))
        if gvw > r.GCV_GVW_THRESHOLD:
            return (gvw - r.GCV_GVW_THRESHOLD) * r.GCV_EXCESS_GVW_RATE
    elif cls.is_bus:
        return band_value(v.passenger_capacity, r.BUS_PASSENGER_LOADING, closed_upper=True)
    return ZERO


def base_od(quote: QuoteInput, od_rate: Decimal) -> Decimal:
    return to_money(od_rate * quote.idv / HUNDRED + vehicle_loading(quote))


# ═══════════════════════════════════════════════════════════════════════════
# Own damage
# ═══════════════════════════════════════════════════════════════════════════

def _age_banded_addons(
    quote: QuoteInput, age: float, basic: Decimal, lines: dict, notes: list[str]
) -> None:
    """Add-ons priced from an age band; record the ones with no band."""
    v = quote.vehicle
    cls = v.vehicle_class
    sel = quote.addons
    idv = quote.idv

    def put(name: str, label: str, amount: Decimal | None) -> None:
        if amount is None:
            notes.append(f"{label} selected but not rated for {cls} at age {age:.2f} years")
        else:
            lines[name] = amount

    if sel.nil_dep:
        put("nil_dep", "Nil Dep", ad.nil_dep_premium(cls, age, basic, sel.electrical_accessories_si))
    if sel.engine_protect:
        put("engine_protect", "Engine Protect", ad.engine_protect_premium(cls, age, idv))
    if sel.consumables:
        put("consumables", "Consumables", ad.consumables_premium(cls, age, idv))
    if sel.return_to_invoice:
        put("return_to_invoice", "Return to Invoice", ad.return_to_invoice_premium(cls, age, idv))
    if sel.ev_protect:
        amount = ad.ev_protect_premium(v.power_type, age, idv)
        if amount is None:
            notes.append(f"EV Protect selected but not rated for a {v.power_type} vehicle")
        else:
            lines["ev_protect"] = amount


def _flat_addons(quote: QuoteInput, basic: Decimal, discount: Decimal, lines: dict, notes: list[str]) -> None:
    cls = quote.vehicle.vehicle_class
    sel = quote.addons
    idv = quote.idv

    if sel.key_loss:
        lines["key_loss"] = ad.key_loss_premium(cls)
    if sel.employee_compensation_si:
        lines["employee_compensation"] = ad.employee_compensation_premium(cls, sel.employee_compensation_si)
    if sel.road_side_assistance:
        amount = ad.road_side_assistance_premium(cls)
        if amount is None:
            notes.append(f"Road Side Assistance selected but not rated for {cls}")
        else:
            lines["road_side_assistance"] = amount
    if sel.tyre_plan_tier is not None:
        lines["tyre_plan"] = ad.tyre_plan_premium(sel.tyre_plan_tier)
    if sel.ncb_protection:
        lines["ncb_protection"] = ad.ncb_protection_premium(cls, idv)
    if sel.geo_extension:
        lines["geo_extension"] = to_money(r.GEO_EXTENSION_OD)
    if sel.lpg_kit:
        lines["lpg_kit"] = ad.lpg_kit_od_premium(basic, discount)
    if sel.own_trailer:
        lines["own_trailer"] = ad.own_trailer_premium(idv)
    if sel.towing_si:
        lines["towing"] = ad.towing_premium(sel.towing_si)


def _nil_dep_referral_age(cls: VehicleClass) -> float | None:
    if cls.is_private:
        return r.NIL_DEP_REFERRAL_AGE_PRIVATE
    if cls in r.NIL_DEP_REFERRAL_COMMERCIAL:
        return r.NIL_DEP_REFERRAL_AGE_COMMERCIAL
    return None


def compute_own_damage(quote: QuoteInput, od_rate: Decimal, age: float) -> tuple[ODBreakdown, list[str]]:
    """OD line items plus any underwriting notes raised while pricing them."""
    cls = quote.vehicle.vehicle_class
    sel = quote.addons
    odd = quote.od_discount_pct
    notes: list[str] = []

    basic = base_od(quote, od_rate)
    discount = to_money(-basic * odd / HUNDRED)
    lines: dict[str, Decimal] = {"basic_od": basic, "od_discount": discount}

    net = 1 - odd / HUNDRED
    if sel.electrical_accessories_si:
        lines["electrical_accessories"] = to_money(sel.electrical_accessories_si * r.ELECTRICAL_ACCESSORIES_RATE * net)
    if sel.trailer_od_si:
        lines["trailer_od"] = to_money(sel.trailer_od_si * r.TRAILER_OD_RATE * net)

    forced_imt23 = sel.nil_dep and cls in r.NIL_DEP_FORCES_IMT23
    if sel.imt23 or forced_imt23:
        imt_base = basic + discount + lines.get("electrical_accessories", ZERO) + lines.get("trailer_od", ZERO)
        lines["imt23_loading"] = to_money(imt_base * r.IMT23_RATE)
        if forced_imt23 and not sel.imt23:
            notes.append(f"IMT 23 applied: mandatory with Nil Dep for {cls}")

    _age_banded_addons(quote, age, basic, lines, notes)
    _flat_addons(quote, basic, discount, lines, notes)

    if quote.ncb_pct > 0:
        ncb_base = sum((lines.get(name, ZERO) for name in NCB_BASE_LINES), ZERO)
        lines["ncb_discount"] = to_money(-ncb_base * quote.ncb_pct / HUNDRED)

    if sel.nil_dep and quote.ncb_pct == 0:
        limit = _nil_dep_referral_age(cls)
        if limit is not None and age > limit:
            notes.append(
                f"Nil Dep on a vehicle older than {limit} years with 0% NCB is referred: "
                "requires min 20% NCB on renewal / 25% on rollover"
            )

    return ODBreakdown(**lines), notes


# ═══════════════════════════════════════════════════════════════════════════
# Totals
# ═══════════════════════════════════════════════════════════════════════════

def od_subtotal(od: ODBreakdown, vehicle_class: VehicleClass) -> Decimal:
    """Whole-rupee OD total.  Trailer OD counts only for goods carriers."""
    items = od.line_items()
    if vehicle_class not in GOODS_CARRIERS:
        items.pop("trailer_od", None)
    return to_rupees(sum(items.values(), ZERO))


def tp_gst(tp: TPBreakdown, subtotal: Decimal, vehicle_class: VehicleClass) -> Decimal:
    """GST on TP; goods carriers pay the concessional rate on basic TP."""
    if vehicle_class in GOODS_CARRIERS:
        items = tp.line_items()
        basic = items.pop("basic_tp", ZERO)
        rest = sum(items.values(), ZERO)
        return to_money(basic * GOODS_BASIC_TP_GST_RATE + rest * GST_RATE)
    return to_money(subtotal * GST_RATE)


def compose_premium(quote: QuoteInput, od_rate: Decimal, age: float) -> QuoteOutput:
    """Compose the full quotation from a resolved OD rate and vehicle age.

    Mandatory fields are checked first, so no total is ever produced from
    partial data.
    """
    validate_quote_input(quote)
    cls = quote.vehicle.vehicle_class

    od, notes = compute_own_damage(quote, od_rate, age)
    tp = compute_third_party(quote)

    od_total = od_subtotal(od, cls)
    od_tax = to_money(od_total * GST_RATE)
    tp_total = to_rupees(sum(tp.line_items().values(), ZERO))
    tp_tax = tp_gst(tp, tp_total, cls)
    grand = ceil_rupees(od_total + od_tax + tp_total + tp_tax) + 1

    logger.debug(
        "%s: OD %s + GST %s, TP %s + GST %s -> %s",
        cls, od_total, od_tax, tp_total, tp_tax, grand,
    )
    return QuoteOutput(
        tariff_version=TARIFF_VERSION,
        vehicle_class=cls,
        age_years=age,
        od_rate=od_rate,
        idv=quote.idv,
        is_new_vehicle=quote.is_new_vehicle,
        od=od,
        tp=tp,
        od_subtotal=od_total,
        od_gst=od_tax,
        tp_subtotal=tp_total,
        tp_gst=tp_tax,
        grand_total=grand,
        notes=notes,
    )
