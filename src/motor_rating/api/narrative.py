"""Narrative generator — plain-English summary of a priced quotation.

Converts a ``QuoteOutput`` into a structured text block a broker can
read back to a customer: the vehicle, how the OD premium was built, the
TP liability, taxes and the amount payable.
"""

from __future__ import annotations

from decimal import Decimal

from motor_rating.models.results import QuoteOutput

_LABELS = {
    "basic_od": "Basic OD",
    "od_discount": "OD discount",
    "imt23_loading": "IMT 23 loading",
    "nil_dep": "Nil depreciation",
    "engine_protect": "Engine protect",
    "consumables": "Consumables",
    "return_to_invoice": "Return to invoice",
    "key_loss": "Key loss",
    "employee_compensation": "Employee compensation",
    "road_side_assistance": "Road-side assistance",
    "tyre_plan": "Tyre plan",
    "ncb_protection": "NCB protection",
    "geo_extension": "Geographical extension",
    "lpg_kit": "LPG / CNG kit",
    "own_trailer": "Own trailer",
    "towing": "Towing",
    "ncb_discount": "No-claim bonus",
    "ev_protect": "EV protect",
    "electrical_accessories": "Electrical accessories",
    "trailer_od": "Trailer OD",
    "basic_tp": "Basic TP",
    "passenger_liability": "Passenger liability",
    "legal_liability_driver": "Legal liability to driver",
    "pa_owner_driver": "PA owner-driver",
    "paid_driver_cover": "Paid driver cover",
    "passenger_cover": "Unnamed passenger cover",
    "trailer_tp": "Trailer TP",
}


def _rupees(amount: Decimal) -> str:
    return f"₹{amount:,.2f}"


def _section(title: str) -> list[str]:
    return ["", "=" * 60, title, "=" * 60]


def generate_narrative(result: QuoteOutput) -> str:
    """Generate a plain-English narrative from a quote.

    Covers:
      1. Vehicle and rating basis
      2. Own damage breakdown
      3. Third party breakdown
      4. Taxes and amount payable
      5. Underwriting notes
    """
    lines: list[str] = []

    # ── 1. Rating basis ──
    lines += _section("RATING BASIS")[1:]
    lines.append(
        f"Vehicle class: {result.vehicle_class}\n"
        f"Vehicle age: {result.age_years:.2f} years"
        + (" (new vehicle, multi-year TP)" if result.is_new_vehicle else "")
        + f"\nIDV: {_rupees(result.idv)}\n"
        f"OD rate: {result.od_rate}%\n"
        f"Tariff: {result.tariff_version}"
    )

    # ── 2. Own damage ──
    lines += _section("OWN DAMAGE")
    for name, amount in result.od.line_items().items():
        lines.append(f"  {_LABELS[name]:32s} {_rupees(amount):>14s}")
    lines.append(f"  {'OD subtotal':32s} {_rupees(result.od_subtotal):>14s}")

    # ── 3. Third party ──
    lines += _section("THIRD PARTY")
    tp_items = result.tp.line_items()
    if not tp_items:
        lines.append("  Standalone own-damage policy: no third-party section.")
    for name, amount in tp_items.items():
        lines.append(f"  {_LABELS[name]:32s} {_rupees(amount):>14s}")
    lines.append(f"  {'TP subtotal':32s} {_rupees(result.tp_subtotal):>14s}")

    # ── 4. Amount payable ──
    lines += _section("AMOUNT PAYABLE")
    lines.append(
        f"OD {_rupees(result.od_subtotal)} + GST {_rupees(result.od_gst)}\n"
        f"TP {_rupees(result.tp_subtotal)} + GST {_rupees(result.tp_gst)}\n"
        f"Grand total: {_rupees(result.grand_total)}"
    )

    # ── 5. Notes ──
    if result.notes:
        lines += _section("UNDERWRITING NOTES")
        lines += [f"  - {note}" for note in result.notes]

    return "\n".join(lines)
