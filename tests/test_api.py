"""Tests for the HTTP API layer.

Covers:
  - Context manifest (compact + full) and schema
  - Quote, narrative, eligibility, IDV and OD-rate endpoints
  - Rating errors mapped to 422
  - Narrative generation
"""

from __future__ import annotations

from decimal import Decimal

from fastapi.testclient import TestClient

from motor_rating.api.context import _extract_params, build_context, get_quote_schema
from motor_rating.api.narrative import generate_narrative
from motor_rating.api.server import app
from motor_rating.config import AddonSelection, VehicleClass
from motor_rating.engine.orchestrator import run_quote

client = TestClient(app)

PRIVATE_CAR = {
    "vehicle_class": "PvtCar",
    "zone": "B",
    "cubic_capacity": 1200,
    "registration_date": "2021-04-01",
    "risk_start_date": "2024-04-01",
}


def _quote_body(vehicle: dict, **kwargs) -> dict:
    return {"vehicle": vehicle, "idv": 500000, "quote_date": "2024-04-01", **kwargs}


# ═══════════════════════════════════════════════════════════════════════════
# Context manifest tests
# ═══════════════════════════════════════════════════════════════════════════


class TestContext:

    def test_build_context_full(self):
        ctx = build_context("full")
        assert ctx.engine_name == "Motor Insurance Rating Engine"
        assert ctx.tariff_version == "2024.1"
        assert len(ctx.rating_method) > 100
        assert len(ctx.key_formulas) >= 5
        assert len(ctx.input_sections) == 3
        assert len(ctx.vehicle_classes) == len(VehicleClass)
        assert len(ctx.interpretation_guide) > 100

    def test_build_context_compact(self):
        ctx = build_context("compact")
        assert ctx.rating_method == ""
        assert ctx.key_formulas == []
        assert ctx.interpretation_guide == ""
        assert len(ctx.input_sections) == 3

    def test_vehicle_class_info(self):
        classes = {c.vehicle_class: c for c in build_context("compact").vehicle_classes}
        assert classes["GCV4"].mandatory_fields == ["gross_vehicle_weight"]
        assert classes["GCV4"].power_types == ["ICE"]
        assert set(classes["PvtCar"].power_types) == {"ICE", "Electric", "Hybrid"}
        assert classes["PvtCarStandalone"].has_third_party is False

    def test_extract_params_constraints(self):
        params = {p.name: p for p in _extract_params(AddonSelection)}
        assert params["tyre_plan_tier"].constraints == {"ge": 1, "le": 4}
        assert params["nil_dep"].default is False

    def test_quote_schema(self):
        schema = get_quote_schema()
        assert "vehicle" in schema["properties"]
        assert "idv" in schema["required"]


# ═══════════════════════════════════════════════════════════════════════════
# API endpoint tests (TestClient, no server needed)
# ═══════════════════════════════════════════════════════════════════════════


class TestEndpoints:

    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_root(self):
        data = client.get("/").json()
        assert data["tariff_version"] == "2024.1"
        assert "start_here" in data

    def test_context_default_is_full(self):
        data = client.get("/context").json()
        assert len(data["rating_method"]) > 100

    def test_context_compact(self):
        data = client.get("/context?detail_level=compact").json()
        assert data["rating_method"] == ""

    def test_schema(self):
        assert "properties" in client.get("/schema").json()

    def test_quote_private_car(self):
        resp = client.post("/quote", json=_quote_body(PRIVATE_CAR))
        assert resp.status_code == 200
        data = resp.json()
        assert Decimal(data["quote"]["od_rate"]) == Decimal("3.191")
        assert Decimal(data["quote"]["grand_total"]) == Decimal("22859")
        assert data["eligibility"]["nil_dep"] is True
        assert data["eligibility"]["pa_owner_driver_tenures"] == [1]

    def test_quote_with_addons(self):
        body = _quote_body(PRIVATE_CAR, ncb_pct=20,
                           addons={"nil_dep": True, "imt23": True, "engine_protect": True})
        data = client.post("/quote", json=body).json()
        assert Decimal(data["quote"]["od"]["ncb_discount"]) == Decimal("-4626.95")

    def test_quote_out_of_range_is_422(self):
        taxi = {**PRIVATE_CAR, "vehicle_class": "Taxi", "passenger_capacity": 8}
        resp = client.post("/quote", json=_quote_body(taxi))
        assert resp.status_code == 422
        data = resp.json()
        assert data["error_type"] == "OutOfRangeInput"
        assert data["details"]["field"] == "passenger_capacity"

    def test_quote_missing_field_is_422(self):
        gcv = {**PRIVATE_CAR, "vehicle_class": "GCV4"}
        data = client.post("/quote", json=_quote_body(gcv)).json()
        assert data["error_type"] == "MissingMandatoryField"

    def test_quote_invalid_dates_is_422(self):
        backwards = {**PRIVATE_CAR, "risk_start_date": "2020-01-01"}
        data = client.post("/quote", json=_quote_body(backwards)).json()
        assert data["error_type"] == "InvalidDateRange"

    def test_quote_schema_violation_is_422(self):
        resp = client.post("/quote", json=_quote_body(PRIVATE_CAR, ncb_pct=90))
        assert resp.status_code == 422
        assert "detail" in resp.json()

    def test_quote_narrative(self):
        data = client.post("/quote/narrative", json=_quote_body(PRIVATE_CAR)).json()
        assert "OWN DAMAGE" in data["narrative"]
        assert Decimal(str(data["headline_figures"]["grand_total"])) == Decimal("22859")

    def test_eligibility(self):
        bus = {**PRIVATE_CAR, "vehicle_class": "Bus", "passenger_capacity": 20,
               "registration_date": "2023-04-01"}
        data = client.post("/eligibility", json={"vehicle": bus, "quote_date": "2024-04-01"}).json()
        assert data["return_to_invoice"] is True
        assert data["engine_protect"] is False

    def test_eligibility_new_car_tenures(self):
        new_car = {**PRIVATE_CAR, "registration_date": "2024-04-01"}
        data = client.post("/eligibility", json={"vehicle": new_car, "quote_date": "2024-04-01"}).json()
        assert data["pa_owner_driver_tenures"] == [1, 3]

    def test_idv(self):
        data = client.post("/idv", json={"old_idv": 600000, "depreciation_pct": 15}).json()
        assert Decimal(data["idv"]) == Decimal("510000")

    def test_idv_invalid(self):
        resp = client.post("/idv", json={"old_idv": 600000, "depreciation_pct": 150})
        assert resp.status_code == 422

    def test_od_rate(self):
        data = client.post("/od-rate", json=PRIVATE_CAR).json()
        assert Decimal(data["od_rate"]) == Decimal("3.191")
        assert data["vehicle_class"] == "PvtCar"

    def test_od_rate_unsupported(self):
        ev_bus = {**PRIVATE_CAR, "vehicle_class": "Bus", "power_type": "Electric", "passenger_capacity": 20}
        data = client.post("/od-rate", json=ev_bus).json()
        assert data["error_type"] == "UnsupportedVehicleClass"


# ═══════════════════════════════════════════════════════════════════════════
# Narrative
# ═══════════════════════════════════════════════════════════════════════════


class TestNarrative:

    def test_sections(self, private_car_quote):
        text = generate_narrative(run_quote(private_car_quote))
        for heading in ("RATING BASIS", "OWN DAMAGE", "THIRD PARTY", "AMOUNT PAYABLE"):
            assert heading in text
        assert "Basic OD" in text
        assert "₹22,859.00" in text

    def test_standalone_and_notes(self, make_quote):
        quote = make_quote(VehicleClass.THREE_GCV, addons=AddonSelection(return_to_invoice=True))
        text = generate_narrative(run_quote(quote))
        assert "UNDERWRITING NOTES" in text

        standalone = make_quote(VehicleClass.TWO_WHEELER_STANDALONE, cubic_capacity=110)
        assert "no third-party section" in generate_narrative(run_quote(standalone))
