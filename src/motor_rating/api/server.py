"""FastAPI server — HTTP surface for the motor rating engine.

Run with:
    uvicorn motor_rating.api.server:app --reload --port 8000

Or:
    motor-rating-api

Endpoints:
    GET  /health            — liveness probe
    GET  /context           — self-describing manifest (classes, fields, formulas)
    GET  /schema            — JSON Schema for QuoteInput
    POST /quote             — price a quotation + add-on eligibility
    POST /quote/narrative   — price + plain-English summary
    POST /eligibility       — add-ons that may be offered for a vehicle
    POST /idv               — depreciated IDV for the coming year
    POST /od-rate           — vehicle age and tariff OD rate
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Literal

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from motor_rating import __version__
from motor_rating.api.context import build_context, get_quote_schema
from motor_rating.api.narrative import generate_narrative
from motor_rating.config import QuoteInput, VehicleDetails
from motor_rating.config.settings import configure_logging, settings
from motor_rating.engine.age import compute_age
from motor_rating.engine.eligibility import resolve_eligibility
from motor_rating.engine.idv import compute_idv
from motor_rating.engine.od_rate import resolve_vehicle_od_rate
from motor_rating.engine.orchestrator import quote_with_eligibility
from motor_rating.engine.validation import validate_vehicle
from motor_rating.errors import RatingError
from motor_rating.models.results import AddonEligibility, QuoteOutput
from motor_rating.tariff import TARIFF_VERSION

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description=(
        "Motor insurance quotation engine: own damage, third party, add-ons and GST "
        "for a fixed 2024 tariff. Start by calling GET /context."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RatingError)
async def rating_error_handler(request: Request, exc: RatingError) -> JSONResponse:
    logger.warning("rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=422, content=exc.to_dict())


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class QuoteResponse(BaseModel):
    """Response from /quote."""
    quote: QuoteOutput
    eligibility: AddonEligibility


class EligibilityRequest(BaseModel):
    """Request body for /eligibility."""
    vehicle: VehicleDetails
    quote_date: date = Field(
        default_factory=date.today,
        description="Issue date; a vehicle registered on this date is new",
    )


class IDVRequest(BaseModel):
    """Request body for /idv."""
    old_idv: Decimal = Field(ge=0, description="Previous year's IDV (₹)")
    depreciation_pct: Decimal = Field(ge=0, le=100, description="Depreciation for the year (%)")


class IDVResponse(BaseModel):
    """Response from /idv."""
    old_idv: Decimal
    depreciation_pct: Decimal
    idv: Decimal


class ODRateResponse(BaseModel):
    """Response from /od-rate."""
    vehicle_class: str
    age_years: float
    od_rate: Decimal
    tariff_version: str


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointer to /context."""
    return {
        "name": "Motor Insurance Rating Engine API",
        "version": __version__,
        "tariff_version": TARIFF_VERSION,
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/context")
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for schemas and classes only, 'full' adds rating method + formulas",
    ),
):
    """Self-describing context manifest."""
    return build_context(detail_level)


@app.get("/schema")
def get_schema():
    """Full JSON Schema for QuoteInput."""
    return get_quote_schema()


@app.post("/quote", response_model=QuoteResponse)
def quote(req: QuoteInput):
    """Price a quotation and report which add-ons may be offered.

    Example minimal request:
    ```json
    {"vehicle": {"vehicle_class": "PvtCar", "zone": "B", "cubic_capacity": 1200,
                 "registration_date": "2021-04-01", "risk_start_date": "2024-04-01"},
     "idv": 500000}
    ```
    """
    result, eligibility = quote_with_eligibility(req)
    logger.info(
        "quote %s idv=%s total=%s notes=%d",
        result.vehicle_class, result.idv, result.grand_total, len(result.notes),
    )
    return QuoteResponse(quote=result, eligibility=eligibility)


@app.post("/quote/narrative")
def quote_narrative(req: QuoteInput):
    """Price a quotation and return the plain-English summary with headline figures."""
    result, _ = quote_with_eligibility(req)
    logger.info("narrative quote %s total=%s", result.vehicle_class, result.grand_total)
    return {
        "narrative": generate_narrative(result),
        "headline_figures": {
            "od_subtotal": result.od_subtotal,
            "tp_subtotal": result.tp_subtotal,
            "gst": result.od_gst + result.tp_gst,
            "grand_total": result.grand_total,
        },
    }


@app.post("/eligibility", response_model=AddonEligibility)
def eligibility(req: EligibilityRequest):
    """Add-ons that may be offered for a vehicle.  Advisory only."""
    v = req.vehicle
    age = compute_age(v.registration_date, v.risk_start_date)
    logger.info("eligibility %s age=%.2f", v.vehicle_class, age)
    return resolve_eligibility(
        v.vehicle_class,
        age,
        passenger_capacity=v.passenger_capacity,
        power_type=v.power_type,
        is_new_vehicle=v.registration_date == req.quote_date,
    )


@app.post("/idv", response_model=IDVResponse)
def idv(req: IDVRequest):
    """old IDV × (100 − depreciation%) / 100, whole rupees."""
    return IDVResponse(
        old_idv=req.old_idv,
        depreciation_pct=req.depreciation_pct,
        idv=compute_idv(req.old_idv, req.depreciation_pct),
    )


@app.post("/od-rate", response_model=ODRateResponse)
def od_rate(req: VehicleDetails):
    """Vehicle age and the tariff OD rate it resolves to."""
    validate_vehicle(req)
    age = compute_age(req.registration_date, req.risk_start_date)
    rate = resolve_vehicle_od_rate(req, age)
    logger.info("od-rate %s age=%.2f rate=%s", req.vehicle_class, age, rate)
    return ODRateResponse(
        vehicle_class=req.vehicle_class.value,
        age_years=age,
        od_rate=rate,
        tariff_version=TARIFF_VERSION,
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    configure_logging(settings)
    uvicorn.run(
        "motor_rating.api.server:app",
        host=settings.api_host,
        port=settings.api_port,
    )


if __name__ == "__main__":
    main()
