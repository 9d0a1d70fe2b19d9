"""Context manifest — makes the rating engine self-describing.

Produces structured context at two detail levels:
  - ``compact``: input schemas, vehicle classes and endpoints
  - ``full``:    adds the rating method, formulas and a reading guide

A client reads ``GET /context`` once and then knows which fields each
vehicle class needs, what it can select, and how the premium is built.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from motor_rating import __version__
from motor_rating.config import (
    AddonSelection, LiabilityCovers, PowerType, QuoteInput, VehicleClass, VehicleDetails,
)
from motor_rating.engine.validation import MANDATORY_FIELDS
from motor_rating.tariff import OD_RATE_TABLES, TARIFF_VERSION


# ═══════════════════════════════════════════════════════════════════════════
# Public response models
# ═══════════════════════════════════════════════════════════════════════════

class ParameterInfo(BaseModel):
    """One input field, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class SectionSchema(BaseModel):
    """Schema for one input section (vehicle, addons, liability)."""
    section: str
    description: str
    parameters: list[ParameterInfo]


class VehicleClassInfo(BaseModel):
    """Rating requirements for one vehicle class."""
    vehicle_class: str
    mandatory_fields: list[str]
    power_types: list[str]
    has_third_party: bool


class EndpointInfo(BaseModel):
    """Description of one API endpoint."""
    method: str
    path: str
    description: str
    request_body: str = ""
    response: str = ""


class RatingContext(BaseModel):
    """Full self-describing context."""
    engine_name: str
    version: str
    tariff_version: str
    description: str
    rating_method: str
    key_formulas: list[dict[str, str]]
    vehicle_classes: list[VehicleClassInfo]
    input_sections: list[SectionSchema]
    endpoints: list[EndpointInfo]
    interpretation_guide: str


# ═══════════════════════════════════════════════════════════════════════════
# Schema extraction from Pydantic models
# ═══════════════════════════════════════════════════════════════════════════

def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        constraints: dict[str, Any] = {}
        for attr in ("ge", "gt", "le", "lt"):
            value = _get_field_metadata(field_info, attr)
            if value is not None:
                constraints[attr] = value

        default_val = None
        if not field_info.is_required() and field_info.default_factory is None:
            default_val = field_info.default

        type_str = str(field_info.annotation) if field_info.annotation else "Any"
        type_str = type_str.replace("typing.", "").replace("<class '", "").replace("'>", "")

        params.append(ParameterInfo(
            name=name,
            type=type_str,
            default=default_val,
            description=field_info.description or "",
            constraints=constraints,
        ))
    return params


def _get_field_metadata(field_info: Any, attr: str) -> Any:
    for m in getattr(field_info, "metadata", ()):
        if hasattr(m, attr):
            return getattr(m, attr)
    return None


# ═══════════════════════════════════════════════════════════════════════════
# Context builders
# ═══════════════════════════════════════════════════════════════════════════

_RATING_METHOD = """
MOTOR INSURANCE RATING ENGINE — 2024 tariff snapshot

WHAT IT DOES:
Prices one motor policy quotation from a complete input snapshot:
  - Vehicle age: fractional years from registration to risk start
  - OD rate: tariff % by class, zone, age band and (for cars, two-wheelers, taxis) cc band
  - Own damage: rate × IDV plus class loadings, OD discount, IMT 23, add-ons, NCB
  - Third party: IRDAI-notified liability tables plus side covers
  - GST on OD and TP, grand total rounded up plus ₹1

Every call is stateless. Missing class-mandatory fields are rejected,
never defaulted to zero.
"""

_INTERPRETATION_GUIDE = """
HOW TO READ A QUOTE:

1. od_rate is the literal tariff percentage; basic_od = od_rate × idv / 100 plus loadings.
2. Line items are null when the cover is not on the quote; od_discount is always present.
3. ncb_discount is computed last on basic OD, discount, RTI, IMT 23, Nil Dep, LPG,
   own trailer, electrical accessories and trailer OD only.
4. Trailer OD is shown for every class but counts toward the OD subtotal only for
   goods carriers (GCV4, ThreeGCV).
5. Goods carriers pay 5% GST on basic TP and 18% on the rest; everyone else pays 18%.
6. notes lists referrals, forced IMT 23 and selected add-ons with no tariff band.
"""

_KEY_FORMULAS = [
    {
        "name": "Vehicle age",
        "formula": "days / 365 if days < 1460 else (days + 1) / 365.25",
        "meaning": "Fractional age used for every age band",
    },
    {
        "name": "Basic OD",
        "formula": "od_rate × idv / 100 + (gvw − 12000) × 0.27 [GCV4 > 12000 kg] + bus passenger loading",
        "meaning": "Own-damage premium before discounts and add-ons",
    },
    {
        "name": "IMT 23",
        "formula": "(basic_od + od_discount + electrical_accessories + trailer_od) × 0.15",
        "meaning": "Restricted-driver endorsement; forced with Nil Dep on GCV4, Bus, SchoolBus and Misc",
    },
    {
        "name": "NCB",
        "formula": "−(basic_od + od_discount + rti + imt23 + nil_dep + lpg + own_trailer + accessories + trailer_od) × ncb% / 100",
        "meaning": "No-claim bonus on the tariff NCB base",
    },
    {
        "name": "Grand total",
        "formula": "ceil(od_subtotal + od_gst + tp_subtotal + tp_gst) + 1",
        "meaning": "Amount payable",
    },
]

_ENDPOINTS = [
    EndpointInfo(method="GET", path="/context",
                 description="This manifest. detail_level='compact' omits the method and guide.",
                 response="RatingContext"),
    EndpointInfo(method="GET", path="/schema",
                 description="JSON schema for QuoteInput.", response="JSON Schema object"),
    EndpointInfo(method="POST", path="/quote",
                 description="Price a quotation and resolve add-on eligibility.",
                 request_body="QuoteInput", response="QuoteResponse"),
    EndpointInfo(method="POST", path="/quote/narrative",
                 description="Price a quotation and return a plain-English summary.",
                 request_body="QuoteInput", response="narrative + headline figures"),
    EndpointInfo(method="POST", path="/eligibility",
                 description="Add-ons that may be offered for a vehicle.",
                 request_body="VehicleDetails", response="AddonEligibility"),
    EndpointInfo(method="POST", path="/idv",
                 description="Depreciated IDV for the coming policy year.",
                 request_body="IDVRequest", response="IDVResponse"),
    EndpointInfo(method="POST", path="/od-rate",
                 description="Resolved vehicle age and tariff OD rate for a vehicle.",
                 request_body="VehicleDetails", response="ODRateResponse"),
]

_INPUT_SECTIONS = [
    ("vehicle", VehicleDetails, "Vehicle details that select tariff tables and bands"),
    ("addons", AddonSelection, "Optional covers and sums insured"),
    ("liability", LiabilityCovers, "Legal liability, CSI covers and PA owner-driver"),
]


def _vehicle_classes() -> list[VehicleClassInfo]:
    return [
        VehicleClassInfo(
            vehicle_class=cls.value,
            mandatory_fields=list(MANDATORY_FIELDS[cls]),
            power_types=[p.value for p in PowerType if (cls, p) in OD_RATE_TABLES],
            has_third_party=not cls.is_standalone,
        )
        for cls in VehicleClass
    ]


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def build_context(detail_level: Literal["compact", "full"] = "full") -> RatingContext:
    """Build the self-describing context manifest."""
    full = detail_level == "full"
    sections = [
        SectionSchema(section=name, description=desc, parameters=_extract_params(model_cls))
        for name, model_cls, desc in _INPUT_SECTIONS
    ]
    return RatingContext(
        engine_name="Motor Insurance Rating Engine",
        version=__version__,
        tariff_version=TARIFF_VERSION,
        description=(
            "Deterministic underwriting rules engine for private cars, two-wheelers, goods "
            "carriers, three-wheelers, taxis, buses and miscellaneous vehicles."
        ),
        rating_method=_RATING_METHOD.strip() if full else "",
        key_formulas=_KEY_FORMULAS if full else [],
        vehicle_classes=_vehicle_classes(),
        input_sections=sections,
        endpoints=_ENDPOINTS,
        interpretation_guide=_INTERPRETATION_GUIDE.strip() if full else "",
    )


def get_quote_schema() -> dict:
    """Return the full JSON Schema for QuoteInput."""
    return QuoteInput.model_json_schema()
