"""Configuration models — all quote input types."""

from motor_rating.config.enums import PowerType, VehicleClass, Zone
from motor_rating.config.vehicle import VehicleDetails
from motor_rating.config.addons import AddonSelection
from motor_rating.config.liability import LiabilityCovers
from motor_rating.config.quote import QuoteInput

__all__ = [
    "VehicleClass",
    "Zone",
    "PowerType",
    "VehicleDetails",
    "AddonSelection",
    "LiabilityCovers",
    "QuoteInput",
]
