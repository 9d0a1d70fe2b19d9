"""Tariff snapshot — immutable rate data, separate from band-selection logic.

A tariff revision touches only this package.
"""

from motor_rating.tariff.od_rates import OD_RATE_TABLES, RateTable

TARIFF_VERSION = "2024.1"

__all__ = ["TARIFF_VERSION", "OD_RATE_TABLES", "RateTable"]
