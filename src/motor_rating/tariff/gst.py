"""Goods and Services Tax rates applied to the premium."""

from decimal import Decimal

from motor_rating.config.enums import VehicleClass

GST_RATE = Decimal("0.18")
# Basic TP of goods carriers is taxed at the concessional rate.
GOODS_BASIC_TP_GST_RATE = Decimal("0.05")

GOODS_CARRIERS = frozenset({VehicleClass.GCV4, VehicleClass.THREE_GCV})
