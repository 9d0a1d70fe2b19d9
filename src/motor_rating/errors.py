"""Typed failures raised by the rating engine.

Every failure is a deterministic input problem: nothing here is retried,
and no premium is ever computed on partial data.
"""

from __future__ import annotations

from typing import Any, Optional


class RatingError(Exception):
    """Base exception for all rating-engine errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidDateRange(RatingError):
    """Raised when the risk-start date precedes registration, or a date is unparseable."""

    def __init__(self, message: str, registration_date: Any = None, risk_start_date: Any = None):
        super().__init__(
            message,
            details={
                "registration_date": str(registration_date) if registration_date is not None else None,
                "risk_start_date": str(risk_start_date) if risk_start_date is not None else None,
            },
        )
        self.registration_date = registration_date
        self.risk_start_date = risk_start_date


class MissingMandatoryField(RatingError):
    """Raised when a field required by the vehicle class is absent.

    Examples:
    - Private car without cubic capacity
    - GCV4 without gross vehicle weight
    - Bus without passenger capacity
    """

    def __init__(self, field: str, vehicle_class: str):
        super().__init__(
            f"{field} is mandatory for {vehicle_class}",
            details={"field": field, "vehicle_class": vehicle_class},
        )
        self.field = field
        self.vehicle_class = vehicle_class


class OutOfRangeInput(RatingError):
    """Raised when a present field lies outside the range its class allows.

    Examples:
    - Taxi with more than 6 passengers
    - Bus with 6 or fewer passengers
    """

    def __init__(self, field: str, value: Any, allowed: str, vehicle_class: Optional[str] = None):
        super().__init__(
            f"{field}={value} is out of range ({allowed})"
            + (f" for {vehicle_class}" if vehicle_class else ""),
            details={
                "field": field,
                "value": value,
                "allowed": allowed,
                "vehicle_class": vehicle_class,
            },
        )
        self.field = field
        self.value = value
        self.allowed = allowed
        self.vehicle_class = vehicle_class


class UnsupportedVehicleClass(RatingError):
    """Raised when a class/power combination has no tariff entry."""

    def __init__(self, vehicle_class: str, power_type: Optional[str] = None):
        label = vehicle_class if power_type is None else f"{vehicle_class} ({power_type})"
        super().__init__(
            f"No tariff entry for {label}",
            details={"vehicle_class": vehicle_class, "power_type": power_type},
        )
        self.vehicle_class = vehicle_class
        self.power_type = power_type
