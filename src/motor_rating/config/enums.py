"""Closed vocabularies used across the rating engine."""

from enum import Enum


class VehicleClass(str, Enum):
    GCV4 = "GCV4"
    THREE_GCV = "ThreeGCV"
    THREE_PCV = "ThreePCV"
    PVT_CAR = "PvtCar"
    PVT_CAR_STANDALONE = "PvtCarStandalone"
    TWO_WHEELER = "TwoWheeler"
    TWO_WHEELER_STANDALONE = "TwoWheelerStandalone"
    TAXI = "Taxi"
    BUS = "Bus"
    SCHOOL_BUS = "SchoolBus"
    MISC = "Misc"

    def __str__(self):
        return self.value

    @property
    def is_private_car(self) -> bool:
        return self in (VehicleClass.PVT_CAR, VehicleClass.PVT_CAR_STANDALONE)

    @property
    def is_two_wheeler(self) -> bool:
        return self in (VehicleClass.TWO_WHEELER, VehicleClass.TWO_WHEELER_STANDALONE)

    @property
    def is_private(self) -> bool:
        """Private car or two-wheeler, package or standalone."""
        return self.is_private_car or self.is_two_wheeler

    @property
    def is_standalone(self) -> bool:
        """Standalone OD policies carry no third-party section."""
        return self in (VehicleClass.PVT_CAR_STANDALONE, VehicleClass.TWO_WHEELER_STANDALONE)

    @property
    def is_bus(self) -> bool:
        return self in (VehicleClass.BUS, VehicleClass.SCHOOL_BUS)

    @property
    def is_commercial(self) -> bool:
        return not self.is_private


class Zone(str, Enum):
    A = "A"
    B = "B"
    C = "C"

    def __str__(self):
        return self.value


class PowerType(str, Enum):
    ICE = "ICE"
    ELECTRIC = "Electric"
    HYBRID = "Hybrid"

    def __str__(self):
        return self.value

    @property
    def is_electrified(self) -> bool:
        return self is not PowerType.ICE
