"""Vehicle types and their configuration profiles."""

from dataclasses import dataclass
from enum import IntEnum


class VehicleType(IntEnum):
    """Supported eVTOL vehicle types, ordered as they are reported."""

    ALPHA = 0
    BRAVO = 1
    CHARLIE = 2
    DELTA = 3
    ECHO = 4

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"Alpha"``."""
        return self.name.capitalize()


@dataclass(frozen=True)
class VehicleProfile:
    """Configuration parameters shared by all vehicles of one type."""

    battery_capacity: float  # kWh
    cruise_speed: float  # mph
    energy_per_mile: float  # kWh per mile
    time_to_charge: float  # hours
    charger_type: int
    fault_probability: float  # faults per hour