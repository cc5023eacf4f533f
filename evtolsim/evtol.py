"""A single eVTOL vehicle and its runtime state."""

from __future__ import annotations

import random
from typing import Optional

from evtolsim.vehicle import VehicleProfile, VehicleType

_FAULT_ODDS = 10
_CHARGE_ODDS = 3
_FAULT_CODE_BASE = 100
_FAULT_CODE_SPAN = 50
_BATTERY_PER_PASSENGER = 25.0


class Evtol:
    """An eVTOL vehicle whose fault and charging state change at random."""

    def __init__(
        self,
        vehicle_id: int,
        vehicle_type: VehicleType,
        profile: VehicleProfile,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.vehicle_id = vehicle_id
        self.vehicle_type = vehicle_type
        self.profile = profile
        self.fault_code = 0
        self._rng = rng if rng is not None else random.Random()
        self._fault = False
        self._charging_needed = False

    def simulate_step(self) -> None:
        """Randomly decide whether a fault occurs and whether charging is needed."""
        self._fault = self.coin_flip(_FAULT_ODDS)
        self._charging_needed = self.coin_flip(_CHARGE_ODDS)
        if self._fault:
            self.fault_code = _FAULT_CODE_BASE + self._rng.randrange(_FAULT_CODE_SPAN)

    def has_fault(self) -> bool:
        return self._fault

    def needs_charging(self) -> bool:
        return self._charging_needed

    def is_charging(self) -> bool:
        """True while the vehicle is flagged for charging."""
        return self._charging_needed

    def start_charging(self, current_minute: int) -> None:
        """Begin charging, which clears the charging-needed flag."""
        self._charging_needed = False

    def cruise_speed(self) -> float:
        return self.profile.cruise_speed

    def passenger_capacity(self) -> int:
        """Seats derived from battery capacity."""
        return int(self.profile.battery_capacity / _BATTERY_PER_PASSENGER)

    def coin_flip(self, odds: int) -> bool:
        """Return True with a probability of one in ``odds``."""
        if odds <= 0:
            raise ValueError(f"odds must be positive, got {odds}")
        return self._rng.randrange(odds) == 0

    def __repr__(self) -> str:
        return f"Evtol(vehicle_id={self.vehicle_id}, vehicle_type={self.vehicle_type.name})"