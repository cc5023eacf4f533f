"""Creation of a randomly composed fleet of eVTOL vehicles."""

from __future__ import annotations

import random
from collections.abc import Mapping, Sequence

from evtolsim.evtol import Evtol
from evtolsim.vehicle import VehicleProfile, VehicleType

FLEET_SIZE = 20


class FleetManager:
    """Builds a fleet of ``FLEET_SIZE`` vehicles with types drawn at random."""

    def __init__(
        self,
        types: Sequence[VehicleType],
        rng: random.Random,
        profiles: Mapping[VehicleType, VehicleProfile],
    ) -> None:
        if not types:
            raise ValueError("at least one vehicle type is required")
        self._fleet: list[Evtol] = []
        for vehicle_id in range(1, FLEET_SIZE + 1):
            vehicle_type = rng.choice(types)
            try:
                profile = profiles[vehicle_type]
            except KeyError:
                raise KeyError(f"no profile for vehicle type {vehicle_type.name}") from None
            self._fleet.append(Evtol(vehicle_id, vehicle_type, profile, rng))

    def fleet(self) -> list[Evtol]:
        """The vehicles of the fleet, ordered by ID."""
        return self._fleet