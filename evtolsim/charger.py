"""Assignment of a fixed pool of charging ports to vehicles."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from evtolsim.evtol import Evtol


class ChargerManager:
    """A pool of charging ports; once assigned, a port stays taken."""

    def __init__(self, port_count: int) -> None:
        self._port_count = port_count
        self._available = port_count
        self._charging: list[int] = []

    @property
    def available_ports(self) -> int:
        return self._available

    @property
    def charging_ids(self) -> tuple[int, ...]:
        """IDs of vehicles that have been given a port, in assignment order."""
        return tuple(self._charging)

    def assign_charger(self, evtol: Evtol, current_minute: int) -> None:
        """Give a port to the vehicle if one is free and it needs charging."""
        if self._available > 0 and evtol.needs_charging():
            evtol.start_charging(current_minute)
            self._charging.append(evtol.vehicle_id)
            self._available -= 1

    def update(self, current_minute: int) -> None:
        """Recompute free ports; charging sessions are never released."""
        self._available = self._port_count - len(self._charging)

    def report(self, file: Optional[TextIO] = None) -> None:
        out = file if file is not None else sys.stdout
        out.write("\n--- Charger Status ---\n")
        out.write(f"Available ports: {self._available}\n")
        out.write("Charging EVTOLs: ")
        out.write("".join(f"{vehicle_id} " for vehicle_id in self._charging))
        out.write("\n")