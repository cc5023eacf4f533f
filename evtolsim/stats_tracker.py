"""Per-vehicle-type accumulation of flight, charge and fault statistics."""

from __future__ import annotations

import os
import sys
from collections import defaultdict
from typing import Optional, TextIO

from evtolsim.vehicle import VehicleType

_MODE_VARIABLE = "EVTOL_MODE"
_SIMULATION_MODE = "SIMULATION"


class StatisticsTracker:
    """Accumulates statistics for each vehicle type and reports averages."""

    def __init__(self) -> None:
        self._flight_time: defaultdict[VehicleType, int] = defaultdict(int)
        self._flight_count: defaultdict[VehicleType, int] = defaultdict(int)
        self._distance: defaultdict[VehicleType, float] = defaultdict(float)
        self._charge_time: defaultdict[VehicleType, float] = defaultdict(float)
        self._charge_count: defaultdict[VehicleType, int] = defaultdict(int)
        self._fault_count: defaultdict[VehicleType, int] = defaultdict(int)
        self._passenger_miles: defaultdict[VehicleType, float] = defaultdict(float)
        self._suppress_output = False

    def record_flight(
        self, vehicle_type: VehicleType, duration_minutes: int, speed: float, passengers: int
    ) -> None:
        """Record one flight of ``duration_minutes`` at ``speed`` mph."""
        miles = speed * duration_minutes / 60.0
        self._flight_time[vehicle_type] += int(duration_minutes)
        self._flight_count[vehicle_type] += 1
        self._distance[vehicle_type] += miles
        self._passenger_miles[vehicle_type] += miles * passengers

    def record_charge(self, vehicle_type: VehicleType, duration_hours: float) -> None:
        self._charge_time[vehicle_type] += duration_hours
        self._charge_count[vehicle_type] += 1

    def record_fault(self, vehicle_type: VehicleType) -> None:
        self._fault_count[vehicle_type] += 1

    def set_suppress_output(self, suppress: bool) -> None:
        """Suppress reports unless the simulation mode is set in the environment."""
        self._suppress_output = suppress

    @property
    def flight_time(self) -> dict[VehicleType, int]:
        return dict(self._flight_time)

    @property
    def flight_count(self) -> dict[VehicleType, int]:
        return dict(self._flight_count)

    @property
    def distance(self) -> dict[VehicleType, float]:
        return dict(self._distance)

    @property
    def charge_time(self) -> dict[VehicleType, float]:
        return dict(self._charge_time)

    @property
    def charge_count(self) -> dict[VehicleType, int]:
        return dict(self._charge_count)

    @property
    def fault_count(self) -> dict[VehicleType, int]:
        return dict(self._fault_count)

    @property
    def passenger_miles(self) -> dict[VehicleType, float]:
        return dict(self._passenger_miles)

    def report(self, file: Optional[TextIO] = None) -> None:
        """Write averages for every vehicle type that has recorded flights."""
        simulation_mode = os.environ.get(_MODE_VARIABLE) == _SIMULATION_MODE
        if not simulation_mode and self._suppress_output:
            return

        out = file if file is not None else sys.stdout
        out.write("\n-- Per-Vehicle-Type Statistics --\n")
        for vehicle_type in sorted(self._flight_time):
            flights = self._flight_count[vehicle_type]
            charges = self._charge_count[vehicle_type]
            avg_time = self._flight_time[vehicle_type] / flights if flights > 0 else 0.0
            avg_distance = self._distance[vehicle_type] / flights if flights > 0 else 0.0
            avg_charge = self._charge_time[vehicle_type] / charges if charges > 0 else 0.0
            out.write(f"  VehicleType {int(vehicle_type)}:\n")
            out.write(f"    Avg Flight Time: {avg_time:g} mins\n")
            out.write(f"    Avg Distance per Flight: {avg_distance:g} miles\n")
            out.write(f"    Avg Charge Time: {avg_charge:g} hrs\n")
            out.write(f"    Total Faults: {self._fault_count[vehicle_type]}\n")
            out.write(
                f"    Total Passenger Miles: {self._passenger_miles[vehicle_type]:g}\n\n"
            )