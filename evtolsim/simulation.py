"""Runs a three-hour eVTOL fleet simulation and reports its statistics."""

from __future__ import annotations

import argparse
import random
import sys
from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from evtolsim.charger import ChargerManager
from evtolsim.evtol import Evtol
from evtolsim.faults import FaultManager
from evtolsim.fleet import FleetManager
from evtolsim.stats_tracker import StatisticsTracker
from evtolsim.vehicle import VehicleProfile, VehicleType

CHARGER_PORTS = 3
TIME_STEP_MINUTES = 1
TOTAL_MINUTES = 180

DEFAULT_PROFILES: dict[VehicleType, VehicleProfile] = {
    VehicleType.ALPHA: VehicleProfile(150, 100, 1, 0.5, 4, 0.01),
    VehicleType.BRAVO: VehicleProfile(120, 90, 1.2, 0.75, 5, 0.015),
    VehicleType.CHARLIE: VehicleProfile(180, 110, 1.1, 0.6, 6, 0.012),
    VehicleType.DELTA: VehicleProfile(200, 95, 0.9, 0.8, 3, 0.02),
    VehicleType.ECHO: VehicleProfile(140, 105, 1.3, 0.7, 2, 0.01),
}


@dataclass
class SimulationResult:
    """The state left behind by a finished simulation."""

    fleet: list[Evtol]
    chargers: ChargerManager
    faults: FaultManager
    stats: StatisticsTracker


def _write_composition(fleet: list[Evtol], out: TextIO) -> None:
    counts = Counter(e.vehicle_type for e in fleet)
    out.write("Fleet composition:\n")
    for vehicle_type in sorted(counts):
        out.write(f"{vehicle_type.label}: {counts[vehicle_type]} vehicles\n")
    out.write(f"Fleet Count Total: {sum(counts.values())} vehicles\n")


def run_simulation(
    rng: Optional[random.Random] = None, file: Optional[TextIO] = None
) -> SimulationResult:
    """Simulate the fleet minute by minute and write the report to ``file``."""
    rng = rng if rng is not None else random.Random()
    out = file if file is not None else sys.stdout

    chargers = ChargerManager(CHARGER_PORTS)
    faults = FaultManager()
    stats = StatisticsTracker()
    stats.set_suppress_output(False)

    fleet = FleetManager(list(VehicleType), rng, DEFAULT_PROFILES).fleet()
    _write_composition(fleet, out)

    minutes_flown: defaultdict[int, int] = defaultdict(int)
    for minute in range(0, TOTAL_MINUTES, TIME_STEP_MINUTES):
        for index, evtol in enumerate(fleet):
            evtol.simulate_step()

            if not evtol.is_charging() and not evtol.has_fault():
                minutes_flown[index] += 1

            if evtol.has_fault():
                faults.record_fault(evtol.vehicle_id, evtol.fault_code)
                stats.record_fault(evtol.vehicle_type)

            if evtol.needs_charging() and evtol.is_charging():
                chargers.assign_charger(evtol, minute)
                stats.record_charge(evtol.vehicle_type, evtol.profile.time_to_charge)
                stats.record_flight(
                    evtol.vehicle_type,
                    minutes_flown[index],
                    evtol.cruise_speed(),
                    evtol.passenger_capacity(),
                )
                minutes_flown[index] = 0

        chargers.update(minute)

    stats.set_suppress_output(False)
    stats.report(out)
    return SimulationResult(fleet=fleet, chargers=chargers, faults=faults, stats=stats)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="evtolsim", description="Simulate a fleet of eVTOL vehicles for three hours."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible runs")
    args = parser.parse_args(argv)
    run_simulation(random.Random(args.seed))
    return 0


if __name__ == "__main__":
    sys.exit(main())