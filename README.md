# evtolsim

A small discrete-time simulation of an electric vertical take-off and landing
(eVTOL) fleet. It draws a fleet of 20 vehicles at random from five vehicle
types: Alpha, Bravo, Charlie, Delta and Echo. Each vehicle is stepped minute by
minute for three hours (180 one-minute steps). At every step a vehicle may
raise a fault, with odds of 1 in 10, and may ask for a charger, with odds of
1 in 3. A shared pool of three charging ports hands out chargers. Flights,
charges and faults are counted per vehicle type.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running the simulation

```
evtolsim
evtolsim --seed 42
```

The `--seed` option seeds the random number generator, so a run can be
repeated exactly. The command first prints the fleet composition, which is the
number of vehicles of each type and the total. After that it prints one
statistics section for each vehicle type that has recorded at least one flight.
A section gives:

- the average flight time in minutes
- the average distance per flight in miles
- the average charge time in hours
- the total number of faults
- the total passenger miles

Statistics output can be suppressed with `StatisticsTracker.set_suppress_output(True)`.
The `EVTOL_MODE` environment variable overrides this. When it is set to
`SIMULATION`, the report is always written.

## Using the library

```python
import random
import sys

from evtolsim.simulation import run_simulation

result = run_simulation(random.Random(42), sys.stdout)
result.faults.report(sys.stdout)
result.chargers.report(sys.stdout)
print(result.stats.flight_count)
```

`run_simulation(rng=None, file=None)` writes the fleet composition and the
statistics report to `file`, or to standard output when no file is given. It
returns a `SimulationResult` with the `fleet`, `chargers`, `faults` and `stats`
the run left behind. The default profiles for the five types are in
`evtolsim.simulation.DEFAULT_PROFILES`.

The building blocks can also be used on their own:

- `evtolsim.vehicle`
  - `VehicleType`, an `IntEnum` whose `label` is the capitalised name.
  - `VehicleProfile`, a frozen dataclass. It holds battery capacity, cruise
    speed, energy per mile, time to charge, charger type and fault probability.
- `evtolsim.evtol`
  - `Evtol`, a single vehicle.
  - `simulate_step()` redraws its fault and charging flags. A fault gets a
    random code from 100 to 149.
  - `passenger_capacity()` is the battery capacity divided by 25, truncated.
  - `coin_flip(odds)` returns true with a probability of one in `odds` and
    raises `ValueError` when `odds` is not positive.
- `evtolsim.fleet`
  - `FleetManager(types, rng, profiles)` builds a 20-vehicle fleet with IDs
    1 to 20.
  - It raises `ValueError` when `types` is empty and `KeyError` when a chosen
    type has no profile.
- `evtolsim.charger`
  - `ChargerManager(port_count)` is the pool of charging ports.
  - `assign_charger` gives a free port to a vehicle that needs charging.
  - `available_ports` and `charging_ids` expose its state.
- `evtolsim.faults`
  - `FaultManager` logs `(evtol_id, fault_code)` records in the order they were
    raised.
  - `faults()` returns them and `report()` prints them.
- `evtolsim.stats_tracker`
  - `StatisticsTracker` holds the per-type totals.
  - The totals are `flight_time`, `flight_count`, `distance`, `charge_time`,
    `charge_count`, `fault_count` and `passenger_miles`.
  - `report()` writes the per-type report.

Every component that uses randomness takes a `random.Random` instance.

## Limitations

- Charging ports are never released. Once three vehicles have been given a
  port, no other vehicle gets one for the rest of the run.
- `ChargerManager.update` only recomputes the free ports from the assignments
  made so far.
- The vehicle profile values for energy per mile, charger type and fault
  probability are stored, but the simulation does not use them.
- The command prints only the fleet composition and the statistics report.
  The fault log and the charger status are available from the returned
  `SimulationResult`.
- Nothing is saved to disk.