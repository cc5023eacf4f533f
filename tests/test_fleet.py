import random

import pytest

from evtolsim.fleet import FLEET_SIZE, FleetManager
from evtolsim.vehicle import VehicleProfile, VehicleType

PROFILE_1 = VehicleProfile(100, 50, 1.0, 0.5, 3, 0.01)
PROFILE_2 = VehicleProfile(120, 60, 1.2, 0.6, 4, 0.02)


def test_add_vehicle_creates_twenty():
    fm = FleetManager([VehicleType.ALPHA], random.Random(), {VehicleType.ALPHA: PROFILE_1})
    assert len(fm.fleet()) == 20


def test_get_fleet_not_empty():
    fm = FleetManager([VehicleType.BRAVO], random.Random(), {VehicleType.BRAVO: PROFILE_2})
    fleet = fm.fleet()
    assert len(fleet) > 0
    assert all(e.vehicle_type is VehicleType.BRAVO for e in fleet)
    assert all(e.profile == PROFILE_2 for e in fleet)


def test_ids_are_sequential_from_one():
    fm = FleetManager([VehicleType.ALPHA], random.Random(1), {VehicleType.ALPHA: PROFILE_1})
    assert [e.vehicle_id for e in fm.fleet()] == list(range(1, FLEET_SIZE + 1))


def test_types_drawn_from_given_list_with_matching_profiles():
    types = [VehicleType.ALPHA, VehicleType.DELTA]
    profiles = {VehicleType.ALPHA: PROFILE_1, VehicleType.DELTA: PROFILE_2}
    fm = FleetManager(types, random.Random(7), profiles)
    for e in fm.fleet():
        assert e.vehicle_type in types
        assert e.profile == profiles[e.vehicle_type]


def test_same_seed_gives_same_fleet():
    types = list(VehicleType)
    profiles = {t: PROFILE_1 for t in types}
    a = FleetManager(types, random.Random(42), profiles)
    b = FleetManager(types, random.Random(42), profiles)
    assert [e.vehicle_type for e in a.fleet()] == [e.vehicle_type for e in b.fleet()]


def test_empty_types_rejected():
    with pytest.raises(ValueError):
        FleetManager([], random.Random(), {})


def test_missing_profile_rejected():
    with pytest.raises(KeyError):
        FleetManager([VehicleType.ECHO], random.Random(), {VehicleType.ALPHA: PROFILE_1})