import io

from evtolsim.stats_tracker import StatisticsTracker
from evtolsim.vehicle import VehicleType

TEST_TYPE = VehicleType.ALPHA


def test_record_flight():
    stats = StatisticsTracker()
    stats.record_flight(TEST_TYPE, 60, 120.0, 4)
    assert stats.flight_time[TEST_TYPE] == 60
    assert stats.flight_count[TEST_TYPE] == 1
    assert stats.distance[TEST_TYPE] == 120.0
    assert stats.passenger_miles[TEST_TYPE] == 120.0 * 4


def test_record_charge():
    stats = StatisticsTracker()
    stats.record_charge(TEST_TYPE, 2.5)
    assert stats.charge_time[TEST_TYPE] == 2.5
    assert stats.charge_count[TEST_TYPE] == 1


def test_record_fault():
    stats = StatisticsTracker()
    for _ in range(2):
        stats.record_fault(TEST_TYPE)
    assert stats.fault_count[TEST_TYPE] == 2


def test_set_suppress_output_hides_report(monkeypatch):
    monkeypatch.delenv("EVTOL_MODE", raising=False)
    stats = StatisticsTracker()
    stats.set_suppress_output(True)
    stats.record_flight(TEST_TYPE, 30, 60, 2)
    out = io.StringIO()
    stats.report(out)
    assert out.getvalue() == ""


def test_simulation_mode_overrides_suppression(monkeypatch):
    monkeypatch.setenv("EVTOL_MODE", "SIMULATION")
    stats = StatisticsTracker()
    stats.set_suppress_output(True)
    stats.record_flight(TEST_TYPE, 30, 60, 2)
    out = io.StringIO()
    stats.report(out)
    assert "-- Per-Vehicle-Type Statistics --" in out.getvalue()


def test_accessors():
    stats = StatisticsTracker()
    stats.record_flight(TEST_TYPE, 30, 60, 2)
    assert stats.flight_time[TEST_TYPE] == 30
    assert stats.flight_count[TEST_TYPE] == 1
    assert stats.distance[TEST_TYPE] == 30.0
    assert stats.passenger_miles[TEST_TYPE] == 60.0


def test_accessors_return_copies():
    stats = StatisticsTracker()
    stats.record_fault(TEST_TYPE)
    stats.fault_count[TEST_TYPE] = 99
    assert stats.fault_count[TEST_TYPE] == 1


def test_report_format(monkeypatch):
    monkeypatch.delenv("EVTOL_MODE", raising=False)
    stats = StatisticsTracker()
    stats.record_flight(TEST_TYPE, 30, 60, 2)
    stats.record_charge(TEST_TYPE, 2.5)
    stats.record_fault(TEST_TYPE)
    out = io.StringIO()
    stats.report(out)
    assert out.getvalue() == (
        "\n-- Per-Vehicle-Type Statistics --\n"
        "  VehicleType 0:\n"
        "    Avg Flight Time: 30 mins\n"
        "    Avg Distance per Flight: 30 miles\n"
        "    Avg Charge Time: 2.5 hrs\n"
        "    Total Faults: 1\n"
        "    Total Passenger Miles: 60\n\n"
    )


def test_report_lists_only_flown_types_in_order(monkeypatch):
    monkeypatch.delenv("EVTOL_MODE", raising=False)
    stats = StatisticsTracker()
    stats.record_flight(VehicleType.ECHO, 10, 60, 1)
    stats.record_flight(VehicleType.BRAVO, 10, 60, 1)
    stats.record_fault(VehicleType.DELTA)
    out = io.StringIO()
    stats.report(out)
    text = out.getvalue()
    assert text.index("VehicleType 1:") < text.index("VehicleType 4:")
    assert "VehicleType 3:" not in text