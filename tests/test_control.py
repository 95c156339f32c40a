import io
import threading
import time
from dataclasses import dataclass, field

import pytest

from dronefleet.control import MissionControl, main
from dronefleet.drone import DroneState
from dronefleet.missions import Mission


@dataclass(frozen=True)
class RecordingMission(Mission):
    log: list = field(default_factory=list, compare=False)
    gate: threading.Event | None = field(default=None, compare=False)

    def execute(self) -> None:
        if self.gate is not None:
            self.gate.wait(5)
        self.log.append(self.mission_id)


def wait_until(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


def test_fleet_is_numbered_from_one():
    with MissionControl(3, poll_interval=0.01) as control:
        assert [drone.drone_id for drone in control.drones] == [1, 2, 3]


def test_run_simulation_announces_fleet(capsys):
    calls = []
    with MissionControl(3, poll_interval=0.01) as control:
        control.run_simulation(lambda: calls.append(True))
    out = capsys.readouterr().out
    assert calls == [True]
    assert "Fleet of 3 drones deployed. Main thread is standing by." in out
    assert "Press Enter to stop the simulation and shut down the drones." in out


def test_run_simulation_reads_stdin_by_default(monkeypatch, capsys):
    stdin = io.StringIO("\nleft over\n")
    monkeypatch.setattr("sys.stdin", stdin)
    with MissionControl(1, poll_interval=0.01) as control:
        control.run_simulation()
    out = capsys.readouterr().out
    assert "Fleet of 1 drones deployed. Main thread is standing by." in out
    assert out.index("Fleet of 1 drones deployed.") < out.index("Mission Control shutting down")
    assert stdin.read() == "left over\n"


def test_single_drone_runs_missions_in_priority_order():
    log = []
    gate = threading.Event()
    with MissionControl(1, poll_interval=0.01) as control:
        control.add_mission(RecordingMission(0, 0, log=log, gate=gate))
        drone = control.drones[0]
        assert wait_until(lambda: drone.state is DroneState.WORKING)
        control.add_mission(RecordingMission(1, 3, log=log))
        control.add_mission(RecordingMission(2, 1, log=log))
        control.add_mission(RecordingMission(3, 2, log=log))
        gate.set()
        assert wait_until(lambda: len(log) == 4)
    assert log == [0, 2, 3, 1]


def test_shutdown_stops_every_drone(capsys):
    control = MissionControl(3, poll_interval=0.01)
    control.shutdown()
    out = capsys.readouterr().out
    assert all(not drone.is_alive for drone in control.drones)
    assert "Mission Control shutting down. Signalling drone to stop..." in out
    for drone_id in (1, 2, 3):
        assert f"Drone {drone_id} shutting down." in out
    assert out.index("Mission Control shutting down") < out.index("Drone 1 shutting down.")


def test_shutdown_is_idempotent(capsys):
    control = MissionControl(2, poll_interval=0.01)
    control.shutdown()
    control.shutdown()
    out = capsys.readouterr().out
    assert out.count("Mission Control shutting down.") == 1


def test_missions_spread_across_fleet():
    log = []
    with MissionControl(3, poll_interval=0.01) as control:
        for mission_id in range(30):
            control.add_mission(RecordingMission(mission_id, mission_id % 4, log=log))
        assert wait_until(lambda: len(log) == 30)
        assert control.queue.is_empty()
    assert sorted(log) == list(range(30))


def test_main_rejects_bad_option():
    with pytest.raises(SystemExit):
        main(["--drones", "many"])