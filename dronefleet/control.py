"""Mission control: a fleet of drones sharing one mission queue."""

from __future__ import annotations

import argparse
import sys
import threading
from collections.abc import Callable, Sequence

from dronefleet.drone import DEFAULT_POLL_INTERVAL, Drone
from dronefleet.mission_queue import MissionQueue
from dronefleet.missions import (
    DEFAULT_DURATION,
    DeliveryMission,
    Mission,
    SurveillanceMission,
)


class MissionControl:
    """Owns the mission queue and a fleet of drones numbered from 1."""

    def __init__(self, fleet_size: int, poll_interval: float = DEFAULT_POLL_INTERVAL) -> None:
        self._queue = MissionQueue()
        self._stop_event = threading.Event()
        self._shut_down = False
        self._drones = tuple(
            Drone(drone_id, self._queue, self._stop_event, poll_interval)
            for drone_id in range(1, fleet_size + 1)
        )

    @property
    def drones(self) -> tuple[Drone, ...]:
        """The drones of the fleet."""
        return self._drones

    @property
    def queue(self) -> MissionQueue:
        """The queue the drones take missions from."""
        return self._queue

    def add_mission(self, mission: Mission) -> None:
        """Queue a mission for the fleet."""
        self._queue.add_mission(mission)

    def run_simulation(self, wait: Callable[[], object] | None = None) -> None:
        """Announce the fleet and block until ``wait`` returns.

        By default this waits for a line on standard input.
        """
        print(
            f"Fleet of {len(self._drones)} drones deployed. Main thread is standing by.",
            flush=True,
        )
        print("Press Enter to stop the simulation and shut down the drones.", flush=True)
        if wait is None:
            sys.stdin.readline()
        else:
            wait()

    def shutdown(self) -> None:
        """Signal every drone to stop and wait for them to finish."""
        if self._shut_down:
            return
        self._shut_down = True
        print("Mission Control shutting down. Signalling drone to stop...", flush=True)
        self._stop_event.set()
        for drone in self._drones:
            drone.join()

    def __enter__(self) -> MissionControl:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dronefleet",
        description="Run a drone fleet on a few sample missions until Enter is pressed.",
    )
    parser.add_argument("--drones", type=int, default=3, help="size of the fleet")
    parser.add_argument(
        "--duration",
        type=float,
        default=DEFAULT_DURATION,
        help="seconds each mission takes",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Start a fleet, queue the sample missions and run until Enter is pressed."""
    args = _parse_args(argv)
    duration = args.duration
    with MissionControl(args.drones) as control:
        control.add_mission(SurveillanceMission(101, 2, 34.0, -118.2, duration=duration))
        control.add_mission(
            DeliveryMission(201, 1, 40.7, -74.0, "Medical Supplies", duration=duration)
        )
        control.add_mission(SurveillanceMission(102, 3, 37.7, -122.4, duration=duration))
        control.add_mission(
            DeliveryMission(202, 1, 41.8, -87.6, "Urgent Documents", duration=duration)
        )
        control.add_mission(SurveillanceMission(103, 2, 29.7, -95.3, duration=duration))
        control.run_simulation()
    return 0


if __name__ == "__main__":
    sys.exit(main())