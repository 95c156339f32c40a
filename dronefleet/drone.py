"""Worker drones that pull missions from a shared queue on their own thread."""

from __future__ import annotations

import enum
import threading

from dronefleet.mission_queue import MissionQueue

DEFAULT_POLL_INTERVAL = 0.1


class DroneState(enum.Enum):
    """What a drone is doing right now."""

    IDLE = "idle"
    WORKING = "working"


class Drone:
    """A drone that takes missions from a queue until told to stop.

    The worker thread starts as soon as the drone is created. It keeps taking
    the most urgent mission from the queue and executing it; when the queue is
    empty it waits ``poll_interval`` seconds before looking again.
    """

    def __init__(
        self,
        drone_id: int,
        queue: MissionQueue,
        stop_event: threading.Event,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ) -> None:
        self.drone_id = drone_id
        self._queue = queue
        self._stop_event = stop_event
        self._poll_interval = poll_interval
        self._state = DroneState.IDLE
        self._state_lock = threading.Lock()
        self._thread = threading.Thread(
            target=self._run, name=f"drone-{drone_id}", daemon=True
        )
        self._thread.start()

    @property
    def state(self) -> DroneState:
        """The drone's current state."""
        with self._state_lock:
            return self._state

    def _set_state(self, state: DroneState) -> None:
        with self._state_lock:
            self._state = state

    @property
    def is_alive(self) -> bool:
        """Whether the worker thread is still running."""
        return self._thread.is_alive()

    def _run(self) -> None:
        while not self._stop_event.is_set():
            mission = self._queue.get_next_mission()
            if mission is None:
                self._stop_event.wait(self._poll_interval)
                continue
            self._set_state(DroneState.WORKING)
            try:
                mission.execute()
            finally:
                self._set_state(DroneState.IDLE)
        print(f"Drone {self.drone_id} shutting down.", flush=True)

    def join(self) -> None:
        """Wait for the worker thread to finish."""
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()