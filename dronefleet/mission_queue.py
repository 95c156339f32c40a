"""A thread-safe priority queue of missions."""

from __future__ import annotations

import heapq
import itertools
import threading

from dronefleet.missions import Mission


class MissionQueue:
    """Hands out missions lowest priority value first; safe across threads."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Mission]] = []
        self._counter = itertools.count()
        self._lock = threading.Lock()

    def add_mission(self, mission: Mission) -> None:
        """Put a mission on the queue."""
        with self._lock:
            heapq.heappush(self._heap, (mission.priority, next(self._counter), mission))

    def get_next_mission(self) -> Mission | None:
        """Remove and return the most urgent mission, or None if there is none."""
        with self._lock:
            if not self._heap:
                return None
            return heapq.heappop(self._heap)[2]

    def is_empty(self) -> bool:
        """Whether no missions are waiting."""
        with self._lock:
            return not self._heap

    def __len__(self) -> int:
        with self._lock:
            return len(self._heap)