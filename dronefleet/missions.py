"""Mission types that a drone can carry out."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

DEFAULT_DURATION = 2.0


@dataclass(frozen=True)
class Mission(ABC):
    """A unit of work with an identifier and a priority (lower runs first)."""

    mission_id: int
    priority: int
    duration: float = field(default=DEFAULT_DURATION, kw_only=True, compare=False)

    @abstractmethod
    def execute(self) -> None:
        """Carry out the mission."""

    def _work(self) -> None:
        if self.duration > 0:
            time.sleep(self.duration)


@dataclass(frozen=True)
class SurveillanceMission(Mission):
    """Survey the area around a point."""

    x: float
    y: float

    def execute(self) -> None:
        print(
            f"Executing Surveillance Mission {self.mission_id}: "
            f"Surveying area around ({self.x:g}, {self.y:g})...",
            flush=True,
        )
        self._work()
        print(f"Surveillance Mission {self.mission_id} completed.", flush=True)


@dataclass(frozen=True)
class DeliveryMission(Mission):
    """Deliver an item to a destination."""

    destination_x: float
    destination_y: float
    item: str

    def execute(self) -> None:
        print(
            f"Executing Delivery Mission {self.mission_id}: "
            f"Delivering item '{self.item}' to "
            f"({self.destination_x:g}, {self.destination_y:g})...",
            flush=True,
        )
        self._work()
        print(f"Delivery Mission {self.mission_id} completed.", flush=True)