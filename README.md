# dronefleet

A small simulation of a drone fleet. Missions go into a thread-safe priority
queue, and a fleet of drones takes them off it. Each drone runs in its own
thread. A lower priority number means a mission is more urgent. Missions with
the same priority come out in the order they were added.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
dronefleet
```

This starts a control centre with three drones and queues five sample
surveillance and delivery missions. The drones work through them in priority
order and print their progress. Press Enter to signal the fleet to stop. Each
drone finishes its current mission and then shuts down. Missions still waiting
in the queue at that point are not run.

Options:

- `--drones N`: the size of the fleet (default 3).
- `--duration SECONDS`: how long each mission takes (default 2.0).

The same command can be run as `python -m dronefleet.control`.

## Library use

```python
from dronefleet.control import MissionControl
from dronefleet.missions import DeliveryMission, SurveillanceMission

with MissionControl(2) as control:
    control.add_mission(SurveillanceMission(101, 2, 34.0, -118.2))
    control.add_mission(DeliveryMission(201, 1, 40.7, -74.0, "Medical Supplies"))
    control.run_simulation(wait=input)
```

`run_simulation()` prints a short announcement and blocks until `wait`
returns. Without `wait`, it reads one line from standard input. It does not
stop the drones itself. Call `MissionControl.shutdown()` to stop them, or use
the control centre as a context manager as shown above, which calls
`shutdown()` on exit.

`shutdown()` signals every drone to stop and waits for each one to finish its
current mission. Calling it a second time does nothing.

`MissionControl` also has these members:

- `drones`: the fleet, numbered from 1.
- `queue`: the shared `MissionQueue`.
- `poll_interval`: an optional constructor argument that sets how often idle
  drones look at the queue (default 0.1 seconds).

### Building blocks

- `dronefleet.missions.Mission`: the abstract base for a mission. It is a
  frozen dataclass with `mission_id`, `priority` and a keyword-only `duration`
  (default 2.0 seconds). Subclasses implement `execute()`.
- `SurveillanceMission(mission_id, priority, x, y)` and
  `DeliveryMission(mission_id, priority, destination_x, destination_y, item)`:
  the two kinds of mission. Each prints a start line, sleeps for `duration`
  seconds and prints a completion line.
- `dronefleet.mission_queue.MissionQueue`: a thread-safe priority queue with
  these methods:
  - `add_mission()` adds a mission.
  - `get_next_mission()` removes and returns the most urgent mission, or
    `None` when the queue is empty.
  - `is_empty()` tells whether the queue holds any missions.
  - `len()` gives the number of missions waiting.
- `dronefleet.drone.Drone(drone_id, queue, stop_event, poll_interval)`: a
  worker that starts its thread as soon as it is created. It takes missions
  from the queue until `stop_event` (a `threading.Event`) is set. It has these
  members:
  - `state` is a `DroneState`, either `IDLE` or `WORKING`.
  - `is_alive` tells whether its thread is still running.
  - `join()` waits for its thread to finish.

## Limitations

Everything is kept in memory. Missions are not saved anywhere, and nothing
reports back on a mission except the lines it prints.