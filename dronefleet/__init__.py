"""Drone fleet simulation: missions, a thread-safe priority queue, drones and mission control."""

__version__ = "0.1.0"
__all__ = ["control", "drone", "mission_queue", "missions"]