"""Components used by the road-crossing game."""
from dataclasses import dataclass


@dataclass
class Frog:
    start_x: int
    start_y: int


@dataclass
class Vehicle:
    direction: int = 1


@dataclass
class TrafficTuning:
    """``base_speed`` is in cells per second and grows with each crossing."""
    base_speed: float = 4.0
    speedup: float = 1.2


@dataclass(frozen=True)
class Road:
    cols: int
    rows: int
