"""Components used by the brick-breaking games."""
from dataclasses import dataclass


@dataclass
class Paddle:
    speed: float = 0.5


@dataclass
class Ball:
    """Ball state; ``respawn_in`` > 0 means the ball is waiting off the field."""
    respawn_in: float = 0.0


@dataclass
class Brick:
    points: int = 10


@dataclass
class BreakoutTuning:
    speed_factor: float = 1.0
    speed_multiplier: float = 1.15
    english: float = 0.4


@dataclass(frozen=True)
class Field:
    cols: int
    rows: int
