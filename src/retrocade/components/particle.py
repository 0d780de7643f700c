from dataclasses import dataclass


@dataclass(slots=True)
class Particle:
    """Short-lived spark; ``life`` fades from 1.0 to 0.0 at ``fade`` per second."""
    x: float
    y: float
    dx: float
    dy: float
    life: float = 1.0
    fade: float = 0.4
    color: tuple[int, int, int] = (255, 255, 0)
