from dataclasses import dataclass


@dataclass(slots=True)
class StepClock:
    """Accumulates tick time and reports how many whole steps are due."""
    interval: float
    elapsed: float = 0.0

    def advance(self, dt: float) -> int:
        if self.interval <= 0:
            return 0
        self.elapsed += dt
        steps = 0
        # Small epsilon so 0.016 * n accumulations land on the boundary.
        while self.elapsed + 1e-9 >= self.interval:
            self.elapsed -= self.interval
            steps += 1
        return steps

    def reset(self) -> None:
        self.elapsed = 0.0
