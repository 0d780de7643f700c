"""Components used by the two-player paddle game."""
from dataclasses import dataclass


@dataclass
class Paddle:
    side: str  # "left" or "right"
    speed: float = 0.5


@dataclass
class Ball:
    size: float = 1.0


@dataclass
class MatchScore:
    left: int = 0
    right: int = 0
    winning_score: int = 11
    winner: str | None = None

    @property
    def display(self) -> str:
        return f"{self.left} - {self.right}"


@dataclass(frozen=True)
class Court:
    cols: int
    rows: int
