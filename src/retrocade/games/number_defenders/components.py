"""Components used by the math defence game."""
from dataclasses import dataclass


@dataclass
class Problem:
    text: str
    answer: int
    lane: int


@dataclass
class Cannon:
    width: int = 2


@dataclass
class AnswerBuffer:
    text: str = ""


@dataclass
class DefenseStats:
    correct: int = 0
    answers_per_level: int = 10


@dataclass(frozen=True)
class Battlefield:
    cols: int
    rows: int
    lanes: int = 4

    @property
    def lane_width(self) -> float:
        return self.cols / self.lanes

    def lane_of(self, x: float) -> int:
        return min(self.lanes - 1, max(0, int(x // self.lane_width)))

    def lane_centre(self, lane: int) -> float:
        return lane * self.lane_width + self.lane_width / 2
