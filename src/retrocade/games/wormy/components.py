"""Components used by the snake game."""
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional


@dataclass
class Snake:
    """Ordered body cells, head first."""
    segments: Deque[tuple[int, int]] = field(default_factory=deque)
    last_tail: Optional[tuple[int, int]] = None
    crashed: bool = False
    foods_eaten: int = 0

    @property
    def head(self) -> tuple[int, int]:
        return self.segments[0]

    def __len__(self) -> int:
        return len(self.segments)


@dataclass
class Food:
    points: int = 10


@dataclass(frozen=True)
class WormyGrid:
    cols: int
    rows: int
    wrap: bool = True
