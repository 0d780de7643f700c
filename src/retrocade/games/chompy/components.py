"""Components used by the maze chase game."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from retrocade.games.chompy.maze import Maze


class PelletKind(Enum):
    DOT = "dot"
    POWER = "power"


@dataclass
class Pellet:
    kind: PelletKind
    points: int


@dataclass
class Chomper:
    """The player; ``previous`` is the tile held before this tick's move."""
    start: tuple[int, int]
    previous: tuple[int, int] | None = None


@dataclass
class Ghost:
    name: str
    color: tuple[int, int, int]
    start: tuple[int, int]
    corner: tuple[int, int]
    frightened: bool = False
    exiting: bool = False
    previous: tuple[int, int] | None = None


class GhostPhase(Enum):
    SCATTER = "scatter"
    CHASE = "chase"


@dataclass
class GhostMode:
    """Shared ghost behaviour timer; the scatter/chase clock stops while frightened."""
    phase: GhostPhase = GhostPhase.SCATTER
    elapsed: float = 0.0
    duration: float = 7.0
    fright_remaining: float = 0.0

    @property
    def frightened(self) -> bool:
        return self.fright_remaining > 0


@dataclass
class MazeBoard:
    maze: Maze
