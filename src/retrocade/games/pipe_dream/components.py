"""Components used by the pipe connection puzzle."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from retrocade.components.grid_position import Direction


class PipeKind(Enum):
    START = "start"
    END = "end"
    STRAIGHT = "straight"
    CORNER = "corner"
    TEE = "t-junction"


# Openings at rotation 0.
BASE_OPENINGS: dict[PipeKind, frozenset[Direction]] = {
    PipeKind.START: frozenset({Direction.RIGHT}),
    PipeKind.END: frozenset({Direction.LEFT}),
    PipeKind.STRAIGHT: frozenset({Direction.LEFT, Direction.RIGHT}),
    PipeKind.CORNER: frozenset({Direction.LEFT, Direction.DOWN}),
    PipeKind.TEE: frozenset({Direction.LEFT, Direction.RIGHT, Direction.DOWN}),
}

CLOCKWISE = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}


def rotate_openings(openings: frozenset[Direction], rotation: int) -> frozenset[Direction]:
    turned = set(openings)
    for _ in range((rotation // 90) % 4):
        turned = {CLOCKWISE[d] for d in turned}
    return frozenset(turned)


@dataclass
class Pipe:
    kind: PipeKind
    rotation: int = 0
    fixed: bool = False

    @property
    def openings(self) -> frozenset[Direction]:
        return rotate_openings(BASE_OPENINGS[self.kind], self.rotation)

    def rotate(self) -> None:
        if not self.fixed:
            self.rotation = (self.rotation + 90) % 360


@dataclass
class PipeGrid:
    """The board geometry plus the latest flow trace."""
    size: int = 8
    tile: int = 40
    origin_x: float = 0.0
    origin_y: float = 0.0
    flow: set[tuple[int, int]] = field(default_factory=set)
    connected: bool = False
    selected: tuple[int, int] | None = None

    @property
    def start(self) -> tuple[int, int]:
        return (0, 0)

    @property
    def end(self) -> tuple[int, int]:
        return (self.size - 1, self.size - 1)

    def cell_at(self, x: float, y: float) -> tuple[int, int] | None:
        col = int((x - self.origin_x) // self.tile)
        row = int((y - self.origin_y) // self.tile)
        if 0 <= col < self.size and 0 <= row < self.size:
            return (col, row)
        return None
