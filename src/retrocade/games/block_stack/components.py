"""Components used by the block stacking game."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

Shape = tuple[tuple[int, ...], ...]
Color = tuple[int, int, int]


@dataclass
class Playfield:
    """Locked cells, indexed ``cells[row][col]``; None marks an empty cell."""
    cols: int = 10
    rows: int = 20
    cells: list[list[Optional[Color]]] = field(default_factory=list)
    lines: int = 0

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [[None] * self.cols for _ in range(self.rows)]

    def is_free(self, col: int, row: int) -> bool:
        return 0 <= col < self.cols and 0 <= row < self.rows and self.cells[row][col] is None


@dataclass
class ActivePiece:
    kind: str
    shape: Shape
    color: Color
    x: int
    y: int
    locked: bool = False

    def cells(self, shape: Shape | None = None, x: int | None = None,
              y: int | None = None) -> list[tuple[int, int]]:
        shape = self.shape if shape is None else shape
        ox = self.x if x is None else x
        oy = self.y if y is None else y
        return [
            (ox + col, oy + row)
            for row, line in enumerate(shape)
            for col, filled in enumerate(line)
            if filled
        ]


@dataclass
class NextPiece:
    kind: str


@dataclass
class Gravity:
    interval: float = 1.0
    elapsed: float = 0.0
