"""Display lists produced by game renderers.

A ``Frame`` is plain data: renderers build one from world state and never touch
a window, so frames can be compared in tests and painted by any backend.
Coordinates are canvas pixels with a top-left origin.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

Color = tuple  # (r, g, b) or (r, g, b, a)


@dataclass(frozen=True, slots=True)
class RectShape:
    x: float
    y: float
    width: float
    height: float
    color: Color
    filled: bool = True
    border_width: float = 1.0


@dataclass(frozen=True, slots=True)
class CircleShape:
    cx: float
    cy: float
    radius: float
    color: Color


@dataclass(frozen=True, slots=True)
class LineShape:
    x1: float
    y1: float
    x2: float
    y2: float
    color: Color
    width: float = 1.0


@dataclass(frozen=True, slots=True)
class TextShape:
    text: str
    x: float
    y: float
    color: Color
    size: int = 16
    anchor_x: str = "center"
    anchor_y: str = "center"
    bold: bool = False


Shape = Union[RectShape, CircleShape, LineShape, TextShape]


def hex_color(value: str) -> tuple[int, int, int]:
    """Convert ``#rrggbb`` (or ``#rgb``) into an RGB tuple."""
    raw = value.lstrip("#")
    if len(raw) == 3:
        raw = "".join(ch * 2 for ch in raw)
    return (int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16))


@dataclass
class Frame:
    width: int
    height: int
    background: Color = (0, 0, 0)
    shapes: list[Shape] = field(default_factory=list)

    def rect(self, x: float, y: float, width: float, height: float, color: Color, *,
             filled: bool = True, border_width: float = 1.0) -> None:
        self.shapes.append(RectShape(x, y, width, height, color, filled, border_width))

    def circle(self, cx: float, cy: float, radius: float, color: Color) -> None:
        self.shapes.append(CircleShape(cx, cy, radius, color))

    def line(self, x1: float, y1: float, x2: float, y2: float, color: Color,
             width: float = 1.0) -> None:
        self.shapes.append(LineShape(x1, y1, x2, y2, color, width))

    def text(self, text: str, x: float, y: float, color: Color, *, size: int = 16,
             anchor_x: str = "center", anchor_y: str = "center", bold: bool = False) -> None:
        self.shapes.append(TextShape(text, x, y, color, size, anchor_x, anchor_y, bold))

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes)

    def __len__(self) -> int:
        return len(self.shapes)

    def texts(self) -> list[str]:
        return [shape.text for shape in self.shapes if isinstance(shape, TextShape)]

    def of_type(self, kind: type) -> list[Shape]:
        return [shape for shape in self.shapes if isinstance(shape, kind)]
