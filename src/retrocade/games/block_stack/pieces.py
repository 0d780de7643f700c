"""Tetromino shapes, colours and the shape geometry helpers."""
from retrocade.games.block_stack.components import Playfield, Shape
from retrocade.rendering.frame import hex_color

PIECES: dict[str, tuple[Shape, tuple[int, int, int]]] = {
    "I": (((1, 1, 1, 1),), hex_color("#00f0f0")),
    "O": (((1, 1), (1, 1)), hex_color("#f0f000")),
    "T": (((0, 1, 0), (1, 1, 1)), hex_color("#a000f0")),
    "S": (((0, 1, 1), (1, 1, 0)), hex_color("#00f000")),
    "Z": (((1, 1, 0), (0, 1, 1)), hex_color("#f00000")),
    "J": (((1, 0, 0), (1, 1, 1)), hex_color("#0000f0")),
    "L": (((0, 0, 1), (1, 1, 1)), hex_color("#f0a000")),
}

LINE_MULTIPLIERS = (1, 3, 5, 8)


def rotate_clockwise(shape: Shape) -> Shape:
    rows = len(shape)
    cols = len(shape[0])
    return tuple(tuple(shape[rows - 1 - j][i] for j in range(rows)) for i in range(cols))


def fits(field: Playfield, shape: Shape, x: int, y: int) -> bool:
    for row, line in enumerate(shape):
        for col, filled in enumerate(line):
            if filled and not field.is_free(x + col, y + row):
                return False
    return True


def spawn_column(field: Playfield, shape: Shape) -> int:
    return field.cols // 2 - len(shape[0]) // 2


def line_score(lines: int, level: int) -> int:
    if lines <= 0:
        return 0
    return 100 * LINE_MULTIPLIERS[min(lines, len(LINE_MULTIPLIERS)) - 1] * level


def drop_interval(level: int, base: float = 1.0, step: float = 0.05, minimum: float = 0.1) -> float:
    return max(minimum, base - step * (level - 1))
