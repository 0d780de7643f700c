"""Maze template parsing and tile queries for the maze chase game."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from retrocade.components.grid_position import Direction
from retrocade.errors import BoardLayoutError

WALL = "#"
DOT = "."
POWER = "o"
DOOR = "-"
FLOOR = " "
PLAYER = "P"
GHOST = "G"
TILES = frozenset({WALL, DOT, POWER, DOOR, FLOOR, PLAYER, GHOST})

MAZE_COLS = 28
MAZE_ROWS = 31

CLASSIC_MAZE: tuple[str, ...] = (
    "############################",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#o####.#####.##.#####.####o#",
    "#.####.#####.##.#####.####.#",
    "#..........................#",
    "#.####.##.########.##.####.#",
    "#.####.##.########.##.####.#",
    "#......##....##....##......#",
    "######.##### ## #####.######",
    "     #.##### ## #####.#     ",
    "     #.##    G     ##.#     ",
    "     #.## ###--### ##.#     ",
    "######.## #      # ##.######",
    "      .   #G G  G#   .      ",
    "######.## #      # ##.######",
    "     #.## ######## ##.#     ",
    "     #.##          ##.#     ",
    "     #.## ######## ##.#     ",
    "######.## ######## ##.######",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#.####.#####.##.#####.####.#",
    "#o..##.......P .......##..o#",
    "###.##.##.########.##.##.###",
    "###.##.##.########.##.##.###",
    "#......##....##....##......#",
    "#.##########.##.##########.#",
    "#.##########.##.##########.#",
    "#..........................#",
    "############################",
)

# Tie-break order when two exits are equally close to a target.
EXIT_ORDER = (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT)


@dataclass
class Maze:
    cols: int
    rows: int
    walls: frozenset[tuple[int, int]]
    doors: frozenset[tuple[int, int]]
    dots: tuple[tuple[int, int], ...]
    power_pellets: tuple[tuple[int, int], ...]
    player_start: tuple[int, int]
    ghost_starts: tuple[tuple[int, int], ...]
    door_exit: tuple[int, int] | None = None
    template: tuple[str, ...] = field(default=(), repr=False)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def is_open(self, x: int, y: int, *, through_door: bool = False) -> bool:
        if not self.in_bounds(x, y):
            return False
        if (x, y) in self.walls:
            return False
        if (x, y) in self.doors:
            return through_door
        return True

    def neighbour(self, x: int, y: int, direction: Direction) -> tuple[int, int]:
        """Tile one step away; leaving a side edge wraps around (the tunnel)."""
        nx, ny = x + direction.dx, y + direction.dy
        if 0 <= ny < self.rows:
            nx %= self.cols
        return nx, ny

    def can_move(self, x: int, y: int, direction: Direction, *, through_door: bool = False) -> bool:
        nx, ny = self.neighbour(x, y, direction)
        return self.is_open(nx, ny, through_door=through_door)

    def exits(self, x: int, y: int, *, through_door: bool = False) -> list[Direction]:
        return [d for d in EXIT_ORDER if self.can_move(x, y, d, through_door=through_door)]

    def inside_house(self, x: int, y: int) -> bool:
        """True for tiles below the ghost-house door."""
        if not self.doors:
            return False
        door_row = min(dy for _, dy in self.doors)
        door_cols = [dx for dx, _ in self.doors]
        return y > door_row and min(door_cols) - 3 <= x <= max(door_cols) + 3 and y <= door_row + 3


def parse_maze(template: Sequence[str]) -> Maze:
    """Build a ``Maze`` from text rows, rejecting malformed templates."""
    rows = list(template)
    if not rows:
        raise BoardLayoutError("maze template is empty")
    width = len(rows[0])
    walls: set[tuple[int, int]] = set()
    doors: set[tuple[int, int]] = set()
    dots: list[tuple[int, int]] = []
    pellets: list[tuple[int, int]] = []
    ghosts: list[tuple[int, int]] = []
    player = None
    for y, line in enumerate(rows):
        if len(line) != width:
            raise BoardLayoutError(f"maze row {y} has width {len(line)}, expected {width}")
        for x, tile in enumerate(line):
            if tile not in TILES:
                raise BoardLayoutError(f"unknown maze tile {tile!r} at ({x}, {y})")
            if tile == WALL:
                walls.add((x, y))
            elif tile == DOOR:
                doors.add((x, y))
            elif tile == DOT:
                dots.append((x, y))
            elif tile == POWER:
                pellets.append((x, y))
            elif tile == GHOST:
                ghosts.append((x, y))
            elif tile == PLAYER:
                if player is not None:
                    raise BoardLayoutError("maze has more than one player start")
                player = (x, y)
    if player is None:
        raise BoardLayoutError("maze has no player start")
    if not ghosts:
        raise BoardLayoutError("maze has no ghost start")
    if not dots and not pellets:
        raise BoardLayoutError("maze has nothing to eat")

    door_exit = None
    if doors:
        dx, dy = min(doors, key=lambda tile: (tile[1], tile[0]))
        door_exit = (dx, dy - 1)
    return Maze(
        cols=width,
        rows=len(rows),
        walls=frozenset(walls),
        doors=frozenset(doors),
        dots=tuple(dots),
        power_pellets=tuple(pellets),
        player_start=player,
        ghost_starts=tuple(ghosts),
        door_exit=door_exit,
        template=tuple(rows),
    )
