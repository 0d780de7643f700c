"""Board generation for the pipe puzzle.

Every board carries a solvable route: a random right/down walk from the tile
after the source to the tile before the drain is laid with straights and
corners, then every rotation is scrambled. About 30% of the leftover cells get
a decoy pipe.
"""
from __future__ import annotations

from esper import World

from retrocade.components.countdown import Countdown
from retrocade.components.grid_position import Direction, GridPosition
from retrocade.errors import BoardLayoutError
from retrocade.games.pipe_dream.components import BASE_OPENINGS, Pipe, PipeGrid, PipeKind, rotate_openings

EXTRA_PIPE_CHANCE = 0.3
ROTATIONS = (0, 90, 180, 270)
DECOY_KINDS = (PipeKind.STRAIGHT, PipeKind.CORNER, PipeKind.TEE)


def time_for_level(level: int, base: float = 60.0) -> float:
    return max(30.0, base - 5.0 * (level - 1))


def route_cells(grid: PipeGrid, rng) -> list[tuple[int, int]]:
    """Random monotone walk from (1, 0) to (size - 2, size - 1)."""
    x, y = 1, 0
    goal_x, goal_y = grid.size - 2, grid.size - 1
    cells = [(x, y)]
    while (x, y) != (goal_x, goal_y):
        if x == goal_x:
            y += 1
        elif y == goal_y:
            x += 1
        elif rng.random() < 0.5:
            x += 1
        else:
            y += 1
        cells.append((x, y))
    return cells


def _step_direction(a: tuple[int, int], b: tuple[int, int]) -> Direction:
    return Direction((b[0] - a[0], b[1] - a[1]))


def fitting_pipe(needed: frozenset[Direction]) -> Pipe:
    """The straight or corner pipe whose openings are exactly ``needed``."""
    kind = PipeKind.STRAIGHT
    if needed not in ({Direction.LEFT, Direction.RIGHT}, {Direction.UP, Direction.DOWN}):
        kind = PipeKind.CORNER
    for rotation in ROTATIONS:
        if rotate_openings(BASE_OPENINGS[kind], rotation) == needed:
            return Pipe(kind, rotation)
    raise ValueError(f"no pipe opens exactly {sorted(d.name for d in needed)}")


def generate_layout(grid: PipeGrid, rng) -> dict[tuple[int, int], Pipe]:
    if grid.size < 3:
        raise BoardLayoutError(f"pipe grid must be at least 3x3, got {grid.size}")
    layout: dict[tuple[int, int], Pipe] = {
        grid.start: Pipe(PipeKind.START, fixed=True),
        grid.end: Pipe(PipeKind.END, fixed=True),
    }
    route = [grid.start] + route_cells(grid, rng) + [grid.end]
    for prev, cell, nxt in zip(route, route[1:], route[2:]):
        needed = frozenset({_step_direction(cell, prev), _step_direction(cell, nxt)})
        pipe = fitting_pipe(needed)
        pipe.rotation = rng.choice(ROTATIONS)
        layout[cell] = pipe
    for y in range(grid.size):
        for x in range(grid.size):
            if (x, y) in layout:
                continue
            if rng.random() < EXTRA_PIPE_CHANCE:
                layout[(x, y)] = Pipe(rng.choice(DECOY_KINDS), rng.choice(ROTATIONS))
    return layout


def spawn_pipes(world: World, layout: dict[tuple[int, int], Pipe]) -> None:
    for (x, y), pipe in sorted(layout.items(), key=lambda item: (item[0][1], item[0][0])):
        world.create_entity(GridPosition(x, y), pipe)


def clear_pipes(world: World) -> None:
    for ent, _ in list(world.get_component(Pipe)):
        world.delete_entity(ent, immediate=True)


def spawn_board(world: World, grid: PipeGrid, time_limit: float,
                layout: dict[tuple[int, int], Pipe] | None = None) -> int:
    spawn_pipes(world, layout if layout is not None else generate_layout(grid, world.random))
    return world.create_entity(grid, Countdown(remaining=float(time_limit)))
