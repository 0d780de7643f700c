"""Factory helpers for creating snake game entities."""
from __future__ import annotations

from collections import deque

from esper import World

from retrocade.components.appearance import Appearance
from retrocade.components.grid_position import Direction, GridPosition, Heading
from retrocade.games.wormy.components import Food, Snake, WormyGrid

SNAKE_COLOR = (0, 255, 0)
FOOD_COLOR = (255, 0, 0)


def start_cell(grid: WormyGrid) -> tuple[int, int]:
    return (grid.cols // 2, grid.rows // 2)


def spawn_snake(world: World, grid: WormyGrid) -> int:
    return world.create_entity(
        Snake(segments=deque([start_cell(grid)])),
        Heading(Direction.RIGHT),
        Appearance(SNAKE_COLOR),
    )


def reset_snake(snake: Snake, heading: Heading, grid: WormyGrid) -> None:
    snake.segments = deque([start_cell(grid)])
    snake.last_tail = None
    snake.crashed = False
    heading.direction = Direction.RIGHT


def free_cells(world: World, grid: WormyGrid) -> list[tuple[int, int]]:
    occupied: set[tuple[int, int]] = set()
    for _, snake in world.get_component(Snake):
        occupied.update(snake.segments)
    for _, (pos, _food) in world.get_components(GridPosition, Food):
        occupied.add(pos.as_tuple())
    return [
        (x, y)
        for y in range(grid.rows)
        for x in range(grid.cols)
        if (x, y) not in occupied
    ]


def spawn_food(world: World, grid: WormyGrid, *, at: tuple[int, int] | None = None) -> int | None:
    """Place food on ``at`` or on a random free cell; None when the board is full."""
    if at is None:
        cells = free_cells(world, grid)
        if not cells:
            return None
        at = world.random.choice(cells)
    return world.create_entity(GridPosition(*at), Food(), Appearance(FOOD_COLOR))
