"""Per-tick processors for the snake game."""
from __future__ import annotations

from esper import World

from retrocade.components.grid_position import GridPosition, Heading
from retrocade.config import GameConfig
from retrocade.events.bus import EVENT_TICK_INTERVAL_CHANGED, EventBus
from retrocade.games.wormy.components import Food, Snake, WormyGrid
from retrocade.games.wormy.factory import reset_snake, spawn_food
from retrocade.systems.base_processor import PlayingProcessor
from retrocade.utils.session import advance_level, award_points, lose_life, play_sound
from retrocade.world import get_latch


def _snake(world: World) -> tuple[int, Snake, Heading] | None:
    for ent, (snake, heading) in world.get_components(Snake, Heading):
        return ent, snake, heading
    return None


class SteerSystem(PlayingProcessor):
    """Applies the latched direction unless it would fold the snake onto itself."""

    def step(self, dt: float) -> None:
        latch = get_latch(self.world)
        found = _snake(self.world)
        if latch is None or found is None or latch.direction is None:
            return
        _, snake, heading = found
        requested = latch.direction
        latch.direction = None
        if len(snake) > 1 and heading.direction is not None and requested == heading.direction.opposite:
            return
        heading.direction = requested


class SlitherSystem(PlayingProcessor):
    """Moves the snake one cell per tick, wrapping or crashing at the edges."""

    def __init__(self, event_bus: EventBus, grid: WormyGrid) -> None:
        super().__init__(event_bus)
        self.grid = grid

    def step(self, dt: float) -> None:
        found = _snake(self.world)
        if found is None:
            return
        _, snake, heading = found
        if heading.direction is None:
            return
        hx, hy = snake.head
        nx, ny = hx + heading.direction.dx, hy + heading.direction.dy
        if self.grid.wrap:
            nx %= self.grid.cols
            ny %= self.grid.rows
        elif not (0 <= nx < self.grid.cols and 0 <= ny < self.grid.rows):
            snake.crashed = True
            return
        snake.segments.appendleft((nx, ny))
        snake.last_tail = snake.segments.pop()


class FeedingSystem(PlayingProcessor):
    """Resolves self collisions, wall crashes and food after each move."""

    def __init__(self, event_bus: EventBus, grid: WormyGrid, config: GameConfig) -> None:
        super().__init__(event_bus)
        self.grid = grid
        self.foods_per_level = int(config.option("foods_per_level", 5))
        self.speedup = float(config.option("speedup", 0.9))
        self.min_interval = float(config.option("min_interval", 0.05))
        self.base_interval = config.tick_interval

    def step(self, dt: float) -> None:
        found = _snake(self.world)
        if found is None:
            return
        _, snake, heading = found
        if snake.crashed or snake.head in list(snake.segments)[1:]:
            self._crash(snake, heading)
            return
        for ent, (pos, food) in list(self.world.get_components(GridPosition, Food)):
            if pos.as_tuple() != snake.head:
                continue
            self.world.delete_entity(ent, immediate=True)
            if snake.last_tail is not None:
                snake.segments.append(snake.last_tail)
                snake.last_tail = None
            snake.foods_eaten += 1
            award_points(self.world, self.event_bus, food.points)
            play_sound(self.event_bus, 800, 50)
            if snake.foods_eaten % self.foods_per_level == 0:
                level = advance_level(self.world, self.event_bus)
                interval = max(self.min_interval, self.base_interval * self.speedup ** (level - 1))
                self.event_bus.emit(EVENT_TICK_INTERVAL_CHANGED, interval=interval)
            spawn_food(self.world, self.grid)
            break

    def _crash(self, snake: Snake, heading: Heading) -> None:
        play_sound(self.event_bus, 200, 300, waveform="sawtooth")
        remaining = lose_life(self.world, self.event_bus, reason="crash")
        if remaining > 0:
            reset_snake(snake, heading, self.grid)
            latch = get_latch(self.world)
            if latch is not None:
                latch.direction = None
        else:
            snake.crashed = False
