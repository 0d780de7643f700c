"""Per-tick processors for the pipe puzzle."""
from __future__ import annotations

from collections import deque

from esper import World

from retrocade.components.countdown import Countdown
from retrocade.components.grid_position import GridPosition
from retrocade.config import GameConfig
from retrocade.events.bus import EventBus
from retrocade.games.pipe_dream.components import Pipe, PipeGrid
from retrocade.games.pipe_dream.factory import clear_pipes, generate_layout, spawn_pipes, time_for_level
from retrocade.systems.base_processor import PlayingProcessor
from retrocade.utils.session import complete_level, play_sound
from retrocade.world import get_latch


def pipe_grid(world: World) -> PipeGrid | None:
    for _, grid in world.get_component(PipeGrid):
        return grid
    return None


def pipe_map(world: World) -> dict[tuple[int, int], Pipe]:
    return {pos.as_tuple(): pipe for _, (pos, pipe) in world.get_components(GridPosition, Pipe)}


def trace_flow(grid: PipeGrid, pipes: dict[tuple[int, int], Pipe]) -> tuple[set[tuple[int, int]], bool]:
    """Breadth-first walk from the source through mutually open pipe ends.

    Returns the filled cells and whether the drain was reached.
    """
    if grid.start not in pipes:
        return set(), False
    filled = {grid.start}
    queue = deque([grid.start])
    while queue:
        x, y = queue.popleft()
        for side in pipes[(x, y)].openings:
            nxt = (x + side.dx, y + side.dy)
            if nxt in filled or nxt not in pipes:
                continue
            if side.opposite not in pipes[nxt].openings:
                continue
            filled.add(nxt)
            queue.append(nxt)
    return filled, grid.end in filled


class PipeRotateSystem(PlayingProcessor):
    """Pointer presses select and rotate a pipe; every rotation re-traces the flow."""

    def step(self, dt: float) -> None:
        latch = get_latch(self.world)
        grid = pipe_grid(self.world)
        if latch is None or grid is None:
            return
        for x, y in latch.drain_pointer_presses():
            cell = grid.cell_at(x, y)
            if cell is None:
                continue
            pipes = pipe_map(self.world)
            pipe = pipes.get(cell)
            if pipe is None:
                continue
            grid.selected = cell
            if pipe.fixed:
                continue
            pipe.rotate()
            play_sound(self.event_bus, 600, 40)
            grid.flow, grid.connected = trace_flow(grid, pipes)
            if grid.connected:
                break


class FlowCompleteSystem(PlayingProcessor):
    """Drain reached: bonus, next level, a fresh board and a shorter clock."""

    def __init__(self, event_bus: EventBus, config: GameConfig) -> None:
        super().__init__(event_bus)
        self.level_bonus = int(config.option("level_bonus", 1000))
        self.time_limit = float(config.option("time_limit", 60.0))

    def step(self, dt: float) -> None:
        grid = pipe_grid(self.world)
        if grid is None or not grid.connected:
            return
        level = complete_level(self.world, self.event_bus, bonus=self.level_bonus)
        play_sound(self.event_bus, 880, 300, waveform="sine", volume=0.3)
        clear_pipes(self.world)
        spawn_pipes(self.world, generate_layout(grid, self.world.random))
        grid.flow, _ = trace_flow(grid, pipe_map(self.world))
        grid.connected = False
        grid.selected = None
        for _, countdown in self.world.get_component(Countdown):
            countdown.remaining = countdown.total = time_for_level(level, self.time_limit)
            countdown.expired = False
