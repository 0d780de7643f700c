"""Per-tick processors for the maze chase game."""
from __future__ import annotations

from esper import World

from retrocade.components.grid_position import Direction, GridPosition, Heading
from retrocade.components.step_clock import StepClock
from retrocade.config import GameConfig
from retrocade.events.bus import EventBus
from retrocade.games.chompy.components import (
    Chomper,
    Ghost,
    GhostMode,
    GhostPhase,
    MazeBoard,
    Pellet,
    PelletKind,
)
from retrocade.games.chompy.factory import reset_actors, send_home, spawn_pellets
from retrocade.games.chompy.maze import Maze
from retrocade.systems.base_processor import PlayingProcessor
from retrocade.utils.session import (
    award_points,
    complete_level,
    get_session,
    is_playing,
    lose_life,
    play_sound,
)
from retrocade.world import get_latch

GHOST_POINTS = 200


def board(world: World) -> tuple[Maze, GhostMode] | None:
    for _, (maze_board, mode) in world.get_components(MazeBoard, GhostMode):
        return maze_board.maze, mode
    return None


def chomper(world: World) -> tuple[GridPosition, Heading, StepClock, Chomper] | None:
    for _, comps in world.get_components(GridPosition, Heading, StepClock, Chomper):
        return comps
    return None


def _distance(a: tuple[int, int], b: tuple[int, int]) -> int:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def choose_direction(maze: Maze, pos: GridPosition, heading: Heading, ghost: Ghost,
                     target: tuple[int, int] | None, rng) -> Direction | None:
    """Pick the next exit; reversing is only allowed at a dead end.

    ``target`` None means wander: a random legal exit.
    """
    exits = maze.exits(pos.x, pos.y, through_door=ghost.exiting)
    if not exits:
        return None
    current = heading.direction
    forward = [d for d in exits if current is None or d != current.opposite]
    options = forward or exits
    if target is None:
        return rng.choice(options)
    return min(options, key=lambda d: _distance(maze.neighbour(pos.x, pos.y, d), target))


class ChomperMoveSystem(PlayingProcessor):
    """Steps the player along its heading, turning when the latched direction opens up."""

    def step(self, dt: float) -> None:
        found_board = board(self.world)
        found = chomper(self.world)
        if found_board is None or found is None:
            return
        maze, _ = found_board
        pos, heading, clock, player = found
        latch = get_latch(self.world)
        player.previous = pos.as_tuple()
        for _ in range(clock.advance(dt)):
            requested = latch.direction if latch is not None else None
            if requested is not None and maze.can_move(pos.x, pos.y, requested):
                heading.direction = requested
                latch.direction = None
            if heading.direction is not None and maze.can_move(pos.x, pos.y, heading.direction):
                pos.x, pos.y = maze.neighbour(pos.x, pos.y, heading.direction)


class GhostMoveSystem(PlayingProcessor):
    """Runs the scatter/chase/frightened timers and steps every ghost."""

    def __init__(self, event_bus: EventBus, config: GameConfig) -> None:
        super().__init__(event_bus)
        self.ghost_step = float(config.option("ghost_step", 0.2))
        self.frightened_step = float(config.option("frightened_step", 0.3))

    def step(self, dt: float) -> None:
        found_board = board(self.world)
        if found_board is None:
            return
        maze, mode = found_board
        self._advance_mode(mode, dt)

        found = chomper(self.world)
        player_tile = found[0].as_tuple() if found else None
        for _, (pos, heading, clock, ghost) in self.world.get_components(GridPosition, Heading, StepClock, Ghost):
            clock.interval = self.frightened_step if ghost.frightened else self.ghost_step
            ghost.previous = pos.as_tuple()
            for _ in range(clock.advance(dt)):
                target = self._target(maze, mode, ghost, player_tile)
                direction = choose_direction(maze, pos, heading, ghost, target, self.world.random)
                if direction is None:
                    break
                heading.direction = direction
                pos.x, pos.y = maze.neighbour(pos.x, pos.y, direction)
                if ghost.exiting and not maze.inside_house(pos.x, pos.y) and pos.as_tuple() not in maze.doors:
                    ghost.exiting = False

    def _advance_mode(self, mode: GhostMode, dt: float) -> None:
        if mode.frightened:
            mode.fright_remaining -= dt
            if mode.fright_remaining <= 0:
                mode.fright_remaining = 0.0
                for _, ghost in self.world.get_component(Ghost):
                    ghost.frightened = False
            return
        mode.elapsed += dt
        if mode.elapsed + 1e-9 >= mode.duration:
            mode.elapsed = 0.0
            mode.phase = GhostPhase.CHASE if mode.phase == GhostPhase.SCATTER else GhostPhase.SCATTER
            reverse_ghosts(self.world)

    @staticmethod
    def _target(maze: Maze, mode: GhostMode, ghost: Ghost,
                player_tile: tuple[int, int] | None) -> tuple[int, int] | None:
        if ghost.exiting and maze.door_exit is not None:
            return maze.door_exit
        if ghost.frightened:
            return None
        if mode.phase == GhostPhase.CHASE and player_tile is not None:
            return player_tile
        return ghost.corner


def reverse_ghosts(world: World) -> None:
    for _, (heading, ghost) in world.get_components(Heading, Ghost):
        if heading.direction is not None and not ghost.exiting:
            heading.direction = heading.direction.opposite


class ChompCollisionSystem(PlayingProcessor):
    """Eats the pellet under the player and resolves ghost contact, including tile swaps."""

    def __init__(self, event_bus: EventBus, config: GameConfig) -> None:
        super().__init__(event_bus)
        self.ghost_step = float(config.option("ghost_step", 0.2))
        self.frightened_seconds = float(config.option("frightened_seconds", 6.0))

    def step(self, dt: float) -> None:
        found_board = board(self.world)
        found = chomper(self.world)
        if found_board is None or found is None:
            return
        maze, mode = found_board
        pos, _, _, player = found
        self._eat(pos, mode)
        self._ghost_contact(maze, pos, player)

    def _eat(self, pos: GridPosition, mode: GhostMode) -> None:
        for ent, (pellet_pos, pellet) in self.world.get_components(GridPosition, Pellet):
            if pellet_pos.x != pos.x or pellet_pos.y != pos.y:
                continue
            self.world.delete_entity(ent, immediate=True)
            award_points(self.world, self.event_bus, pellet.points)
            if pellet.kind == PelletKind.POWER:
                play_sound(self.event_bus, 400, 200, volume=0.4)
                mode.fright_remaining = self.frightened_seconds
                for _, ghost in self.world.get_component(Ghost):
                    ghost.frightened = True
                reverse_ghosts(self.world)
            else:
                play_sound(self.event_bus, 800, 100, volume=0.2)
            return

    def _ghost_contact(self, maze: Maze, pos: GridPosition, player: Chomper) -> None:
        here = pos.as_tuple()
        for _, (ghost_pos, heading, clock, ghost) in self.world.get_components(GridPosition, Heading, StepClock, Ghost):
            there = ghost_pos.as_tuple()
            swapped = player.previous == there and ghost.previous == here and here != there
            if here != there and not swapped:
                continue
            if ghost.frightened:
                award_points(self.world, self.event_bus, GHOST_POINTS)
                play_sound(self.event_bus, 200, 300, volume=0.6)
                send_home(maze, ghost_pos, heading, clock, ghost, self.ghost_step)
                continue
            lose_life(self.world, self.event_bus, reason="caught")
            play_sound(self.event_bus, 150, 400, waveform="sawtooth", volume=0.4)
            if is_playing(self.world):
                reset_actors(self.world, maze, self.ghost_step)
                latch = get_latch(self.world)
                if latch is not None:
                    latch.direction = None
            return


class MazeClearedSystem(PlayingProcessor):
    """All pellets eaten: bonus, next level with shorter ghost phases, fresh board."""

    def __init__(self, event_bus: EventBus, config: GameConfig) -> None:
        super().__init__(event_bus)
        self.ghost_step = float(config.option("ghost_step", 0.2))
        self.mode_seconds = float(config.option("mode_seconds", 7.0))
        self.level_bonus = int(config.option("level_bonus", 1000))

    def step(self, dt: float) -> None:
        found_board = board(self.world)
        if found_board is None or self.world.get_component(Pellet):
            return
        maze, mode = found_board
        level = complete_level(self.world, self.event_bus, bonus=self.level_bonus)
        mode.duration = mode_duration(self.mode_seconds, level)
        mode.phase = GhostPhase.SCATTER
        mode.elapsed = 0.0
        spawn_pellets(self.world, maze)
        reset_actors(self.world, maze, self.ghost_step)


def mode_duration(base: float, level: int) -> float:
    return max(3.0, base - 0.5 * (level - 1))
