"""Factory helpers for the maze, its pellets and the actors."""
from __future__ import annotations

from esper import World

from retrocade.components.grid_position import Direction, GridPosition, Heading
from retrocade.components.step_clock import StepClock
from retrocade.games.chompy.components import (
    Chomper,
    Ghost,
    GhostMode,
    MazeBoard,
    Pellet,
    PelletKind,
)
from retrocade.games.chompy.maze import Maze
from retrocade.rendering.frame import hex_color

DOT_POINTS = 10
POWER_POINTS = 50

GHOST_ROSTER = (
    ("blinky", hex_color("#ff0000")),
    ("pinky", hex_color("#ffb8ff")),
    ("inky", hex_color("#00ffff")),
    ("clyde", hex_color("#ffb852")),
)


def home_corners(maze: Maze) -> tuple[tuple[int, int], ...]:
    right, bottom = maze.cols - 1, maze.rows - 1
    return ((right, 0), (0, 0), (right, bottom), (0, bottom))


def spawn_board(world: World, maze: Maze, mode_duration: float) -> int:
    return world.create_entity(MazeBoard(maze), GhostMode(duration=mode_duration))


def spawn_pellets(world: World, maze: Maze) -> None:
    for x, y in maze.dots:
        world.create_entity(GridPosition(x, y), Pellet(PelletKind.DOT, DOT_POINTS))
    for x, y in maze.power_pellets:
        world.create_entity(GridPosition(x, y), Pellet(PelletKind.POWER, POWER_POINTS))


def spawn_chomper(world: World, maze: Maze, step: float) -> int:
    x, y = maze.player_start
    return world.create_entity(
        GridPosition(x, y),
        Heading(Direction.LEFT),
        StepClock(step),
        Chomper(start=(x, y)),
    )


def spawn_ghosts(world: World, maze: Maze, step: float) -> list[int]:
    corners = home_corners(maze)
    entities = []
    for idx, start in enumerate(maze.ghost_starts):
        name, color = GHOST_ROSTER[idx % len(GHOST_ROSTER)]
        ghost = Ghost(
            name=name,
            color=color,
            start=start,
            corner=corners[idx % len(corners)],
            exiting=maze.inside_house(*start),
        )
        entities.append(
            world.create_entity(GridPosition(*start), Heading(Direction.LEFT), StepClock(step), ghost)
        )
    return entities


def reset_actors(world: World, maze: Maze, ghost_step: float) -> None:
    """Put the player and every ghost back on their start tiles."""
    for _, (pos, heading, clock, chomper) in world.get_components(GridPosition, Heading, StepClock, Chomper):
        pos.x, pos.y = chomper.start
        heading.direction = Direction.LEFT
        chomper.previous = None
        clock.reset()
    for _, (pos, heading, clock, ghost) in world.get_components(GridPosition, Heading, StepClock, Ghost):
        send_home(maze, pos, heading, clock, ghost, ghost_step)
    for _, mode in world.get_component(GhostMode):
        mode.fright_remaining = 0.0


def send_home(maze: Maze, pos: GridPosition, heading: Heading, clock: StepClock,
              ghost: Ghost, step: float) -> None:
    pos.x, pos.y = ghost.start
    heading.direction = Direction.LEFT
    ghost.frightened = False
    ghost.exiting = maze.inside_house(*ghost.start)
    ghost.previous = None
    clock.interval = step
    clock.reset()
