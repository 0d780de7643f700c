import random

import pytest

from retrocade.components.countdown import Countdown
from retrocade.components.grid_position import Direction
from retrocade.components.session import SessionState
from retrocade.errors import BoardLayoutError
from retrocade.games.pipe_dream.components import Pipe, PipeGrid, PipeKind
from retrocade.games.pipe_dream.factory import (
    clear_pipes,
    fitting_pipe,
    generate_layout,
    route_cells,
    spawn_pipes,
    time_for_level,
)
from retrocade.games.pipe_dream.game import PipeDreamGame
from retrocade.games.pipe_dream.systems import pipe_grid, pipe_map, trace_flow
from tests.helpers import RecordingHost, start_game


def _small_route(corner_rotation=180):
    """3x3 board: source, corner down, vertical straight, corner right, drain."""
    return {
        (0, 0): Pipe(PipeKind.START, fixed=True),
        (1, 0): Pipe(PipeKind.CORNER, 0),
        (1, 1): Pipe(PipeKind.STRAIGHT, 90),
        (1, 2): Pipe(PipeKind.CORNER, corner_rotation),
        (2, 2): Pipe(PipeKind.END, fixed=True),
    }


def _full_route(last_corner_rotation):
    """8x8 route along the top row and down column 6."""
    layout = {
        (0, 0): Pipe(PipeKind.START, fixed=True),
        (6, 0): Pipe(PipeKind.CORNER, 0),
        (6, 7): Pipe(PipeKind.CORNER, last_corner_rotation),
        (7, 7): Pipe(PipeKind.END, fixed=True),
    }
    for x in range(1, 6):
        layout[(x, 0)] = Pipe(PipeKind.STRAIGHT, 0)
    for y in range(1, 7):
        layout[(6, y)] = Pipe(PipeKind.STRAIGHT, 90)
    return layout


def _install(game, layout):
    clear_pipes(game.world)
    spawn_pipes(game.world, layout)


def _centre(grid, cell):
    x, y = cell
    return grid.origin_x + x * grid.tile + grid.tile / 2, grid.origin_y + y * grid.tile + grid.tile / 2


def test_rotation_turns_openings_clockwise():
    corner = Pipe(PipeKind.CORNER)
    assert corner.openings == {Direction.LEFT, Direction.DOWN}
    corner.rotate()
    assert corner.openings == {Direction.UP, Direction.LEFT}
    assert Pipe(PipeKind.STRAIGHT, 90).openings == {Direction.UP, Direction.DOWN}


def test_trace_flow_reaches_drain_on_aligned_route():
    filled, reached = trace_flow(PipeGrid(size=3), _small_route())
    assert reached
    assert filled == {(0, 0), (1, 0), (1, 1), (1, 2), (2, 2)}


def test_trace_flow_stops_at_misaligned_pipe():
    filled, reached = trace_flow(PipeGrid(size=3), _small_route(corner_rotation=0))
    assert not reached
    assert filled == {(0, 0), (1, 0), (1, 1)}


def test_fitting_pipe_picks_the_exact_shape():
    assert fitting_pipe(frozenset({Direction.UP, Direction.DOWN})).kind == PipeKind.STRAIGHT
    corner = fitting_pipe(frozenset({Direction.UP, Direction.RIGHT}))
    assert (corner.kind, corner.rotation) == (PipeKind.CORNER, 180)
    with pytest.raises(ValueError):
        fitting_pipe(frozenset({Direction.UP}))


def test_too_small_grid_is_rejected():
    with pytest.raises(BoardLayoutError):
        generate_layout(PipeGrid(size=2), random.Random(0))


@pytest.mark.parametrize("seed", [0, 1, 7, 42])
def test_generated_board_is_solvable(seed):
    grid = PipeGrid(size=8)
    layout = generate_layout(grid, random.Random(seed))
    # generate_layout walks the route before drawing anything else.
    route = [grid.start] + route_cells(grid, random.Random(seed)) + [grid.end]

    for prev, cell, nxt in zip(route, route[1:], route[2:]):
        needed = frozenset({
            Direction((prev[0] - cell[0], prev[1] - cell[1])),
            Direction((nxt[0] - cell[0], nxt[1] - cell[1])),
        })
        pipe = layout[cell]
        assert not pipe.fixed
        target = fitting_pipe(needed)
        assert pipe.kind == target.kind
        pipe.rotation = target.rotation

    assert trace_flow(grid, layout)[1]


def test_time_shrinks_per_level_with_a_floor():
    assert time_for_level(1) == 60.0
    assert time_for_level(2) == 55.0
    assert time_for_level(20) == 30.0


def test_click_selects_and_rotates_a_pipe():
    game = start_game(PipeDreamGame)
    _install(game, _full_route(last_corner_rotation=0))
    grid = pipe_grid(game.world)

    game.pointer_down(*_centre(grid, (6, 7)))
    game.tick()

    assert grid.selected == (6, 7)
    assert pipe_map(game.world)[(6, 7)].rotation == 90
    assert not grid.connected


def test_fixed_pipes_only_get_selected():
    game = start_game(PipeDreamGame)
    _install(game, _full_route(last_corner_rotation=0))
    grid = pipe_grid(game.world)

    game.pointer_down(*_centre(grid, (0, 0)))
    game.tick()

    assert grid.selected == (0, 0)
    assert pipe_map(game.world)[(0, 0)].rotation == 0


def test_clicks_outside_the_board_are_ignored():
    game = start_game(PipeDreamGame)
    grid = pipe_grid(game.world)
    game.pointer_down(5, 5)
    game.tick()
    assert grid.selected is None


def test_connecting_the_drain_completes_the_level():
    host = RecordingHost()
    game = start_game(PipeDreamGame, host=host)
    _install(game, _full_route(last_corner_rotation=90))
    grid = pipe_grid(game.world)

    game.pointer_down(*_centre(grid, (6, 7)))
    game.tick()

    assert host.last("score") == 1000
    assert host.last("level") == 2
    assert not grid.connected
    assert grid.selected is None
    countdown = next(c for _, c in game.world.get_component(Countdown))
    assert countdown.total == 55.0
    assert countdown.remaining == pytest.approx(54.9)


def test_clock_running_out_ends_the_game():
    game = start_game(PipeDreamGame)
    next(c for _, c in game.world.get_component(Countdown)).remaining = 0.05
    game.tick()
    assert game.session.state == SessionState.GAME_OVER


def test_r_restarts_with_a_fresh_clock():
    game = start_game(PipeDreamGame)
    countdown = next(c for _, c in game.world.get_component(Countdown))
    countdown.remaining = 12.0

    game.key_down("R")

    fresh = next(c for _, c in game.world.get_component(Countdown))
    assert fresh.remaining == 60.0
    assert game.session.state == SessionState.PLAYING
