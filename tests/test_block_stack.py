import pytest

from retrocade.components.session import SessionState
from retrocade.games.block_stack.components import ActivePiece, Gravity, Playfield
from retrocade.games.block_stack.factory import spawn_piece
from retrocade.games.block_stack.game import BlockStackGame
from retrocade.games.block_stack.pieces import drop_interval, line_score, rotate_clockwise
from retrocade.games.block_stack.systems import active_piece, playfield
from tests.helpers import RecordingHost, start_game

FILL = (128, 128, 128)


def _with_piece(game, kind):
    """Swap the random opening piece for a known one."""
    ent, _ = active_piece(game.world)
    game.world.delete_entity(ent, immediate=True)
    field, _ = playfield(game.world)
    return field, spawn_piece(game.world, field, kind)


def test_rotate_clockwise_turns_t_to_point_right():
    assert rotate_clockwise(((0, 1, 0), (1, 1, 1))) == ((1, 0), (1, 1), (1, 0))


def test_line_score_multiplies_by_level():
    assert line_score(1, 1) == 100
    assert line_score(2, 1) == 300
    assert line_score(4, 3) == 2400
    assert line_score(0, 5) == 0


def test_drop_interval_has_a_floor():
    assert drop_interval(1) == 1.0
    assert drop_interval(3) == pytest.approx(0.9)
    assert drop_interval(50) == 0.1


def test_piece_spawns_centred_at_the_top():
    game = start_game(BlockStackGame)
    _, piece = _with_piece(game, "I")
    assert piece.cells() == [(3, 0), (4, 0), (5, 0), (6, 0)]


def test_shift_stops_at_the_wall():
    game = start_game(BlockStackGame)
    _, piece = _with_piece(game, "I")
    for _ in range(6):
        game.key_down("ArrowLeft")
    game.tick()
    assert piece.x == 0


def test_rotation_applies_when_it_fits():
    game = start_game(BlockStackGame)
    _, piece = _with_piece(game, "T")
    piece.y = 5
    game.key_down("ArrowUp")
    game.tick()
    assert piece.shape == ((1, 0), (1, 1), (1, 0))


def test_blocked_rotation_is_ignored():
    game = start_game(BlockStackGame)
    field, piece = _with_piece(game, "I")
    field.cells[2][3] = FILL

    game.key_down("Z")
    game.tick()

    assert piece.shape == ((1, 1, 1, 1),)


def test_soft_drop_moves_one_row():
    game = start_game(BlockStackGame)
    _, piece = _with_piece(game, "O")
    game.key_down("ArrowDown")
    game.tick()
    assert piece.y == 1


def test_gravity_drops_once_per_interval():
    game = start_game(BlockStackGame)
    _, piece = _with_piece(game, "O")
    game.tick(0.5)
    assert piece.y == 0
    game.tick(0.5)
    assert piece.y == 1


def test_hard_drop_clears_a_full_line():
    host = RecordingHost()
    game = start_game(BlockStackGame, host=host)
    field, _ = _with_piece(game, "I")
    for col in (0, 1, 2, 7, 8, 9):
        field.cells[19][col] = FILL

    game.key_down("Space")
    game.tick()

    assert host.last("score") == 100
    assert field.lines == 1
    assert all(cell is None for cell in field.cells[19])
    assert len(list(game.world.get_component(ActivePiece))) == 1


def test_tenth_line_raises_level_and_speeds_gravity():
    host = RecordingHost()
    game = start_game(BlockStackGame, host=host)
    field, _ = _with_piece(game, "I")
    field.lines = 9
    for col in (0, 1, 2, 7, 8, 9):
        field.cells[19][col] = FILL

    game.key_down("Space")
    game.tick()

    assert host.last("level") == 2
    assert ("show_status", "Level 2!", "success") in host.calls
    gravity = next(g for _, g in game.world.get_component(Gravity))
    assert gravity.interval == pytest.approx(0.95)


def test_blocked_spawn_ends_the_game():
    host = RecordingHost()
    game = start_game(BlockStackGame, host=host)
    _, piece = _with_piece(game, "O")
    piece.y = 10
    piece.locked = True
    field = next(f for _, f in game.world.get_component(Playfield))
    for row in (0, 1):
        for col in range(2, 8):
            field.cells[row][col] = FILL

    game.tick()

    assert game.session.state == SessionState.GAME_OVER
    assert host.calls[-1] == ("show_status", "Game Over! Final Score: 0", "error")
