"""Per-tick processors for the block stacking game."""
from __future__ import annotations

from esper import World

from retrocade.config import GameConfig
from retrocade.events.bus import EventBus
from retrocade.games.block_stack.components import ActivePiece, Gravity, Playfield
from retrocade.games.block_stack.factory import take_next
from retrocade.games.block_stack.pieces import drop_interval, fits, line_score, rotate_clockwise
from retrocade.systems.base_processor import PlayingProcessor
from retrocade.utils.session import (
    advance_level,
    award_points,
    end_session,
    get_session,
    play_sound,
    show_status,
)
from retrocade.world import get_latch


def playfield(world: World) -> tuple[Playfield, Gravity] | None:
    for _, (field, gravity) in world.get_components(Playfield, Gravity):
        return field, gravity
    return None


def active_piece(world: World) -> tuple[int, ActivePiece] | None:
    for ent, piece in world.get_component(ActivePiece):
        return ent, piece
    return None


def try_move(field: Playfield, piece: ActivePiece, dx: int, dy: int) -> bool:
    if fits(field, piece.shape, piece.x + dx, piece.y + dy):
        piece.x += dx
        piece.y += dy
        return True
    return False


class PieceControlSystem(PlayingProcessor):
    """Shift, rotate, soft drop and hard drop; blocked requests are ignored."""

    def step(self, dt: float) -> None:
        latch = get_latch(self.world)
        found_field = playfield(self.world)
        found_piece = active_piece(self.world)
        if latch is None or found_field is None or found_piece is None:
            if latch is not None:
                latch.drain_presses()
            return
        field, gravity = found_field
        _, piece = found_piece
        for action in latch.drain_presses():
            if piece.locked:
                break
            if action == "left":
                try_move(field, piece, -1, 0)
            elif action == "right":
                try_move(field, piece, 1, 0)
            elif action == "soft_drop":
                if try_move(field, piece, 0, 1):
                    gravity.elapsed = 0.0
                else:
                    piece.locked = True
            elif action == "rotate":
                rotated = rotate_clockwise(piece.shape)
                if fits(field, rotated, piece.x, piece.y):
                    piece.shape = rotated
                    play_sound(self.event_bus, 500, 30)
            elif action == "hard_drop":
                while try_move(field, piece, 0, 1):
                    pass
                piece.locked = True


class GravitySystem(PlayingProcessor):
    """Pulls the active piece down one row per drop interval; blocked means locked."""

    def step(self, dt: float) -> None:
        found_field = playfield(self.world)
        found_piece = active_piece(self.world)
        if found_field is None or found_piece is None:
            return
        field, gravity = found_field
        _, piece = found_piece
        if piece.locked:
            return
        gravity.elapsed += dt
        while gravity.elapsed + 1e-9 >= gravity.interval:
            gravity.elapsed -= gravity.interval
            if not try_move(field, piece, 0, 1):
                piece.locked = True
                gravity.elapsed = 0.0
                break


class SettleSystem(PlayingProcessor):
    """Merges a locked piece, clears full rows, scores them and spawns the next piece."""

    def __init__(self, event_bus: EventBus, config: GameConfig) -> None:
        super().__init__(event_bus)
        self.base = float(config.option("drop_interval", 1.0))
        self.step_down = float(config.option("drop_step", 0.05))
        self.minimum = float(config.option("min_drop_interval", 0.1))

    def step(self, dt: float) -> None:
        found_field = playfield(self.world)
        found_piece = active_piece(self.world)
        if found_field is None or found_piece is None:
            return
        field, gravity = found_field
        ent, piece = found_piece
        if not piece.locked:
            return
        for col, row in piece.cells():
            if 0 <= row < field.rows and 0 <= col < field.cols:
                field.cells[row][col] = piece.color
        self.world.delete_entity(ent, immediate=True)
        play_sound(self.event_bus, 200, 40)

        cleared = self._clear_rows(field)
        if cleared:
            self._score(field, gravity, cleared)

        if take_next(self.world, field) is None:
            end_session(self.world, self.event_bus, reason="topped_out")

    def _clear_rows(self, field: Playfield) -> int:
        remaining = [row for row in field.cells if any(cell is None for cell in row)]
        cleared = field.rows - len(remaining)
        if cleared:
            field.cells = [[None] * field.cols for _ in range(cleared)] + remaining
            field.lines += cleared
        return cleared

    def _score(self, field: Playfield, gravity: Gravity, cleared: int) -> None:
        session = get_session(self.world)
        level = session.level if session else 1
        award_points(self.world, self.event_bus, line_score(cleared, level))
        play_sound(self.event_bus, 700, 120)
        target_level = field.lines // 10 + 1
        if target_level > level:
            advance_level(self.world, self.event_bus, levels=target_level - level)
            gravity.interval = drop_interval(target_level, self.base, self.step_down, self.minimum)
            show_status(self.event_bus, f"Level {target_level}!", "success", duration=2.0)
