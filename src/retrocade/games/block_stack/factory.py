"""Factory helpers for the playfield and the piece queue."""
from __future__ import annotations

from esper import World

from retrocade.games.block_stack.components import ActivePiece, Gravity, NextPiece, Playfield
from retrocade.games.block_stack.pieces import PIECES, fits, spawn_column


def random_kind(world: World) -> str:
    return world.random.choice(sorted(PIECES))


def spawn_playfield(world: World, cols: int, rows: int, interval: float) -> int:
    return world.create_entity(Playfield(cols, rows), Gravity(interval), NextPiece(random_kind(world)))


def spawn_piece(world: World, field: Playfield, kind: str) -> ActivePiece | None:
    """Create the active piece at the top; None when it does not fit."""
    shape, color = PIECES[kind]
    x = spawn_column(field, shape)
    if not fits(field, shape, x, 0):
        return None
    piece = ActivePiece(kind, shape, color, x, 0)
    world.create_entity(piece)
    return piece


def take_next(world: World, field: Playfield) -> ActivePiece | None:
    """Promote the preview piece to active and roll a new preview."""
    for _, upcoming in world.get_component(NextPiece):
        kind = upcoming.kind
        upcoming.kind = random_kind(world)
        return spawn_piece(world, field, kind)
    return spawn_piece(world, field, random_kind(world))
