"""Per-tick processors for the brick-breaking games. Velocities are cells per tick."""
from __future__ import annotations

from esper import World

from retrocade.components.body import Body
from retrocade.constants import CELL_SIZE
from retrocade.events.bus import EventBus
from retrocade.games.breakout.components import Ball, Brick, BreakoutTuning, Field, Paddle
from retrocade.games.breakout.factory import place_ball, spawn_bricks
from retrocade.systems.base_processor import PlayingProcessor
from retrocade.utils.session import award_points, complete_level, lose_life, play_sound
from retrocade.world import get_latch

RESPAWN_DELAY = 1.0


def tuning(world: World) -> BreakoutTuning:
    for _, found in world.get_component(BreakoutTuning):
        return found
    return BreakoutTuning()


class PaddleControlSystem(PlayingProcessor):
    """Held arrows drive the paddle; a pointer, when enabled, places it directly."""

    def __init__(self, event_bus: EventBus, field: Field, *, pointer: bool = False) -> None:
        super().__init__(event_bus)
        self.field = field
        self.pointer = pointer

    def step(self, dt: float) -> None:
        latch = get_latch(self.world)
        if latch is None:
            return
        for _, (paddle, body) in self.world.get_components(Paddle, Body):
            left = "left" in latch.held
            right = "right" in latch.held
            body.dx = (paddle.speed if right else 0.0) - (paddle.speed if left else 0.0)
            if self.pointer and latch.pointer_x is not None:
                centre = latch.pointer_x / CELL_SIZE
                body.x = min(max(0.0, centre - body.width / 2), self.field.cols - body.width)
                latch.pointer_x = None


class BreakoutMovementSystem(PlayingProcessor):
    def __init__(self, event_bus: EventBus, field: Field) -> None:
        super().__init__(event_bus)
        self.field = field

    def step(self, dt: float) -> None:
        for _, (_paddle, body) in self.world.get_components(Paddle, Body):
            body.x = min(max(0.0, body.x + body.dx), self.field.cols - body.width)
        for _, (ball, body) in self.world.get_components(Ball, Body):
            if ball.respawn_in > 0:
                ball.respawn_in -= dt
                if ball.respawn_in <= 0:
                    ball.respawn_in = 0.0
                    place_ball(body, self.field, tuning(self.world).speed_factor)
                continue
            body.x += body.dx
            body.y += body.dy


class BallCollisionSystem(PlayingProcessor):
    """Walls, paddle, bricks, then the floor."""

    def __init__(self, event_bus: EventBus, field: Field) -> None:
        super().__init__(event_bus)
        self.field = field

    def step(self, dt: float) -> None:
        paddles = [body for _, (_p, body) in self.world.get_components(Paddle, Body)]
        for _, (ball, body) in self.world.get_components(Ball, Body):
            if ball.respawn_in > 0:
                continue
            self._walls(body)
            for paddle in paddles:
                self._paddle(body, paddle)
            self._bricks(body)
            if body.y > self.field.rows:
                self._drop(ball, body)

    def _walls(self, body: Body) -> None:
        if body.x <= 0:
            body.x = 0.0
            body.dx = abs(body.dx)
        elif body.right >= self.field.cols:
            body.x = self.field.cols - body.width
            body.dx = -abs(body.dx)
        if body.y <= 0:
            body.y = 0.0
            body.dy = abs(body.dy)

    def _paddle(self, body: Body, paddle: Body) -> None:
        if body.dy <= 0 or not body.overlaps(paddle):
            return
        body.y = paddle.y - body.height
        body.dy = -abs(body.dy)
        hit = (body.center_x - paddle.x) / paddle.width
        body.dx = (hit - 0.5) * tuning(self.world).english
        play_sound(self.event_bus, 440, 50)

    def _bricks(self, body: Body) -> None:
        for ent, (brick, brick_body) in self.world.get_components(Brick, Body):
            if not body.overlaps(brick_body):
                continue
            self.world.delete_entity(ent, immediate=True)
            body.dy = -body.dy
            award_points(self.world, self.event_bus, brick.points)
            play_sound(self.event_bus, 600, 60)
            return

    def _drop(self, ball: Ball, body: Body) -> None:
        play_sound(self.event_bus, 150, 300, waveform="sawtooth")
        remaining = lose_life(self.world, self.event_bus, reason="ball_lost")
        # Parked on its serve spot, motionless, until the respawn delay runs out.
        place_ball(body, self.field, tuning(self.world).speed_factor)
        body.dx = body.dy = 0.0
        if remaining > 0:
            ball.respawn_in = RESPAWN_DELAY


class WallClearedSystem(PlayingProcessor):
    """Rebuilds the wall and speeds the ball up once every brick is gone."""

    def __init__(self, event_bus: EventBus, field: Field) -> None:
        super().__init__(event_bus)
        self.field = field

    def step(self, dt: float) -> None:
        if any(True for _ in self.world.get_component(Brick)):
            return
        tune = tuning(self.world)
        tune.speed_factor *= tune.speed_multiplier
        complete_level(self.world, self.event_bus)
        spawn_bricks(self.world, self.field)
        for _, (ball, body) in self.world.get_components(Ball, Body):
            place_ball(body, self.field, tune.speed_factor)
            if ball.respawn_in > 0:
                body.dx = body.dy = 0.0
