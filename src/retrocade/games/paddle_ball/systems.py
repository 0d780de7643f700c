"""Per-tick processors for the paddle game. Velocities are cells per tick."""
from __future__ import annotations

from esper import World

from retrocade.components.body import Body
from retrocade.events.bus import EventBus
from retrocade.games.paddle_ball.components import Ball, Court, MatchScore, Paddle
from retrocade.games.paddle_ball.factory import serve
from retrocade.systems.base_processor import PlayingProcessor
from retrocade.utils.session import award_points, end_session, play_sound, show_status
from retrocade.world import get_latch

ENGLISH = 0.4


class PaddleControlSystem(PlayingProcessor):
    """Reads the held keys for both players into paddle velocities."""

    def step(self, dt: float) -> None:
        latch = get_latch(self.world)
        held = latch.held if latch is not None else set()
        for _, (paddle, body) in self.world.get_components(Paddle, Body):
            up = f"{paddle.side}_up" in held
            down = f"{paddle.side}_down" in held
            if up and not down:
                body.dy = -paddle.speed
            elif down and not up:
                body.dy = paddle.speed
            else:
                body.dy = 0.0


class CourtMovementSystem(PlayingProcessor):
    def __init__(self, event_bus: EventBus, court: Court) -> None:
        super().__init__(event_bus)
        self.court = court

    def step(self, dt: float) -> None:
        for _, (_paddle, body) in self.world.get_components(Paddle, Body):
            body.y = min(max(0.0, body.y + body.dy), self.court.rows - body.height)
        for _, (_ball, body) in self.world.get_components(Ball, Body):
            body.x += body.dx
            body.y += body.dy


class BallCollisionSystem(PlayingProcessor):
    """Bounces the ball off walls and paddles, then scores balls that got past."""

    def __init__(self, event_bus: EventBus, court: Court) -> None:
        super().__init__(event_bus)
        self.court = court

    def step(self, dt: float) -> None:
        paddles = [(paddle, body) for _, (paddle, body) in self.world.get_components(Paddle, Body)]
        for _, (_ball, ball) in self.world.get_components(Ball, Body):
            self._bounce_walls(ball)
            for paddle, body in paddles:
                if _touching(ball, body):
                    self._bounce_paddle(ball, paddle, body)
            self._score_if_out(ball)

    def _bounce_walls(self, ball: Body) -> None:
        floor = self.court.rows - ball.height
        if ball.y <= 0:
            ball.y = 0.0
            ball.dy = abs(ball.dy)
            play_sound(self.event_bus, 300, 50)
        elif ball.y >= floor:
            ball.y = floor
            ball.dy = -abs(ball.dy)
            play_sound(self.event_bus, 300, 50)

    def _bounce_paddle(self, ball: Body, paddle: Paddle, body: Body) -> None:
        if paddle.side == "left":
            if ball.dx >= 0:
                return
            ball.x = body.right
            ball.dx = abs(ball.dx)
        else:
            if ball.dx <= 0:
                return
            ball.x = body.x - ball.width
            ball.dx = -abs(ball.dx)
        hit = (ball.y - body.y) / body.height
        ball.dy = (hit - 0.5) * ENGLISH
        play_sound(self.event_bus, 440, 50)

    def _score_if_out(self, ball: Body) -> None:
        if ball.x <= 0:
            scorer = "right"
        elif ball.x >= self.court.cols:
            scorer = "left"
        else:
            return
        score = self._match_score()
        if score is None:
            return
        if scorer == "left":
            score.left += 1
        else:
            score.right += 1
        award_points(self.world, self.event_bus, 1, display=score.display)
        play_sound(self.event_bus, 220, 200)
        if max(score.left, score.right) >= score.winning_score:
            score.winner = scorer
            end_session(self.world, self.event_bus, reason="match_won")
            show_status(self.event_bus, f"{scorer.title()} player wins {score.display}!", "success")
            return
        serve(self.world, self.court, ball)

    def _match_score(self) -> MatchScore | None:
        for _, score in self.world.get_component(MatchScore):
            return score
        return None


def _touching(ball: Body, paddle: Body) -> bool:
    """Inclusive edge contact, so a ball grazing the paddle face still bounces."""
    return (
        ball.x <= paddle.right
        and ball.right >= paddle.x
        and ball.y <= paddle.bottom
        and ball.bottom >= paddle.y
    )


def match_score(world: World) -> MatchScore | None:
    for _, score in world.get_component(MatchScore):
        return score
    return None
