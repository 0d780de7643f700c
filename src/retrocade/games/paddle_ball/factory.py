"""Factory helpers for the paddle game court."""
from esper import World

from retrocade.components.appearance import Appearance
from retrocade.components.body import Body
from retrocade.games.paddle_ball.components import Ball, Court, MatchScore, Paddle

PADDLE_HEIGHT = 4
PADDLE_WIDTH = 1
SERVE_DX = 0.3
SERVE_DY = 0.2

LEFT_COLOR = (0, 255, 255)
RIGHT_COLOR = (255, 0, 255)
BALL_COLOR = (255, 255, 255)


def spawn_court(world: World, court: Court, *, paddle_speed: float = 0.5,
                winning_score: int = 11) -> None:
    paddle_y = court.rows / 2 - PADDLE_HEIGHT / 2
    world.create_entity(
        Paddle("left", paddle_speed),
        Body(1, paddle_y, PADDLE_WIDTH, PADDLE_HEIGHT),
        Appearance(LEFT_COLOR),
    )
    world.create_entity(
        Paddle("right", paddle_speed),
        Body(court.cols - 2, paddle_y, PADDLE_WIDTH, PADDLE_HEIGHT),
        Appearance(RIGHT_COLOR),
    )
    ball_body = Body(0, 0, 1, 1)
    serve(world, court, ball_body)
    world.create_entity(Ball(), ball_body, Appearance(BALL_COLOR))
    world.create_entity(MatchScore(winning_score=winning_score))


def serve(world: World, court: Court, body: Body) -> None:
    """Put the ball back on the centre spot heading in a random diagonal."""
    rng = world.random
    body.x = court.cols / 2
    body.y = court.rows / 2
    body.dx = SERVE_DX if rng.random() > 0.5 else -SERVE_DX
    body.dy = SERVE_DY if rng.random() > 0.5 else -SERVE_DY
