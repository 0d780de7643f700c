"""Factory helpers for paddles, balls and brick walls."""
from esper import World

from retrocade.components.appearance import Appearance
from retrocade.components.body import Body
from retrocade.games.breakout.components import Ball, Brick, BreakoutTuning, Field, Paddle
from retrocade.rendering.frame import hex_color

PADDLE_WIDTH = 6
BALL_SPEED = 0.15
BRICK_ROWS = 6
MAX_BRICK_COLUMNS = 10
BRICK_WIDTH = 3
BRICK_HEIGHT = 1
BRICK_PITCH_X = 4
BRICK_PITCH_Y = 2
BRICK_TOP = 2
ROW_COLORS = tuple(
    hex_color(value) for value in ("#ff0000", "#ff8000", "#ffff00", "#00ff00", "#00ffff", "#ff00ff")
)
PADDLE_COLOR = (0, 255, 0)
BALL_COLOR = (255, 255, 255)


def spawn_paddle(world: World, field: Field, speed: float = 0.5) -> int:
    return world.create_entity(
        Paddle(speed),
        Body(field.cols / 2 - PADDLE_WIDTH / 2, field.rows - 2, PADDLE_WIDTH, 1),
        Appearance(PADDLE_COLOR),
    )


def place_ball(body: Body, field: Field, speed_factor: float) -> None:
    body.x = field.cols / 2
    body.y = field.rows - 3
    body.dx = BALL_SPEED * speed_factor
    body.dy = -BALL_SPEED * speed_factor


def spawn_ball(world: World, field: Field, speed_factor: float = 1.0) -> int:
    body = Body(0, 0, 1, 1)
    place_ball(body, field, speed_factor)
    return world.create_entity(Ball(), body, Appearance(BALL_COLOR))


def brick_columns(field: Field) -> int:
    return max(1, min(MAX_BRICK_COLUMNS, (field.cols + 1) // BRICK_PITCH_X))


def spawn_bricks(world: World, field: Field) -> list[int]:
    """Lay out the brick wall centred on the field."""
    columns = brick_columns(field)
    span = columns * BRICK_PITCH_X - (BRICK_PITCH_X - BRICK_WIDTH)
    left = (field.cols - span) / 2
    created = []
    for row, color in enumerate(ROW_COLORS):
        for col in range(columns):
            created.append(
                world.create_entity(
                    Brick(),
                    Body(left + col * BRICK_PITCH_X, BRICK_TOP + row * BRICK_PITCH_Y, BRICK_WIDTH, BRICK_HEIGHT),
                    Appearance(color),
                )
            )
    return created


def spawn_field(world: World, field: Field, tuning: BreakoutTuning) -> None:
    world.create_entity(tuning)
    spawn_paddle(world, field)
    spawn_ball(world, field, tuning.speed_factor)
    spawn_bricks(world, field)
