"""Factory helpers for problems, the cannon and the defence timer."""
from __future__ import annotations

import random

from esper import World

from retrocade.components.appearance import Appearance
from retrocade.components.body import Body
from retrocade.components.countdown import Countdown
from retrocade.games.number_defenders.components import (
    AnswerBuffer,
    Battlefield,
    Cannon,
    DefenseStats,
    Problem,
)

PROBLEM_START_Y = -2.0
PROBLEM_COLOR = (255, 255, 0)
CANNON_COLOR = (0, 255, 0)
OPERATIONS = ("+", "-", "both")


def generate_problem(rng: random.Random, operation: str = "both") -> tuple[str, int]:
    """Return ``(text, answer)``; subtraction never goes below zero."""
    if operation not in OPERATIONS:
        raise ValueError(f"unknown operation {operation!r}")
    op = operation if operation != "both" else rng.choice(("+", "-"))
    a = rng.randint(1, 20)
    if op == "+":
        b = rng.randint(1, 20)
        return f"{a} + {b}", a + b
    b = rng.randint(1, a)
    return f"{a} - {b}", a - b


def spawn_problem(world: World, field: Battlefield, lane: int, operation: str = "both") -> int:
    text, answer = generate_problem(world.random, operation)
    width = 3.0
    return world.create_entity(
        Problem(text, answer, lane),
        Body(field.lane_centre(lane) - width / 2, PROBLEM_START_Y, width, 1),
        Appearance(PROBLEM_COLOR, label=text),
    )


def spawn_cannon(world: World, field: Battlefield) -> int:
    cannon = Cannon()
    return world.create_entity(
        cannon,
        Body(field.cols // 2, field.rows - 2, cannon.width, 2),
        Appearance(CANNON_COLOR),
    )


def spawn_battlefield(world: World, field: Battlefield, *, operation: str = "both",
                      time_limit: float | None = None, answers_per_level: int = 10) -> None:
    for lane in range(field.lanes):
        spawn_problem(world, field, lane, operation)
    spawn_cannon(world, field)
    world.create_entity(AnswerBuffer())
    world.create_entity(DefenseStats(answers_per_level=answers_per_level))
    if time_limit:
        world.create_entity(Countdown(remaining=float(time_limit)))
