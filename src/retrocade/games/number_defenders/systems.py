"""Per-tick processors for the math defence game."""
from __future__ import annotations

from esper import World

from retrocade.components.body import Body
from retrocade.config import GameConfig
from retrocade.events.bus import EventBus
from retrocade.games.number_defenders.components import (
    AnswerBuffer,
    Battlefield,
    Cannon,
    DefenseStats,
    Problem,
)
from retrocade.games.number_defenders.factory import spawn_problem
from retrocade.systems.base_processor import PlayingProcessor
from retrocade.systems.particle_system import burst
from retrocade.utils.session import (
    award_points,
    celebrate,
    complete_level,
    get_session,
    lose_life,
    play_sound,
)
from retrocade.world import get_latch


def _single(world: World, component_type):
    for _, comp in world.get_component(component_type):
        return comp
    return None


def _cannon(world: World) -> Body | None:
    for _, (_cannon, body) in world.get_components(Cannon, Body):
        return body
    return None


class AnswerInputSystem(PlayingProcessor):
    """Moves the cannon and edits the typed answer, checking it after every key."""

    def __init__(self, event_bus: EventBus, field: Battlefield, config: GameConfig) -> None:
        super().__init__(event_bus)
        self.field = field
        self.operation = str(config.option("operation", "both"))

    def step(self, dt: float) -> None:
        latch = get_latch(self.world)
        buffer = _single(self.world, AnswerBuffer)
        cannon = _cannon(self.world)
        if latch is None or buffer is None or cannon is None:
            return
        for action in latch.drain_presses():
            if action == "left":
                cannon.x = max(0, cannon.x - 1)
            elif action == "right":
                cannon.x = min(self.field.cols - cannon.width, cannon.x + 1)
            elif action == "backspace":
                buffer.text = buffer.text[:-1]
            elif action == "clear":
                buffer.text = ""
            elif len(action) == 1:
                buffer.text += action
                self._check(buffer, cannon)

    def _check(self, buffer: AnswerBuffer, cannon: Body) -> None:
        try:
            value = int(buffer.text)
        except ValueError:
            return
        lane = self.field.lane_of(cannon.x)
        for ent, (problem, body) in list(self.world.get_components(Problem, Body)):
            if problem.lane != lane or problem.answer != value:
                continue
            self.world.delete_entity(ent, immediate=True)
            award_points(self.world, self.event_bus, 10)
            burst(self.world, body.center_x, body.center_y)
            celebrate(self.event_bus, "rocket", x=body.center_x, y=body.center_y)
            play_sound(self.event_bus, 880, 80)
            spawn_problem(self.world, self.field, lane, self.operation)
            buffer.text = ""
            self._count_correct()
            return

    def _count_correct(self) -> None:
        stats = _single(self.world, DefenseStats)
        if stats is None:
            return
        stats.correct += 1
        if stats.correct % stats.answers_per_level == 0:
            complete_level(self.world, self.event_bus, celebration="fireworks")


class FallingProblemSystem(PlayingProcessor):
    def __init__(self, event_bus: EventBus, config: GameConfig) -> None:
        super().__init__(event_bus)
        self.fall_speed = float(config.option("fall_speed", 4.0))

    def step(self, dt: float) -> None:
        session = get_session(self.world)
        level = session.level if session else 1
        speed = self.fall_speed * (1 + 0.1 * (level - 1))
        for _, (_problem, body) in self.world.get_components(Problem, Body):
            body.y += speed * dt


class InvasionSystem(PlayingProcessor):
    """A problem landing on the cannon, or slipping past the bottom, costs a life."""

    def __init__(self, event_bus: EventBus, field: Battlefield, config: GameConfig) -> None:
        super().__init__(event_bus)
        self.field = field
        self.operation = str(config.option("operation", "both"))

    def step(self, dt: float) -> None:
        cannon = _cannon(self.world)
        if cannon is None:
            return
        cannon_lane = self.field.lane_of(cannon.x)
        for ent, (problem, body) in list(self.world.get_components(Problem, Body)):
            hit_cannon = problem.lane == cannon_lane and body.bottom >= cannon.y
            escaped = body.y > self.field.rows
            if not (hit_cannon or escaped):
                continue
            self.world.delete_entity(ent, immediate=True)
            play_sound(self.event_bus, 150, 300, waveform="sawtooth")
            remaining = lose_life(self.world, self.event_bus, reason="invaded")
            if remaining <= 0:
                return
            spawn_problem(self.world, self.field, problem.lane, self.operation)
