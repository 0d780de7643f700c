"""Per-tick processors for the spelling defence game."""
from __future__ import annotations

from typing import Sequence

from esper import World

from retrocade.components.body import Body
from retrocade.events.bus import EventBus
from retrocade.games.word_defenders.components import FallingLetter, WordTarget
from retrocade.games.word_defenders.factory import next_word
from retrocade.systems.base_processor import PlayingProcessor
from retrocade.utils.session import complete_level, get_session, lose_life, play_sound
from retrocade.world import get_latch


def word_target(world: World) -> WordTarget | None:
    for _, target in world.get_component(WordTarget):
        return target
    return None


class TypingSystem(PlayingProcessor):
    """Applies typed letters and edits; a finished word scores and advances the level."""

    def __init__(self, event_bus: EventBus, words: Sequence[str], canvas_width: int) -> None:
        super().__init__(event_bus)
        self.words = words
        self.canvas_width = canvas_width

    def step(self, dt: float) -> None:
        latch = get_latch(self.world)
        target = word_target(self.world)
        if latch is None or target is None:
            return
        for action in latch.drain_presses():
            if action == "backspace":
                target.typed = target.typed[:-1]
            elif action == "clear":
                target.typed = ""
            elif len(action) == 1:
                target.typed += action.upper()
                play_sound(self.event_bus, 660, 30)
                if target.typed == target.word:
                    self._word_done()
                    return

    def _word_done(self) -> None:
        session = get_session(self.world)
        level = session.level if session else 1
        complete_level(self.world, self.event_bus, bonus=100 * level)
        next_word(self.world, self.words, self.canvas_width)


class LetterFallSystem(PlayingProcessor):
    def step(self, dt: float) -> None:
        for _, (_letter, body) in self.world.get_components(FallingLetter, Body):
            body.y += body.dy * dt


class LetterLandingSystem(PlayingProcessor):
    """Letters leaving the bottom cost a life each; an empty sky brings the next word."""

    def __init__(self, event_bus: EventBus, words: Sequence[str], canvas_width: int,
                 canvas_height: int) -> None:
        super().__init__(event_bus)
        self.words = words
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height

    def step(self, dt: float) -> None:
        for ent, (_letter, body) in list(self.world.get_components(FallingLetter, Body)):
            if body.y <= self.canvas_height:
                continue
            self.world.delete_entity(ent, immediate=True)
            play_sound(self.event_bus, 150, 200, waveform="sawtooth")
            if lose_life(self.world, self.event_bus, reason="letter_landed") <= 0:
                return
        if not any(True for _ in self.world.get_component(FallingLetter)):
            next_word(self.world, self.words, self.canvas_width)
