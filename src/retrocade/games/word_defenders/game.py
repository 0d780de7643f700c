from __future__ import annotations

import string

from esper import World

from retrocade.constants import KEY_BACKSPACE, KEY_ENTER
from retrocade.engine.game_loop import GameLoop
from retrocade.games.word_defenders.factory import next_word
from retrocade.games.word_defenders.render_system import WordDefendersRenderSystem
from retrocade.games.word_defenders.systems import LetterFallSystem, LetterLandingSystem, TypingSystem
from retrocade.rendering.frame import Frame
from retrocade.systems.base_processor import (
    PRIORITY_COLLISION,
    PRIORITY_INPUT,
    PRIORITY_MOVEMENT,
)
from retrocade.systems.input_system import KeyBindings


class WordDefendersGame(GameLoop):
    """Spell the word at the top before its letters hit the ground."""

    slug = "word-defenders"
    bindings = KeyBindings(
        directions={},
        presses={KEY_BACKSPACE: "backspace", KEY_ENTER: "clear"},
        text_chars=string.ascii_uppercase,
    )

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(self.config.option("words", ("HELLO",)))

    def register_processors(self, world: World) -> None:
        width, height = self.config.canvas_width, self.config.canvas_height
        world.add_processor(TypingSystem(self.event_bus, self.words, width), priority=PRIORITY_INPUT)
        world.add_processor(LetterFallSystem(self.event_bus), priority=PRIORITY_MOVEMENT)
        world.add_processor(
            LetterLandingSystem(self.event_bus, self.words, width, height),
            priority=PRIORITY_COLLISION,
        )
        self._renderer = WordDefendersRenderSystem(self.config)

    def populate(self, world: World) -> None:
        next_word(world, self.words, self.config.canvas_width)

    def render_frame(self, world: World) -> Frame:
        return self._renderer.render(world)
