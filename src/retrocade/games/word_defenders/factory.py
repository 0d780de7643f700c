"""Factory helpers for spelling targets and their falling letters."""
from __future__ import annotations

from typing import Sequence

from esper import World

from retrocade.components.appearance import Appearance
from retrocade.components.body import Body
from retrocade.games.word_defenders.components import FallingLetter, WordTarget

LETTER_SIZE = 30
LETTER_COLOR = (0, 255, 255)
MIN_SPEED = 20.0
MAX_SPEED = 60.0


def spawn_letters(world: World, word: str, canvas_width: int) -> list[int]:
    """Drop every letter of ``word`` from above the canvas, staggered 30px apart."""
    rng = world.random
    created = []
    for idx, char in enumerate(word):
        created.append(
            world.create_entity(
                FallingLetter(char, idx),
                Body(
                    rng.uniform(0, canvas_width - 40),
                    -50 - idx * 30,
                    LETTER_SIZE,
                    LETTER_SIZE,
                    dy=rng.uniform(MIN_SPEED, MAX_SPEED),
                ),
                Appearance(LETTER_COLOR, label=char),
            )
        )
    return created


def clear_letters(world: World) -> None:
    for ent, _ in list(world.get_component(FallingLetter)):
        world.delete_entity(ent, immediate=True)


def next_word(world: World, words: Sequence[str], canvas_width: int, *, word: str | None = None) -> str:
    """Pick a fresh word (or use ``word``), reset typing and drop its letters."""
    chosen = (word or world.random.choice(list(words))).upper()
    target = None
    for _, found in world.get_component(WordTarget):
        target = found
        break
    if target is None:
        target = WordTarget()
        world.create_entity(target)
    target.word = chosen
    target.typed = ""
    clear_letters(world)
    spawn_letters(world, chosen, canvas_width)
    return chosen
