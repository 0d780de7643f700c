"""Static catalogue of playable game variants and window-level settings."""
from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

from retrocade.errors import UnknownGameError

DIFFICULTY_ORDER = {"easy": 0, "medium": 1, "hard": 2}

CATEGORIES = {
    "arcade": "Classic arcade-style games",
    "puzzle": "Brain-teasing puzzle games",
    "casual": "Easy-to-pick-up casual games",
    "sports": "Sports and competitive games",
    "educational": "Learn while you play",
}


@dataclass(frozen=True)
class GameConfig:
    """Everything the engine needs to know about one game variant."""
    slug: str
    title: str
    description: str
    category: str
    difficulty: str
    canvas_width: int
    canvas_height: int
    tick_interval: float
    controls: tuple[str, ...] = ("arrow-keys", "touch")
    modules: tuple[str, ...] = ("audio",)
    pause_keys: tuple[str, ...] = ("P",)
    starting_lives: int = 3
    options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def option(self, name: str, default: Any = None) -> Any:
        return self.options.get(name, default)

    def with_options(self, **overrides: Any) -> "GameConfig":
        merged = dict(self.options)
        merged.update(overrides)
        return replace(self, options=MappingProxyType(merged))


def _options(**values: Any) -> Mapping[str, Any]:
    return MappingProxyType(values)


GAME_CONFIGS: dict[str, GameConfig] = {
    cfg.slug: cfg
    for cfg in (
        GameConfig(
            slug="chompy",
            title="Chompy",
            description="Navigate through mazes, eat dots, and avoid ghosts in this classic arcade game.",
            category="arcade",
            difficulty="medium",
            canvas_width=560,
            canvas_height=640,
            tick_interval=0.016,
            modules=("audio", "fireworks"),
            options=_options(
                player_step=0.15,
                ghost_step=0.2,
                frightened_step=0.3,
                frightened_seconds=6.0,
                mode_seconds=7.0,
                level_bonus=1000,
            ),
        ),
        GameConfig(
            slug="block-stack",
            title="Block Stack",
            description="Stack falling blocks to create complete lines in this addictive puzzle game.",
            category="puzzle",
            difficulty="easy",
            canvas_width=240,
            canvas_height=480,
            tick_interval=0.016,
            options=_options(drop_interval=1.0, drop_step=0.05, min_drop_interval=0.1),
        ),
        GameConfig(
            slug="wormy",
            title="Wormy",
            description="Control a growing worm, eat food, and avoid hitting walls or yourself.",
            category="arcade",
            difficulty="easy",
            canvas_width=400,
            canvas_height=400,
            tick_interval=0.1,
            options=_options(wrap=True, foods_per_level=5, speedup=0.9, min_interval=0.05),
        ),
        GameConfig(
            slug="wall-breaker",
            title="Wall Breaker",
            description="Bounce the ball off your paddle and smash every brick in the wall.",
            category="arcade",
            difficulty="medium",
            canvas_width=800,
            canvas_height=600,
            tick_interval=0.016,
            controls=("arrow-keys", "mouse", "touch"),
            options=_options(speed_multiplier=1.15, english=0.4, pointer_paddle=True),
        ),
        GameConfig(
            slug="bubble-pop",
            title="Bubble Pop",
            description="Pop colorful bubbles with realistic physics and satisfying sound effects!",
            category="casual",
            difficulty="easy",
            canvas_width=960,
            canvas_height=480,
            tick_interval=0.016,
            controls=("arrow-keys", "touch"),
            options=_options(speed_multiplier=1.1, english=0.3, pointer_paddle=False),
        ),
        GameConfig(
            slug="road-dash",
            title="Road Dash",
            description="Help the frog cross the road safely.",
            category="arcade",
            difficulty="medium",
            canvas_width=400,
            canvas_height=600,
            tick_interval=0.05,
            pause_keys=("P", "Space"),
            options=_options(base_speed=4.0, speedup=1.2, crossing_bonus=100),
        ),
        GameConfig(
            slug="paddle-ball",
            title="Paddle Ball",
            description="The classic two-player table tennis simulation game.",
            category="sports",
            difficulty="medium",
            canvas_width=800,
            canvas_height=400,
            tick_interval=0.016,
            controls=("wasd-arrows", "touch"),
            pause_keys=("P", "Space"),
            options=_options(winning_score=11, paddle_speed=0.5),
        ),
        GameConfig(
            slug="number-defenders",
            title="Number Defenders",
            description="Solve math problems while defending against invading aliens.",
            category="educational",
            difficulty="hard",
            canvas_width=800,
            canvas_height=600,
            tick_interval=0.05,
            controls=("keyboard", "touch"),
            modules=("audio", "fireworks", "rocket"),
            pause_keys=("Escape",),
            options=_options(lanes=4, fall_speed=4.0, operation="both", time_limit=120.0,
                             answers_per_level=10),
        ),
        GameConfig(
            slug="word-defenders",
            title="Word Defenders",
            description="Improve your spelling while defending against word-based invaders.",
            category="educational",
            difficulty="hard",
            canvas_width=800,
            canvas_height=600,
            tick_interval=0.05,
            controls=("keyboard", "touch"),
            modules=("audio", "fireworks", "rocket"),
            pause_keys=("Space",),
            options=_options(words=("HELLO", "WORLD", "GAME", "PLAY", "FUN", "CODE", "WEB", "APP")),
        ),
        GameConfig(
            slug="pipe-dream",
            title="Pipe Dream",
            description="Connect pipes from the source to the drain before the clock runs out.",
            category="puzzle",
            difficulty="hard",
            canvas_width=800,
            canvas_height=600,
            tick_interval=0.1,
            controls=("mouse", "touch"),
            options=_options(grid_size=8, tile_size=40, time_limit=60.0, level_bonus=1000),
        ),
    )
}


def get_config(slug: str) -> GameConfig:
    try:
        return GAME_CONFIGS[slug]
    except KeyError:
        raise UnknownGameError(slug) from None


def configs_by_category(category: str) -> list[GameConfig]:
    return [cfg for cfg in GAME_CONFIGS.values() if cfg.category == category]


def configs_by_difficulty(difficulty: str) -> list[GameConfig]:
    return [cfg for cfg in GAME_CONFIGS.values() if cfg.difficulty == difficulty]


def configs_with_control(control: str) -> list[GameConfig]:
    return [cfg for cfg in GAME_CONFIGS.values() if control in cfg.controls]


def configs_with_module(module: str) -> list[GameConfig]:
    return [cfg for cfg in GAME_CONFIGS.values() if module in cfg.modules]


def sorted_by_difficulty() -> list[GameConfig]:
    return sorted(
        GAME_CONFIGS.values(),
        key=lambda cfg: (DIFFICULTY_ORDER.get(cfg.difficulty, len(DIFFICULTY_ORDER)), cfg.title),
    )


def _env_flag(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Window-level options for the desktop shell."""
    game: str = "chompy"
    fullscreen: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            game=env.get("RETROCADE_GAME", cls.game),
            fullscreen=_env_flag(env.get("RETROCADE_FULLSCREEN")),
            log_level=env.get("RETROCADE_LOG_LEVEL", cls.log_level).upper(),
        )
