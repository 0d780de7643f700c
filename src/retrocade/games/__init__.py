"""Registry of playable games keyed by slug."""
from __future__ import annotations

from retrocade.config import GAME_CONFIGS
from retrocade.engine.game_loop import GameLoop
from retrocade.engine.host import GameHost
from retrocade.errors import UnknownGameError
from retrocade.games.block_stack.game import BlockStackGame
from retrocade.games.breakout.game import BubblePopGame, WallBreakerGame
from retrocade.games.chompy.game import ChompyGame
from retrocade.games.number_defenders.game import NumberDefendersGame
from retrocade.games.paddle_ball.game import PaddleBallGame
from retrocade.games.pipe_dream.game import PipeDreamGame
from retrocade.games.road_dash.game import RoadDashGame
from retrocade.games.word_defenders.game import WordDefendersGame
from retrocade.games.wormy.game import WormyGame

GAME_CLASSES: dict[str, type[GameLoop]] = {
    cls.slug: cls
    for cls in (
        ChompyGame,
        BlockStackGame,
        WormyGame,
        WallBreakerGame,
        BubblePopGame,
        RoadDashGame,
        PaddleBallGame,
        NumberDefendersGame,
        WordDefendersGame,
        PipeDreamGame,
    )
}


def available_games() -> list[str]:
    """Slugs that have both a config entry and an implementation."""
    return [slug for slug in GAME_CONFIGS if slug in GAME_CLASSES]


def create_game(slug: str, host: GameHost | None = None, **kwargs) -> GameLoop:
    try:
        cls = GAME_CLASSES[slug]
    except KeyError:
        raise UnknownGameError(slug) from None
    return cls(host, **kwargs)


__all__ = [
    "GAME_CLASSES",
    "available_games",
    "create_game",
    "BlockStackGame",
    "BubblePopGame",
    "ChompyGame",
    "NumberDefendersGame",
    "PaddleBallGame",
    "PipeDreamGame",
    "RoadDashGame",
    "WallBreakerGame",
    "WordDefendersGame",
    "WormyGame",
]
