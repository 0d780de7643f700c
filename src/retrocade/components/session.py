"""Session resource describing the active high-level state of one game."""
from dataclasses import dataclass
from enum import Enum, auto


class SessionState(Enum):
    """States that gate whether the fixed-tick updater runs."""
    MENU = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


@dataclass
class GameSession:
    """Singleton component storing score, lives and level for the running game."""
    state: SessionState = SessionState.MENU
    score: int = 0
    lives: int = 3
    level: int = 1
    elapsed: float = 0.0
