"""Menu, pause and game-over overlays shared by every game renderer."""
from __future__ import annotations

from typing import Sequence

from retrocade.components.session import GameSession, SessionState
from retrocade.config import GameConfig
from retrocade.constants import COLOR_OVERLAY, COLOR_TEXT
from retrocade.rendering.frame import Frame

TITLE_COLOR = (255, 255, 0)
HINT_COLOR = (200, 200, 200)


def key_label(key: str) -> str:
    return key.upper() if len(key) > 1 else key


def draw_session_overlay(
    frame: Frame,
    session: GameSession,
    config: GameConfig,
    *,
    instructions: Sequence[str] = (),
    game_over_lines: Sequence[str] = (),
) -> None:
    """Append the overlay for the current state; nothing is drawn while playing."""
    if session.state == SessionState.PLAYING:
        return
    cx = frame.width / 2
    cy = frame.height / 2
    frame.rect(0, 0, frame.width, frame.height, COLOR_OVERLAY)

    if session.state == SessionState.MENU:
        frame.text(config.title.upper(), cx, cy - 60, TITLE_COLOR, size=28, bold=True)
        frame.text("Press SPACE to start", cx, cy - 10, COLOR_TEXT, size=16)
        for idx, line in enumerate(instructions):
            frame.text(line, cx, cy + 25 + idx * 20, HINT_COLOR, size=12)
    elif session.state == SessionState.PAUSED:
        resume = " or ".join(key_label(k) for k in config.pause_keys)
        frame.text("PAUSED", cx, cy - 20, TITLE_COLOR, size=28, bold=True)
        frame.text(f"Press {resume} to resume", cx, cy + 20, COLOR_TEXT, size=14)
    elif session.state == SessionState.GAME_OVER:
        frame.text("GAME OVER", cx, cy - 60, (255, 80, 80), size=28, bold=True)
        lines = list(game_over_lines) or [f"Final Score: {session.score}", f"Level: {session.level}"]
        for idx, line in enumerate(lines):
            frame.text(line, cx, cy - 15 + idx * 24, COLOR_TEXT, size=16)
        base = cy - 15 + len(lines) * 24 + 16
        frame.text("Press SPACE to play again", cx, base, HINT_COLOR, size=14)
        frame.text("Press H to return home", cx, base + 22, HINT_COLOR, size=14)
