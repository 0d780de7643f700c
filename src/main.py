"""Entry point for the retrocade arcade window.

Hosts one game in an arcade Window, feeding it keyboard, mouse and focus
events and drawing its frames above a score / lives / level strip.
"""
import logging

from arcade import Window, color, draw_lrbt_rectangle_filled, draw_lrbt_rectangle_outline, draw_text, key, run

from retrocade.config import Settings, get_config
from retrocade.constants import HUD_HEIGHT, KEY_BACKSPACE, KEY_DOWN, KEY_ENTER, KEY_ESCAPE, KEY_LEFT, KEY_RIGHT, KEY_SPACE, KEY_UP
from retrocade.events.bus import EVENT_NAVIGATE_HOME, EventBus
from retrocade.games import create_game
from retrocade.rendering.painter import ArcadePainter

logger = logging.getLogger(__name__)

STATUS_COLORS = {
    "info": (80, 160, 255),
    "success": (80, 220, 120),
    "warning": (255, 200, 60),
    "error": (255, 80, 80),
}
FLASH_SECONDS = 0.5

SPECIAL_KEYS = {
    key.UP: KEY_UP,
    key.DOWN: KEY_DOWN,
    key.LEFT: KEY_LEFT,
    key.RIGHT: KEY_RIGHT,
    key.SPACE: KEY_SPACE,
    key.ENTER: KEY_ENTER,
    key.RETURN: KEY_ENTER,
    key.BACKSPACE: KEY_BACKSPACE,
    key.ESCAPE: KEY_ESCAPE,
    key.MINUS: "-",
    key.NUM_SUBTRACT: "-",
}


def key_name(symbol: int) -> str | None:
    """Translate an arcade key symbol into the logical name games bind to."""
    if symbol in SPECIAL_KEYS:
        return SPECIAL_KEYS[symbol]
    if key.A <= symbol <= key.Z:
        return chr(symbol).upper()
    if key.KEY_0 <= symbol <= key.KEY_9:
        return chr(symbol)
    if key.NUM_0 <= symbol <= key.NUM_9:
        return str(symbol - key.NUM_0)
    return None


class HudHost:
    """GameHost that keeps what the window's HUD strip shows."""

    def __init__(self) -> None:
        self.audio = None
        self.effects = self
        self.score = "0"
        self.lives = 0
        self.level = 1
        self.status: tuple[str, str] | None = None
        self.flash = 0.0

    def update_score(self, score) -> None:
        self.score = str(score)

    def update_lives(self, lives: int) -> None:
        self.lives = lives

    def update_level(self, level: int) -> None:
        self.level = level

    def show_status(self, text: str, level: str) -> None:
        self.status = (text, level)

    def hide_status(self) -> None:
        self.status = None

    def celebrate(self, kind: str, x=None, y=None) -> None:
        logger.debug("celebrate %s at %s,%s", kind, x, y)
        self.flash = FLASH_SECONDS


class RetrocadeWindow(Window):
    def __init__(self, settings: Settings):
        config = get_config(settings.game)
        super().__init__(config.canvas_width, config.canvas_height + HUD_HEIGHT, f"Retrocade - {config.title}")
        self.canvas_height = config.canvas_height
        self.event_bus = EventBus()
        self.event_bus.subscribe(EVENT_NAVIGATE_HOME, self._on_navigate_home)
        self.host = HudHost()
        self.painter = ArcadePainter(offset_y=HUD_HEIGHT)
        self._leaving = False
        self.game = create_game(settings.game, self.host, event_bus=self.event_bus)
        self.game.init()
        if settings.fullscreen:
            self.set_fullscreen(True)

    def on_draw(self):
        self.clear()
        self.painter.paint(self.game.frame)
        self._draw_hud()

    def on_update(self, delta_time: float):
        if self._leaving:
            self.game.destroy()
            self.close()
            return
        if self.host.flash > 0:
            self.host.flash = max(0.0, self.host.flash - delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        name = key_name(symbol)
        if name is not None:
            self.game.key_down(name)

    def on_key_release(self, symbol: int, modifiers: int):
        name = key_name(symbol)
        if name is not None:
            self.game.key_up(name)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.game.pointer_down(*self._canvas_point(x, y))

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.game.pointer_up(*self._canvas_point(x, y))

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.game.pointer_move(*self._canvas_point(x, y))

    def on_deactivate(self):
        self.game.visibility_changed(False)

    def on_activate(self):
        self.game.visibility_changed(True)

    def on_close(self):
        self.game.destroy()
        super().on_close()

    def _canvas_point(self, x: float, y: float) -> tuple[float, float]:
        # Canvas coordinates have a top-left origin above the HUD strip.
        return x, self.canvas_height - (y - HUD_HEIGHT)

    def _draw_hud(self):
        host = self.host
        draw_lrbt_rectangle_filled(0, self.width, 0, HUD_HEIGHT, (20, 20, 30))
        mid = HUD_HEIGHT / 2
        draw_text(f"Score: {host.score}", 10, mid, color.WHITE, 14, anchor_y="center")
        draw_text(f"Lives: {host.lives}", self.width / 2, mid, color.WHITE, 14, anchor_x="center", anchor_y="center")
        draw_text(f"Level: {host.level}", self.width - 10, mid, color.WHITE, 14, anchor_x="right", anchor_y="center")
        if host.status is not None:
            text, level = host.status
            banner_color = STATUS_COLORS.get(level, STATUS_COLORS["info"])
            top = self.height - 10
            draw_lrbt_rectangle_filled(40, self.width - 40, top - 36, top, (*banner_color, 220))
            draw_text(text, self.width / 2, top - 18, color.BLACK, 16, anchor_x="center", anchor_y="center", bold=True)
        if host.flash > 0:
            alpha = int(255 * host.flash / FLASH_SECONDS)
            draw_lrbt_rectangle_outline(2, self.width - 2, HUD_HEIGHT, self.height - 2, (255, 215, 0, alpha), 4)

    def _on_navigate_home(self, sender, **payload):
        logger.info("home requested from %s; closing", payload.get("source"))
        self._leaving = True


def main():
    settings = Settings.from_env()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    RetrocadeWindow(settings)
    run()


if __name__ == "__main__":
    main()
