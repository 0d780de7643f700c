"""Shared numeric defaults and logical key names."""

CELL_SIZE = 20
STARTING_LIVES = 3
STATUS_BANNER_SECONDS = 2.0
HUD_HEIGHT = 40

# Logical key names follow DOM ``KeyboardEvent.key`` values; single letters are upper case.
KEY_UP = "ArrowUp"
KEY_DOWN = "ArrowDown"
KEY_LEFT = "ArrowLeft"
KEY_RIGHT = "ArrowRight"
KEY_SPACE = "Space"
KEY_ENTER = "Enter"
KEY_BACKSPACE = "Backspace"
KEY_ESCAPE = "Escape"
KEY_CLICK = "click"

ARROW_KEYS = (KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT)

TOUCH_PRESS_TYPES = frozenset({"down", "keydown", "mousedown", "touchstart"})
TOUCH_RELEASE_TYPES = frozenset({"up", "keyup", "mouseup", "touchend"})

COLOR_BACKGROUND = (0, 0, 0)
COLOR_TEXT = (255, 255, 255)
COLOR_OVERLAY = (0, 0, 0, 180)
