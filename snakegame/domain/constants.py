"""
Game constants for Snake.
"""

from .heading import LEFT, UP, RIGHT, DOWN

# Movement directions, keyed by the name used in key bindings
HEADINGS = {
    "left": LEFT,
    "up": UP,
    "right": RIGHT,
    "down": DOWN,
}

# Board settings
DEFAULT_WIDTH = 27
DEFAULT_HEIGHT = 20
DEFAULT_TILE_SIZE = (50, 50)
DEFAULT_TILE_MARGIN = (4, 4)

# Timing, in milliseconds
DEFAULT_TICK_PERIOD_MS = 100
DEFAULT_RESTART_DELAY_MS = 1500

# Starting round
START_HEADING = RIGHT
START_BODY = [(12, 10), (11, 10), (10, 10), (9, 10), (8, 10)]

# DOM key codes for the arrow keys
DEFAULT_KEYBINDINGS = {
    "left": 37,
    "up": 38,
    "right": 39,
    "down": 40,
}

DEFAULT_COLORS = {
    "background": "#181818",
    "body": "#008855",
    "head": "#88AA55",
    "food": "#AA2200",
}

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
DEATH_BOARD_FULL = "board_full"
