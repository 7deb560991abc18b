"""
Feeds a player's decisions into the engine as key presses.
"""

import logging
from typing import Dict

from adapters.base import KeyEvent
from adapters.events import EventSource
from domain.constants import HEADINGS
from domain.game_state import GameState
from .base import Player

logger = logging.getLogger(__name__)


class KeyboardDriver:
    """
    Asks a player for a heading and presses the matching key, so automatic
    play goes through the same input path as a person at the keyboard.
    """

    def __init__(self, player: Player, event_source: EventSource, keybindings: Dict[str, int]):
        self.player = player
        self.event_source = event_source
        self._key_codes = {HEADINGS[name]: code for name, code in keybindings.items()}

    def press_for(self, game_state: GameState) -> None:
        if not game_state.alive:
            return
        move = self.player.get_move(game_state)
        if move == game_state.heading:
            return
        delivered = self.event_source.dispatch("keydown", KeyEvent(self._key_codes[move]))
        if not delivered:
            logger.debug("No keydown listener registered; dropped %s", move)
