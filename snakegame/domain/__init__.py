"""
Domain entities for the Snake game engine.

This module contains the core game entities that are independent of
rendering, input and timing concerns.
"""

from .heading import Heading, UP, DOWN, LEFT, RIGHT
from .constants import HEADINGS, START_BODY, START_HEADING
from .snake import Snake
from .game_state import GameState, RoundState

__all__ = [
    'Heading', 'UP', 'DOWN', 'LEFT', 'RIGHT',
    'HEADINGS', 'START_BODY', 'START_HEADING',
    'Snake',
    'GameState', 'RoundState',
]
