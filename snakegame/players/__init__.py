"""
Automatic players for Snake.

Players only see GameState snapshots and answer with a heading; the
KeyboardDriver turns that answer into a key press.
"""

from .base import Player
from .random_player import RandomPlayer
from .driver import KeyboardDriver

__all__ = [
    'Player',
    'RandomPlayer',
    'KeyboardDriver',
]
