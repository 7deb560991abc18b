"""
Base player interface for the game engine.
"""

from domain.game_state import GameState
from domain.heading import Heading


class Player:
    """
    Base class/interface for automatic player logic.

    A player looks at a snapshot of the game and returns the heading it
    wants; it never touches the engine directly.
    """

    def get_move(self, game_state: GameState) -> Heading:
        """
        Return a heading given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of domain.heading.LEFT, UP, RIGHT, DOWN
        """
        raise NotImplementedError
