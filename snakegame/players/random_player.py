"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.game_state import GameState
from domain.heading import Heading, LEFT, UP, RIGHT, DOWN
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions
    and that the engine will accept (not on the current axis).
    """

    def __init__(self, rng: Optional[random.Random] = None, prefer_food: bool = True):
        self.rng = rng or random.Random()
        self.prefer_food = prefer_food

    def get_move(self, game_state: GameState) -> Heading:
        current = game_state.heading
        body = game_state.body

        # Filter out moves that:
        # 1. Hit walls
        # 2. Hit own body (except tail, which will move)
        valid_moves: List[Heading] = []
        for move in (LEFT, UP, RIGHT, DOWN):
            if move.same_axis(current) and move != current:
                continue
            new_x, new_y = move.advance(game_state.head)
            if (new_x < 0 or new_x >= game_state.width or
                new_y < 0 or new_y >= game_state.height):
                continue
            if (new_x, new_y) in body[:-1]:
                continue
            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return current

        if self.prefer_food and game_state.food is not None:
            towards = [move for move in valid_moves if self._closer(move, game_state)]
            if towards:
                return self.rng.choice(towards)

        return self.rng.choice(valid_moves)

    @staticmethod
    def _closer(move: Heading, game_state: GameState) -> bool:
        fx, fy = game_state.food
        hx, hy = game_state.head
        nx, ny = move.advance(game_state.head)
        return abs(nx - fx) + abs(ny - fy) < abs(hx - fx) + abs(hy - fy)
