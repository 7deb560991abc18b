"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple, Optional


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        alive: whether this snake is still alive
        death_reason: e.g., 'wall', 'self', 'board_full'
        death_round: The tick number when the snake died
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        self.positions = deque(positions)
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_round: Optional[int] = None

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def index_of(self, position: Tuple[int, int]) -> int:
        """Return the index of the segment at position, or -1."""
        for index, part in enumerate(self.positions):
            if part == position:
                return index
        return -1

    def truncate(self, length: int) -> None:
        """Keep only the first `length` segments."""
        while len(self.positions) > length:
            self.positions.pop()

    def kill(self, reason: str, round_number: int) -> None:
        self.alive = False
        self.death_reason = reason
        self.death_round = round_number
