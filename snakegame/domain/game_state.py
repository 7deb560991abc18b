"""
GameState entity - a snapshot of the game at a point in time.
"""

from enum import Enum
from typing import List, Tuple, Optional

from .heading import Heading


class RoundState(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick: number of completed steps in the current round
        body: list of (x, y), head first
        food: (x, y) of the food, or None when the board is full
        heading: the heading applied on the most recent tick
        round_state: RoundState.RUNNING or RoundState.STOPPED
        alive: whether the snake is still alive
        death_reason: why the round ended, if it did
        width, height: board dimensions in tiles
    """

    def __init__(
        self,
        tick: int,
        body: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        heading: Heading,
        round_state: RoundState,
        alive: bool,
        width: int,
        height: int,
        death_reason: Optional[str] = None
    ):
        self.tick = tick
        self.body = body
        self.food = food
        self.heading = heading
        self.round_state = round_state
        self.alive = alive
        self.width = width
        self.height = height
        self.death_reason = death_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.body[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        T = snake body
        Rows are printed top to bottom, matching screen coordinates.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.body):
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = []
        for y in range(self.height):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Last digit of each column index
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, food={self.food}, "
            f"length={len(self.body)}, state={self.round_state.value}>"
        )
