"""
Snake game engine.

GameEngine owns the whole round: body, heading, food and the running /
stopped state. Drawing, key input and timing are collaborators passed in by
the host; the engine registers its own callbacks on them in start() and
removes them in stop().
"""

import logging
import random
from typing import Any, Optional, Tuple

from adapters.base import InputSource, KeyEvent, Scheduler, Surface
from config import GameConfig
from domain.constants import (
    DEATH_BOARD_FULL,
    DEATH_SELF,
    DEATH_WALL,
    HEADINGS,
    START_BODY,
    START_HEADING,
)
from domain.game_state import GameState, RoundState
from domain.heading import Heading
from domain.snake import Snake

logger = logging.getLogger(__name__)

KEYDOWN = "keydown"


class GameEngine:
    """
    Manages:
      - Board (width, height) and its mapping onto the surface
      - The snake and its pending / last applied heading
      - The food
      - The periodic tick and the delayed restart after a loss
    """

    def __init__(
        self,
        surface: Surface,
        event_source: InputSource,
        scheduler: Scheduler,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None
    ):
        self.surface = surface
        self.event_source = event_source
        self.scheduler = scheduler
        self.config = (config or GameConfig()).validate()
        self.rng = rng or random.Random()

        self.width = self.config.width
        self.height = self.config.height

        self.snake: Optional[Snake] = None
        self.direction: Heading = START_HEADING
        self.last_direction: Heading = START_HEADING
        self.food: Optional[Tuple[int, int]] = None
        self.tick = 0
        self.round_state = RoundState.STOPPED
        self.rounds_played = 0

        self._interval_handle: Any = None
        self._restart_handle: Any = None

        # Reverse lookup, key code -> heading
        self._key_headings = {
            code: HEADINGS[name] for name, code in self.config.keybindings.items()
        }

    @property
    def running(self) -> bool:
        return self.round_state is RoundState.RUNNING

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Reset to the starting round and draw it."""
        logical_width, logical_height = self.config.logical_size
        # Reset transform in case the surface has already been scaled
        self.surface.reset_transform()
        self.surface.scale(self.surface.width / logical_width, self.surface.height / logical_height)

        self.direction = START_HEADING
        self.last_direction = START_HEADING
        self.snake = Snake(list(START_BODY))
        self.tick = 0
        # A manual re-initialize supersedes the delayed restart from the last loss
        self.scheduler.cancel(self._restart_handle)
        self._restart_handle = None
        self.rounds_played += 1
        self.relocate_food()
        logger.debug("Round %s initialized, food at %s", self.rounds_played, self.food)
        self.render()

    def start(self) -> None:
        """Begin listening for keys and ticking."""
        if self.running:
            logger.warning("start() called while already running; ignoring")
            return
        self.event_source.add_listener(KEYDOWN, self.on_keydown)
        self._interval_handle = self.scheduler.call_every(self.config.tick_period_ms, self.step)
        self.round_state = RoundState.RUNNING
        logger.info("Round %s started (period %sms)", self.rounds_played, self.config.tick_period_ms)

    def stop(self) -> None:
        """Cancel the tick and stop listening, in one go."""
        self.scheduler.cancel(self._interval_handle)
        self._interval_handle = None
        self.event_source.remove_listener(KEYDOWN, self.on_keydown)
        if self.running:
            logger.info("Round %s stopped after %s ticks", self.rounds_played, self.tick)
        self.round_state = RoundState.STOPPED

    def close(self) -> None:
        """Stop and drop any pending restart."""
        self.stop()
        self.scheduler.cancel(self._restart_handle)
        self._restart_handle = None

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def relocate_food(self) -> bool:
        """
        Put the food on a random cell not covered by the snake.

        Returns:
            False (and food set to None) if the snake covers the whole board
        """
        if len(self.snake) >= self.width * self.height:
            self.food = None
            return False
        occupied = set(self.snake.positions)
        while True:
            candidate = (
                self.rng.randrange(self.width),
                self.rng.randrange(self.height),
            )
            if candidate not in occupied:
                self.food = candidate
                return True

    def lose(self, reason: str = DEATH_WALL) -> None:
        """End the round and schedule the restart."""
        self.snake.kill(reason, self.tick)
        logger.info(
            "Round %s lost (%s) at tick %s with length %s\n%s",
            self.rounds_played,
            reason,
            self.tick,
            len(self.snake),
            self.get_current_state().print_board(),
        )
        self.stop()
        self._restart_handle = self.scheduler.call_later(self.config.restart_delay_ms, self._restart)

    def _restart(self) -> None:
        self.initialize()
        if self.config.resume_after_loss:
            self.start()

    def next_frame(self) -> None:
        self.last_direction = self.direction
        self.tick += 1
        new_position = self.last_direction.advance(self.snake.head)

        # Check out of bounds
        x, y = new_position
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            self.lose(DEATH_WALL)
            return

        # Check if the snake is eating itself
        eat_index = self.snake.index_of(new_position)
        if eat_index != -1:
            # Only reachable from an inconsistent state
            if eat_index == 0:
                self.lose(DEATH_SELF)
                return
            self.snake.truncate(eat_index)

        food_eaten = new_position == self.food

        self.snake.positions.appendleft(new_position)
        if food_eaten:
            # Grow: keep the tail and move the food elsewhere
            if not self.relocate_food():
                self.lose(DEATH_BOARD_FULL)
        else:
            self.snake.positions.pop()

    def step(self) -> None:
        """Advance one tick and redraw."""
        if self.snake is None:
            raise RuntimeError("step() called before initialize()")
        if not self.snake.alive:
            logger.debug("Ignoring step after the round ended")
            return
        self.next_frame()
        logger.debug("Tick %s: head=%s length=%s", self.tick, self.snake.head, len(self.snake))
        self.render()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def fill_tile(self, x: int, y: int, color: str) -> None:
        size_x, size_y = self.config.tile_size
        margin_x, margin_y = self.config.tile_margin
        self.surface.fill_rect(
            size_x * x + margin_x,
            size_y * y + margin_y,
            size_x - margin_x * 2,
            size_y - margin_y * 2,
            color,
        )

    def render(self) -> None:
        if self.snake is None:
            raise RuntimeError("render() called before initialize()")
        colors = self.config.colors
        logical_width, logical_height = self.config.logical_size

        self.surface.fill_rect(0, 0, logical_width, logical_height, colors["background"])
        for index, (x, y) in enumerate(self.snake.positions):
            self.fill_tile(x, y, colors["head"] if index == 0 else colors["body"])
        if self.food is not None:
            self.fill_tile(self.food[0], self.food[1], colors["food"])

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def on_keydown(self, event: KeyEvent) -> None:
        new_direction = self._key_headings.get(event.key_code)
        if new_direction is None:
            return
        # Reject anything on the axis we are already moving along
        # (reversals as well as repeats of the current direction)
        if new_direction.same_axis(self.last_direction):
            return
        self.direction = new_direction

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        if self.snake is None:
            raise RuntimeError("get_current_state() called before initialize()")
        return GameState(
            tick=self.tick,
            body=list(self.snake.positions),
            food=self.food,
            heading=self.last_direction,
            round_state=self.round_state,
            alive=self.snake.alive,
            width=self.width,
            height=self.height,
            death_reason=self.snake.death_reason,
        )
