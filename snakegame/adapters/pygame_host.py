"""
pygame window host: a drawing surface and a key event source in one.
"""

import logging
from typing import Dict, Optional, Tuple

import pygame

from domain.constants import DEFAULT_KEYBINDINGS
from .base import KeyEvent, Surface
from .events import EventSource
from .scheduling import RealtimeScheduler

logger = logging.getLogger(__name__)

# pygame key -> direction name used in key bindings
KEY_DIRECTIONS = {
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_UP: "up",
    pygame.K_w: "up",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
    pygame.K_DOWN: "down",
    pygame.K_s: "down",
}


def translate_key(key: int, keybindings: Optional[Dict[str, int]] = None) -> int:
    """
    Map a pygame key constant to the key code bound to its direction.

    Arrow keys and WASD are translated; any other key passes through unchanged.
    """
    keybindings = keybindings or DEFAULT_KEYBINDINGS
    direction = KEY_DIRECTIONS.get(key)
    if direction is None:
        return key
    return keybindings[direction]


class PygameHost(Surface, EventSource):
    """
    Opens a window of the given pixel size. Key presses are dispatched as
    'keydown' KeyEvents to registered listeners.
    """

    def __init__(
        self,
        width: int,
        height: int,
        keybindings: Optional[Dict[str, int]] = None,
        caption: str = "Snake",
        fps: int = 120
    ):
        Surface.__init__(self, width, height)
        EventSource.__init__(self)
        self.keybindings = dict(keybindings or DEFAULT_KEYBINDINGS)
        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(caption)
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.running = False

    def _draw_rect(self, x: int, y: int, w: int, h: int, rgb: Tuple[int, int, int]) -> None:
        pygame.draw.rect(self.screen, rgb, (x, y, w, h))

    def pump_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                else:
                    self.dispatch("keydown", KeyEvent(translate_key(event.key, self.keybindings)))

    def run(self, scheduler: RealtimeScheduler) -> None:
        """Run the window loop until the window is closed or Escape is pressed."""
        self.running = True
        logger.info("Window loop started (%sx%s)", self.width, self.height)
        try:
            while self.running:
                self.pump_events()
                scheduler.run_pending()
                pygame.display.flip()
                self.clock.tick(self.fps)
        finally:
            pygame.quit()
            logger.info("Window closed")
