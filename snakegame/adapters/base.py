"""
Collaborator interfaces for the game engine.

The engine never owns its drawing surface, its input source or its clock;
hosts pass concrete implementations of these classes in.
"""

from dataclasses import dataclass
from typing import Any, Callable, Tuple


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


@dataclass(frozen=True)
class KeyEvent:
    """A key press, identified by its DOM key code (37 = left arrow, ...)."""

    key_code: int


class Surface:
    """
    A 2D drawing surface with a scale transform.

    Coordinates passed to fill_rect are logical; the current scale maps them
    to device pixels before _draw_rect is called.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.scale_x = 1.0
        self.scale_y = 1.0

    def reset_transform(self) -> None:
        self.scale_x = 1.0
        self.scale_y = 1.0

    def scale(self, sx: float, sy: float) -> None:
        """Multiply the current transform, like a canvas context does."""
        self.scale_x *= sx
        self.scale_y *= sy

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        self._draw_rect(
            round(x * self.scale_x),
            round(y * self.scale_y),
            round(w * self.scale_x),
            round(h * self.scale_y),
            hex_to_rgb(color),
        )

    def _draw_rect(self, x: int, y: int, w: int, h: int, rgb: Tuple[int, int, int]) -> None:
        """Fill a rectangle given in device pixels."""
        raise NotImplementedError


class InputSource:
    """Something that delivers events to registered listeners."""

    def add_listener(self, event_type: str, callback: Callable[[Any], None]) -> None:
        raise NotImplementedError

    def remove_listener(self, event_type: str, callback: Callable[[Any], None]) -> None:
        raise NotImplementedError


class Scheduler:
    """
    Timer service.

    Handles returned by call_every/call_later are opaque; cancel() accepts
    None, an already finished handle or a handle it does not know about.
    """

    def call_every(self, period_ms: int, callback: Callable[[], Any]) -> Any:
        """Run callback every period_ms milliseconds until cancelled."""
        raise NotImplementedError

    def call_later(self, delay_ms: int, callback: Callable[[], Any]) -> Any:
        """Run callback once after delay_ms milliseconds."""
        raise NotImplementedError

    def cancel(self, handle: Any) -> None:
        raise NotImplementedError
