"""
Pillow-backed drawing surface, used for headless rendering and recordings.
"""

from typing import Tuple

import numpy as np
from PIL import Image, ImageDraw

from .base import Surface


class ImageSurface(Surface):
    """Draws into an in-memory RGB image."""

    def __init__(self, width: int, height: int):
        super().__init__(width, height)
        self.image = Image.new('RGB', (width, height), (0, 0, 0))
        self._draw = ImageDraw.Draw(self.image)

    def _draw_rect(self, x: int, y: int, w: int, h: int, rgb: Tuple[int, int, int]) -> None:
        if w <= 0 or h <= 0:
            return
        # PIL rectangles include both corners
        self._draw.rectangle([x, y, x + w - 1, y + h - 1], fill=rgb)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        return self.image.getpixel((x, y))

    def snapshot(self) -> Image.Image:
        """Return a copy of the current image."""
        return self.image.copy()

    def to_array(self) -> np.ndarray:
        """Current image as a (height, width, 3) uint8 array."""
        return np.array(self.image)
