"""
Heading value object - the direction the snake travels in.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Heading:
    """
    A direction of travel expressed as an axis plus a signed unit step.

    Attributes:
        axis: 'x' or 'y'
        sign: +1 or -1 (screen coordinates, so UP is y - 1)
    """

    axis: str
    sign: int

    def advance(self, position: Tuple[int, int]) -> Tuple[int, int]:
        """Return the position one step further along this heading."""
        x, y = position
        if self.axis == "x":
            return (x + self.sign, y)
        return (x, y + self.sign)

    def same_axis(self, other: "Heading") -> bool:
        return self.axis == other.axis


LEFT = Heading("x", -1)
UP = Heading("y", -1)
RIGHT = Heading("x", 1)
DOWN = Heading("y", 1)
