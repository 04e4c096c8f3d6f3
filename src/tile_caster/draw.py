"""Draw commands handed to a drawing surface.

Coordinates are in virtual screen pixels with y pointing down. The top-down
map is drawn at one pixel per world unit in the top left corner; the wall view
sits to its right.
"""

from dataclasses import dataclass
from typing import Union

from .vector import Vector2D

__all__ = ["Color", "FillRect", "Segment", "Disc", "DrawCommand"]


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB color with 0-255 channels."""

    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, code: str) -> "Color":
        """Parse `"#rrggbb"`."""
        code = code.lstrip("#")
        if len(code) != 6:
            raise ValueError(f"expected a #rrggbb color, got {code!r}")
        return cls(int(code[0:2], 16), int(code[2:4], 16), int(code[4:6], 16))

    def scaled(self, factor: float) -> "Color":
        """Return the color with every channel multiplied by `factor`."""
        return Color(round(self.r * factor), round(self.g * factor), round(self.b * factor))

    @property
    def luminance(self) -> float:
        """Perceived brightness in `[0, 1]`."""
        return (0.2126 * self.r + 0.7152 * self.g + 0.0722 * self.b) / 255


@dataclass(frozen=True, slots=True)
class FillRect:
    """A filled axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float
    color: Color


@dataclass(frozen=True, slots=True)
class Segment:
    """A line from `start` to `end`."""

    start: Vector2D
    end: Vector2D
    color: Color


@dataclass(frozen=True, slots=True)
class Disc:
    """A filled circle."""

    center: Vector2D
    radius: float
    color: Color


DrawCommand = Union[FillRect, Segment, Disc]
