"""A character-buffer drawing surface."""

import math
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from .draw import Color, Disc, DrawCommand, FillRect, Segment

__all__ = ["TerminalSurface"]


@dataclass
class TerminalSurface:
    """Paints draw commands into a grid of characters.

    Commands use virtual screen coordinates, which are scaled to the size of
    the character buffer. Colors are drawn as characters of similar
    brightness.

    Parameters
    ----------
    screen_width : int
        Width of the virtual screen commands are drawn in.
    screen_height : int
        Height of the virtual screen commands are drawn in.
    ascii_map : NDArray[np.str_]
        Characters from darkest to brightest.
    """

    screen_width: int
    """Width of the virtual screen commands are drawn in."""
    screen_height: int
    """Height of the virtual screen commands are drawn in."""
    ascii_map: NDArray[np.str_] = field(
        default_factory=lambda: np.array(list(" .,:;<+*LtCa4U80dQM@"))
    )
    """Characters from darkest to brightest."""

    def __post_init__(self) -> None:
        self._shades = len(self.ascii_map) - 1
        self.resize(self.screen_width, self.screen_height)

    def resize(self, width: int, height: int) -> None:
        """Resize the character buffer."""
        self.width = width
        """Width of the buffer in characters."""
        self.height = height
        """Height of the buffer in characters."""
        self.buffer = np.full((height, width), " ")
        """The array in which commands are painted."""
        self._scale_x = width / self.screen_width
        self._scale_y = height / self.screen_height

    def char_for(self, color: Color) -> str:
        """The character drawn for `color`."""
        return str(self.ascii_map[round(color.luminance * self._shades)])

    def paint(self, commands: list[DrawCommand]) -> None:
        """Clear the buffer and paint `commands` in order."""
        self.buffer[:] = " "
        for command in commands:
            if isinstance(command, FillRect):
                self._fill_rect(command)
            elif isinstance(command, Segment):
                self._segment(command)
            elif isinstance(command, Disc):
                self._disc(command)
            else:
                raise TypeError(f"cannot paint {command!r}")

    def lines(self) -> list[str]:
        """The buffer as one string per row."""
        return ["".join(row) for row in self.buffer]

    def _fill_rect(self, rect: FillRect) -> None:
        if rect.width <= 0 or rect.height <= 0:
            return
        left = math.floor(rect.x * self._scale_x)
        top = math.floor(rect.y * self._scale_y)
        right = max(left + 1, math.ceil((rect.x + rect.width) * self._scale_x))
        bottom = max(top + 1, math.ceil((rect.y + rect.height) * self._scale_y))
        left, right = max(0, left), min(self.width, right)
        top, bottom = max(0, top), min(self.height, bottom)
        if left < right and top < bottom:
            self.buffer[top:bottom, left:right] = self.char_for(rect.color)

    def _segment(self, segment: Segment) -> None:
        x0, y0 = segment.start.x * self._scale_x, segment.start.y * self._scale_y
        x1, y1 = segment.end.x * self._scale_x, segment.end.y * self._scale_y
        samples = int(max(abs(x1 - x0), abs(y1 - y0))) + 2
        columns = np.floor(np.linspace(x0, x1, samples)).astype(int)
        rows = np.floor(np.linspace(y0, y1, samples)).astype(int)
        inside = (columns >= 0) & (columns < self.width) & (rows >= 0) & (rows < self.height)
        self.buffer[rows[inside], columns[inside]] = self.char_for(segment.color)

    def _disc(self, disc: Disc) -> None:
        cx, cy = disc.center.x, disc.center.y
        ys, xs = np.mgrid[0 : self.height, 0 : self.width]
        # Cell centers back in virtual coordinates.
        dx = (xs + 0.5) / self._scale_x - cx
        dy = (ys + 0.5) / self._scale_y - cy
        mask = dx**2 + dy**2 <= disc.radius**2
        col, row = int(cx * self._scale_x), int(cy * self._scale_y)
        if 0 <= col < self.width and 0 <= row < self.height:
            mask[row, col] = True
        self.buffer[mask] = self.char_for(disc.color)
