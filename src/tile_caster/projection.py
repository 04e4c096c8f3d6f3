"""Wall distance to on-screen strip."""

import math
from dataclasses import dataclass
from typing import Optional

from .draw import Color
from .raycaster import Side

__all__ = ["Projection", "project", "shade", "column_to_screen_x"]

WALL_COLOR = Color.from_hex("#888888")
SIDE_WALL_COLOR = Color.from_hex("#555555")


@dataclass(frozen=True)
class Projection:
    """Vertical extent of one wall strip, in screen rows."""

    line_height: int
    """Unclipped height of the wall."""
    draw_start: int
    """First row drawn."""
    draw_end: int
    """Last row drawn."""


def project(
    perp_wall_dist: float, screen_height: int, max_line_height: Optional[int] = None
) -> Projection:
    """Project a perpendicular wall distance onto the screen.

    A distance of zero or less (caster flush against a wall) fills the
    screen height.
    """
    if perp_wall_dist > 0:
        line_height = math.floor(screen_height / perp_wall_dist)
    else:
        line_height = screen_height
    if max_line_height is not None:
        line_height = min(line_height, max_line_height)

    draw_start = max(0, (screen_height - line_height) // 2)
    draw_end = min(screen_height - 1, (screen_height + line_height) // 2)
    return Projection(line_height, draw_start, draw_end)


def shade(perp_wall_dist: float, side: Side, fade_distance: float = 10.0) -> Color:
    """Color of a wall strip, darker with distance.

    Horizontal hits use a darker base color to fake directional light. Walls
    at `fade_distance` cells or beyond are black.
    """
    base = SIDE_WALL_COLOR if side == Side.HORIZONTAL else WALL_COLOR
    light = min(1.0, max(0.0, 1 - perp_wall_dist / fade_distance))
    return base.scaled(light)


def column_to_screen_x(column: int, total: int, view_left: float, view_width: float) -> float:
    """Left edge of a column's strip.

    Columns run right to left: column 0 (camera-x -1, the caster's right
    hand on a y-down screen) is drawn at the right edge of the view.
    """
    strip_width = view_width / total
    return view_left + (total - 1 - column) * strip_width
