"""Movement against the tile grid."""

from .caster import Caster
from .grid_map import GridMap
from .vector import Vector2D

__all__ = ["is_blocked", "try_move"]


def is_blocked(game_map: GridMap, x: float, y: float, radius: float = 0.0) -> bool:
    """Whether a body at `(x, y)` overlaps a wall.

    With a positive `radius` the four corners of the square of half-width
    `radius` around the point are tested instead of the point itself.
    """
    if radius <= 0:
        return game_map.is_wall(x, y)
    return any(
        game_map.is_wall(x + dx, y + dy)
        for dx in (-radius, radius)
        for dy in (-radius, radius)
    )


def try_move(
    caster: Caster,
    game_map: GridMap,
    proposed_x: float,
    proposed_y: float,
    radius: float = 0.0,
) -> None:
    """Move `caster` toward a proposed position, sliding along walls.

    The full move is taken if it is clear. Otherwise only the y change is
    kept if that is clear, then only the x change; if neither is clear the
    caster stays put.
    """
    old_x, old_y = caster.pos
    if not is_blocked(game_map, proposed_x, proposed_y, radius):
        caster.pos = Vector2D(proposed_x, proposed_y)
    elif not is_blocked(game_map, old_x, proposed_y, radius):
        caster.pos = Vector2D(old_x, proposed_y)
    elif not is_blocked(game_map, proposed_x, old_y, radius):
        caster.pos = Vector2D(proposed_x, old_y)
